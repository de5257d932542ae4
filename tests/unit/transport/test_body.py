"""
Unit tests for decode_body.
"""

import httpx
import pytest

from http_retry.transport.body import decode_body


@pytest.mark.asyncio
async def test_decode_json_body():
    response = httpx.Response(200, json={"error": "not found"})

    assert await decode_body(response) == {"error": "not found"}


@pytest.mark.asyncio
async def test_decode_json_with_charset():
    response = httpx.Response(
        200,
        content=b'{"a": 1}',
        headers={"content-type": "application/json; charset=utf-8"},
    )

    assert await decode_body(response) == {"a": 1}


@pytest.mark.asyncio
async def test_decode_text_body():
    response = httpx.Response(200, text="Text")

    assert await decode_body(response) == "Text"


@pytest.mark.asyncio
async def test_decode_without_content_type():
    response = httpx.Response(200, content=b"raw")

    assert await decode_body(response) == "raw"


@pytest.mark.asyncio
async def test_decode_rejects_non_response():
    with pytest.raises(TypeError, match="httpx.Response"):
        await decode_body({"status": 200})
