"""
Response body decoding.

Picks a decoder from the response's content-type header: JSON for any
type containing application/json, text for everything else.
"""

from typing import Any

import httpx

from http_retry.models.enums import MimeType


async def decode_body(response: httpx.Response) -> Any:
    """
    Decode a response body based on its content-type.
    
    Args:
        response: httpx.Response (the body is read if not already loaded)
        
    Returns:
        Parsed JSON for application/json responses, str otherwise
        
    Raises:
        TypeError: response is not an httpx.Response
        json.JSONDecodeError: Declared JSON body is malformed
    """
    if not isinstance(response, httpx.Response):
        raise TypeError(f"Expected instance of httpx.Response, got {type(response).__name__}")
    
    await response.aread()
    content_type = response.headers.get("content-type", "")
    
    if MimeType.JSON.value in content_type:
        return response.json()
    return response.text
