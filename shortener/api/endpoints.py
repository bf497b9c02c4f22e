"""
FastAPI Endpoints for URL Shortener Service

This module defines the two REST endpoints with minimal logic.
Endpoints only handle:
- Reading the request (raw URL body, token path parameter)
- Error handling and HTTP responses
- Delegating to service layer

Error mapping:
- InvalidArgumentError -> 400 with a fixed message
- Missing mapping -> 404
- Anything else -> 500 with a generic message; details only go to the log
"""

import json
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status

from shortener.api.schemas import ShortUrlResult
from shortener.core.exceptions import InvalidArgumentError
from shortener.services.url_service import UrlShortenerService

logger = logging.getLogger(__name__)

INVALID_URL_MESSAGE = "Invalid URL format"
INVALID_SHORT_URL_MESSAGE = "Invalid short URL format"
NOT_FOUND_MESSAGE = "Not Found"
INTERNAL_ERROR_MESSAGE = "An error occurred while processing your request."


router = APIRouter()


def get_url_shortener_service(request: Request) -> UrlShortenerService:
    """
    Dependency returning the service instance attached to the application.

    Tests swap it out through app.dependency_overrides.
    """
    return request.app.state.url_shortener_service


async def read_original_url(request: Request) -> Optional[str]:
    """
    Extract the original URL from the request body.

    The body is the URL itself: either a JSON string literal or plain text.
    A JSON body that is not a string, and an empty body, yield None.

    Args:
        request: FastAPI Request object

    Returns:
        The URL string, or None when the body carries no URL
    """
    body = await request.body()
    if not body:
        return None

    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError:
        return None

    media_type = request.headers.get("Content-Type", "").split(";")[0].strip().lower()
    if "json" not in media_type:
        return text

    try:
        value = json.loads(text)
    except ValueError:
        return None

    return value if isinstance(value, str) else None


@router.post(
    "",
    response_model=ShortUrlResult,
    status_code=status.HTTP_200_OK,
    summary="Create a short URL",
    description="Takes an absolute http/https URL as the raw request body and returns a short URL token",
    responses={
        400: {"description": INVALID_URL_MESSAGE},
        500: {"description": INTERNAL_ERROR_MESSAGE},
    },
)
async def create_short_url(
    request: Request,
    service: UrlShortenerService = Depends(get_url_shortener_service)
) -> ShortUrlResult:
    """
    Create a new short URL from a long URL.

    Returns:
        ShortUrlResult with the token and the URL that resolves it
    """
    try:
        original_url = await read_original_url(request)
        short_url = service.shorten(original_url)
        get_url_path = str(request.url_for("get_original_url", short_url=short_url))

        return ShortUrlResult(short_url=short_url, get_url_path=get_url_path)

    except InvalidArgumentError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=INVALID_URL_MESSAGE
        )
    except Exception:
        logger.exception("Failed to create short URL")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR_MESSAGE
        )


@router.get(
    "/{short_url}",
    response_model=str,
    status_code=status.HTTP_200_OK,
    summary="Resolve a short URL",
    description="Takes a short URL token and returns the original URL",
    responses={
        400: {"description": INVALID_SHORT_URL_MESSAGE},
        404: {"description": NOT_FOUND_MESSAGE},
        500: {"description": INTERNAL_ERROR_MESSAGE},
    },
)
async def get_original_url(
    short_url: str,
    service: UrlShortenerService = Depends(get_url_shortener_service)
) -> str:
    """
    Return the original URL for a given short URL.

    Args:
        short_url: The token to look up

    Returns:
        The original URL

    Raises:
        HTTPException 400: If the token format is invalid
        HTTPException 404: If nothing is stored under the token
        HTTPException 500: If the lookup fails unexpectedly
    """
    try:
        original_url = service.get_original_url(short_url)
    except InvalidArgumentError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=INVALID_SHORT_URL_MESSAGE
        )
    except Exception:
        logger.exception(f"Failed to resolve short URL '{short_url}'")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR_MESSAGE
        )

    if not original_url:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=NOT_FOUND_MESSAGE
        )

    return original_url
