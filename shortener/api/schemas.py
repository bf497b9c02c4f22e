"""
API Request and Response Schemas

This module defines the Pydantic models returned by the API.
Field aliases give the camelCase names clients see on the wire.
"""

from pydantic import BaseModel, ConfigDict, Field


class ShortUrlResult(BaseModel):
    """Response model for URL shortening endpoint."""
    model_config = ConfigDict(populate_by_name=True)

    short_url: str = Field(..., alias="shortUrl", description="The generated short URL token")
    get_url_path: str = Field(
        ...,
        alias="getUrlPath",
        description="Absolute URL of the endpoint that resolves the token"
    )
