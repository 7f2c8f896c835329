"""
API request and response models.

Pydantic models for FastAPI body decoding and OpenAPI schema generation.
Only the type shape is enforced; usernames are taken verbatim.
"""

from pydantic import BaseModel, Field

# Placeholder identifier returned for every created user
USER_ID = 1337


class CreateUserRequest(BaseModel):
    """Request model for user creation."""

    username: str


class User(BaseModel):
    """Response model for a created user."""

    id: int = Field(..., ge=0)
    username: str
