"""
API routes.

This module defines the HTTP endpoints:
- GET /       - Static greeting
- POST /users - Echo back a user with the fixed identifier
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

from src.api.models import USER_ID, CreateUserRequest, User
from src.config.logging_setup import APP_LOGGER_NAME

logger = logging.getLogger(f"{APP_LOGGER_NAME}.routes")

router = APIRouter()


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Greeting",
)
async def root() -> str:
    """Return the static greeting."""
    return "Hello World"


@router.post(
    "/users",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    tags=["users"],
    responses={
        422: {"description": "Malformed body or missing username"},
    },
    summary="Create a user",
    description="Echo back the submitted username together with the user identifier.",
)
async def create_user(payload: CreateUserRequest) -> User:
    """
    Create a user from the submitted username.

    - **username**: any string, returned unchanged

    Nothing is stored; the identifier is always the same.
    """
    logger.debug("Creating user %r", payload.username)
    return User(id=USER_ID, username=payload.username)
