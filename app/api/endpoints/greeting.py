"""
Plain-text greeting endpoints.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.core.config import settings

router = APIRouter(tags=["Welcome"])


@router.get("/hello", response_class=PlainTextResponse)
async def hello() -> str:
    """Returns a simple hello world message"""
    return "Hello, World!"


@router.get("/", response_class=PlainTextResponse)
async def welcome() -> str:
    """Returns a welcome message with application information"""
    return f"Welcome to the {settings.PROJECT_NAME} on port {settings.PORT}!"
