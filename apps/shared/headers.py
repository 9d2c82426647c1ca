"""Response headers for the calendar service."""

from fastapi import FastAPI, Request
from fastapi.responses import Response

# Calendar state changes with every request, never cache it
DEFAULT_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "X-Content-Type-Options": "nosniff",
}


def setup_response_headers(app: FastAPI) -> None:

    @app.middleware("http")
    async def add_default_headers(request: Request, call_next) -> Response:
        response = await call_next(request)
        for name, value in DEFAULT_HEADERS.items():
            response.headers.setdefault(name, value)
        return response
