"""Shared CORS configuration for the calendar service."""

import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware


# Always allowed
PRODUCTION_ORIGINS = [
    "https://vuhnger.dev",
    "https://www.vuhnger.dev",
    "https://vuhnger.github.io",
]

# Only outside production
DEV_ORIGINS = [
    "http://localhost:5173",
    "http://localhost:3000",
]


def get_allowed_origins() -> list[str]:
    """Allowed CORS origins for the current environment."""
    origins = list(PRODUCTION_ORIGINS)

    frontend_url = os.getenv("FRONTEND_URL")
    if frontend_url:
        clean_url = frontend_url.rstrip("/")
        if clean_url not in origins:
            origins.append(clean_url)

    if os.getenv("ENVIRONMENT", "development") != "production":
        origins.extend(DEV_ORIGINS)

    return origins


def setup_cors(app: FastAPI) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_allowed_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
