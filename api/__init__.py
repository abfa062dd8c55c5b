"""
Messagely API package.

Provides the FastAPI application for the Messagely direct messaging service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
