# src/spacedash/middleware/__init__.py

"""Middleware components for the SpaceDash API."""

from .logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
