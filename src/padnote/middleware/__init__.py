"""Middleware for cross-cutting concerns."""

from .nocache import NoCacheMiddleware

__all__ = ["NoCacheMiddleware"]
