"""Custom Dishka scopes for the impact server."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """Dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Application lifetime (report cache, HTTP clients)
    - UOW: Unit of Work (one per HTTP request)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
