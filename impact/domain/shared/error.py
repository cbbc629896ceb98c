"""Error hierarchy for the impact reports server.

Error layers:
- ImpactError: Base class for all errors raised by this package
- DomainError: Lookups that miss, data that does not line up (4xx responses)
- InfrastructureError: Remote collaborators and configuration (5xx responses)

These errors are mapped to HTTP responses by the global exception handler in app.py.
"""


class ImpactError(Exception):
    """Base class for all impact errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (typically 4xx)
# =============================================================================


class DomainError(ImpactError):
    """Base class for domain errors."""


class NotFoundError(DomainError):
    """Report lookup missed after the cache was populated."""


class ContentMismatchError(DomainError):
    """A claim's metadata title has no matching editorial record."""


# =============================================================================
# Infrastructure Errors (typically 5xx)
# =============================================================================


class InfrastructureError(ImpactError):
    """Base class for infrastructure/system errors."""


class RemoteFetchError(InfrastructureError):
    """Claim indexer, metadata store or CMS request failed or returned garbage."""


class ConfigurationError(InfrastructureError):
    """Required setting is missing."""
