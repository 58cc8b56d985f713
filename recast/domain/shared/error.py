"""Error hierarchy for recast.

Error layers:
- RecastError: Base class for all recast errors
- DomainError: Transform failures, missing scopes, unknown indexes
- InfrastructureError: System-level failures like storage or misconfiguration
"""


class RecastError(Exception):
    """Base class for all recast errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors
# =============================================================================


class DomainError(RecastError):
    """Base class for domain errors."""


class NotFoundError(DomainError):
    """Resource not found."""


class TransformError(DomainError):
    """A registered transform callback failed while processing a record.

    The record is not committed to the index.
    """

    def __init__(self, message: str, index_name: str, record_id: str, callback: str) -> None:
        super().__init__(message, code="TRANSFORM_FAILED")
        self.index_name = index_name
        self.record_id = record_id
        self.callback = callback


class MissingScopeError(DomainError):
    """A content-store read was attempted without an active consistency scope."""


# =============================================================================
# Infrastructure Errors
# =============================================================================


class InfrastructureError(RecastError):
    """Base class for infrastructure/system errors."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
