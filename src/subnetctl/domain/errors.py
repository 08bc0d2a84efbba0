"""Error types shared by the domain and provider adapters."""

from __future__ import annotations


class ProviderError(RuntimeError):
    """Raised when the resource-lifecycle provider rejects or fails a call.

    ``code`` carries the provider's structured error code (for EC2 the
    ``Error.Code`` of the response) so callers can branch without parsing
    the message.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        operation: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.operation = operation
