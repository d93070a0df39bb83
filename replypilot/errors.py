"""Service errors and the JSON body they map to."""


class ReplyPilotError(Exception):
    """Base error rendered as ``{"error": ..., "details": ...}`` with ``status_code``."""

    status_code = 500
    error = "Internal server error"

    def __init__(self, details: str | None = None, *, error: str | None = None):
        super().__init__(details or error or self.error)
        self.details = details
        if error is not None:
            self.error = error

    def to_body(self) -> dict:
        body = {"error": self.error}
        if self.details:
            body["details"] = self.details
        return body


class ReviewValidationError(ReplyPilotError):
    status_code = 400
    error = "Missing review text"


class ProviderConfigError(ReplyPilotError):
    status_code = 500
    error = "MISSING_API_KEY"


class ProviderError(ReplyPilotError):
    status_code = 500
    error = "PROVIDER_ERROR"


class EmptyReplyError(ReplyPilotError):
    status_code = 502
    error = "EMPTY_REPLY"


class UsageLimitError(ReplyPilotError):
    status_code = 429
    error = "LIMIT_REACHED"


class InternalServerError(ReplyPilotError):
    status_code = 500
    error = "Internal server error"
