"""
Domain errors raised by the service layer.
Routers translate them into HTTP responses; the assistant catches them at its
boundary and reports a failure result instead.
"""


class ConductorAssistError(Exception):
    """Base class for every error raised by the services."""


class NotFoundError(ConductorAssistError):
    """A route, ticket or conductor the request depends on does not exist."""


class UpstreamError(ConductorAssistError):
    """The database or the language model failed."""


class LLMError(UpstreamError):
    """The Gemini API call failed or returned an unusable payload."""


class ExtractionError(ConductorAssistError):
    """The model's ticket extraction was not valid JSON or had the wrong shape."""


class TicketConflictError(ConductorAssistError):
    """The store rejected a ticket because its number already exists."""
