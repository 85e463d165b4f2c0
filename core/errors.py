"""
Error taxonomy for the dispatch pipeline.

Every failure a caller can observe is one of these kinds. Each error
carries the HTTP status the API layer reports it with; the payload is
always {"status": "error", "message": ...}.
"""


class AdvisorError(Exception):
    """Base class for all dispatch failures."""

    kind = "error"
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"status": "error", "message": self.message}


class InvalidInputError(AdvisorError):
    """Missing or invalid agent name or output format. Never reaches the provider."""

    kind = "invalid_input"
    http_status = 400


class AgentNotFoundError(AdvisorError):
    """Template store has no agent with the requested name."""

    kind = "agent_not_found"
    http_status = 404

    def __init__(self, agent_name: str):
        super().__init__(f'Agent "{agent_name}" not found')
        self.agent_name = agent_name


class ProviderError(AdvisorError):
    """Completion call failed or returned an unparseable/empty response."""

    kind = "provider_error"
    http_status = 502


class DeliveryError(AdvisorError):
    """Outbound message could not be produced or sent."""

    kind = "delivery_error"
    http_status = 502


class ConfigurationError(AdvisorError):
    """Service cannot be assembled from the current settings (e.g. missing API key)."""

    kind = "configuration_error"
    http_status = 503


class PDFConversionError(DeliveryError):
    """Raised when PDF conversion fails."""

    kind = "pdf_conversion_error"
