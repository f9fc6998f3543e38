"""Error taxonomy shared by every data source client."""

from typing import Optional


class BrasilDataError(Exception):
    """Base class for all client failures."""


class ValidationError(BrasilDataError):
    """Raised when caller input fails a precondition before any request."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class ConfigurationError(BrasilDataError):
    """Raised when a client is missing required configuration."""


class MissingAPIKeyError(ConfigurationError):
    """Raised when a source that needs an API key has none configured."""

    def __init__(self, env_var: str):
        self.env_var = env_var
        super().__init__(f"API key not configured (set {env_var})")


class TransportError(BrasilDataError):
    """Raised when the request could not be completed at the network level."""


class RequestTimeoutError(TransportError):
    """Raised when the request exceeds its timeout."""


class UpstreamHTTPError(BrasilDataError):
    """Raised for non-2xx responses. Carries the raw body verbatim."""

    def __init__(
        self,
        status_code: int,
        body: str,
        url: Optional[str] = None,
        message: Optional[str] = None,
    ):
        self.status_code = status_code
        self.body = body
        self.url = url
        super().__init__(message or f"API error (status {status_code}): {body}")


class NotFoundError(UpstreamHTTPError):
    """Raised when the upstream reports that the entity does not exist."""


class CNPJNotFoundError(NotFoundError):
    """Raised when Minha Receita has no company for the given CNPJ."""

    def __init__(self, cnpj: str, body: str = "", url: Optional[str] = None):
        self.cnpj = cnpj
        super().__init__(404, body, url, message=f"CNPJ not found: {cnpj}")


class DecodeError(BrasilDataError):
    """Raised when a 2xx response body is not the expected JSON shape."""
