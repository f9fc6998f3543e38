"""Clients for Brazilian government open data APIs.

Sources: PNCP (procurement), Banco Central (indicators, exchange rates),
Portal da Transparencia (contracts, servants, sanctions), IBGE
(geography, population) and Minha Receita (CNPJ registry).
"""

from .clients import (
    BCBClient,
    CNPJClient,
    IBGEClient,
    PNCPClient,
    TransparenciaClient,
)
from .exceptions import (
    BrasilDataError,
    CNPJNotFoundError,
    DecodeError,
    MissingAPIKeyError,
    NotFoundError,
    RequestTimeoutError,
    TransportError,
    UpstreamHTTPError,
    ValidationError,
)

__version__ = "1.0.0"

__all__ = [
    "BCBClient",
    "CNPJClient",
    "IBGEClient",
    "PNCPClient",
    "TransparenciaClient",
    "BrasilDataError",
    "CNPJNotFoundError",
    "DecodeError",
    "MissingAPIKeyError",
    "NotFoundError",
    "RequestTimeoutError",
    "TransportError",
    "UpstreamHTTPError",
    "ValidationError",
]
