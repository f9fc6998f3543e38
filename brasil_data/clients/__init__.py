"""API client wrappers for Brazilian government data sources.

Each client handles:
- Parameter defaults and clamping
- Request construction (one GET per operation)
- Decoding into the source's response envelope
"""

from .base import BaseAPIClient
from .bcb import BCBClient
from .cnpj import CNPJClient
from .ibge import IBGEClient
from .pncp import PNCPClient
from .transparencia import TransparenciaClient

__all__ = [
    "BaseAPIClient",
    "BCBClient",
    "CNPJClient",
    "IBGEClient",
    "PNCPClient",
    "TransparenciaClient",
]
