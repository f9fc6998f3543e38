"""Record and envelope dataclasses, one module per data source."""

from . import bcb, cnpj, ibge, pncp, transparencia
from .base import Envelope

__all__ = ["Envelope", "bcb", "cnpj", "ibge", "pncp", "transparencia"]
