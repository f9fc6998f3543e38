"""Banco Central do Brasil response shapes."""

from dataclasses import dataclass, field
from typing import Any, Optional

from brasil_data.models.base import Envelope, as_float, as_str

SOURCE = "bcb_api"


@dataclass
class DataPoint:
    """One observation of an SGS series. Values are kept as upstream strings."""

    date: Optional[str] = None
    value: Optional[str] = None

    @classmethod
    def from_api(cls, payload: dict) -> "DataPoint":
        return cls(date=as_str(payload.get("data")), value=as_str(payload.get("valor")))


@dataclass
class ExchangeRate:
    """A PTAX quote."""

    date_time: Optional[str] = None
    buy_rate: Optional[float] = None
    sell_rate: Optional[float] = None
    bulletin_type: Optional[str] = None

    @classmethod
    def from_api(cls, payload: dict) -> "ExchangeRate":
        return cls(
            date_time=as_str(payload.get("dataHoraCotacao")),
            buy_rate=as_float(payload.get("cotacaoCompra")),
            sell_rate=as_float(payload.get("cotacaoVenda")),
            bulletin_type=as_str(payload.get("tipoBoletim")),
        )


@dataclass
class PIXStats:
    total_transactions: Optional[int] = None
    total_value: Optional[float] = None
    data: Any = None


@dataclass
class IndicatorResponse(Envelope):
    indicator: str
    data: list[DataPoint]
    total: int
    source: str = SOURCE


@dataclass
class ExchangeRateResponse(Envelope):
    currency: str
    date: str
    rates: list[ExchangeRate]
    source: str = SOURCE


@dataclass
class PIXResponse(Envelope):
    stats: PIXStats = field(default_factory=PIXStats)
    source: str = SOURCE
