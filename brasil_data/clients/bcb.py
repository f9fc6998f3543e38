"""Banco Central do Brasil client - SGS series, PTAX quotes and PIX stats."""

import logging
from types import MappingProxyType
from typing import Optional

import requests

from brasil_data.clients.base import BaseAPIClient, expect_object, records_from
from brasil_data.config import get_settings
from brasil_data.exceptions import ValidationError
from brasil_data.models.bcb import (
    DataPoint,
    ExchangeRate,
    ExchangeRateResponse,
    IndicatorResponse,
    PIXResponse,
    PIXStats,
)
from brasil_data.params import today_mmddyyyy

logger = logging.getLogger(__name__)

SGS_URL = "https://api.bcb.gov.br/dados/serie"
OLINDA_URL = "https://olinda.bcb.gov.br/olinda/servico"

SERIES_CODES = MappingProxyType({
    "selic": 11,            # daily
    "selic_monthly": 4390,  # accumulated in the month
    "ipca": 433,            # monthly
    "igpm": 189,            # monthly
    "cdi": 12,              # daily
})

DEFAULT_LAST_N = 30
DEFAULT_CURRENCY = "USD"
DEFAULT_PIX_DATABASE = "202401"


def series_code(indicator: str) -> int:
    """Look up the SGS series code for an indicator name.

    Raises:
        ValidationError: If the name is not in SERIES_CODES
    """
    code = SERIES_CODES.get(indicator)
    if code is None:
        raise ValidationError(
            f"unknown indicator: {indicator}. Available: {', '.join(SERIES_CODES)}",
            field="indicator",
        )
    return code


def _odata_literal(value: str) -> str:
    return f"'{value}'"


class BCBClient(BaseAPIClient):
    """Client for the Banco Central open data services.

    SGS series live under api.bcb.gov.br; PTAX and PIX under Olinda.
    """

    source = "bcb_api"

    def __init__(
        self,
        base_url: Optional[str] = None,
        olinda_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        settings = get_settings()
        super().__init__(
            base_url=base_url or SGS_URL,
            timeout=timeout if timeout is not None else settings.timeout,
            session=session,
        )
        self.olinda_url = (olinda_url or OLINDA_URL).rstrip("/")

    def get_indicator(
        self,
        indicator: str,
        last_n: Optional[int] = DEFAULT_LAST_N,
        timeout: Optional[float] = None,
    ) -> IndicatorResponse:
        """Fetch the last ``last_n`` observations of an economic indicator.

        Args:
            indicator: One of selic, selic_monthly, ipca, igpm, cdi
            last_n: Number of observations; non-positive means 30
            timeout: Per-call timeout override in seconds
        """
        code = series_code(indicator)
        if not last_n or last_n <= 0:
            last_n = DEFAULT_LAST_N

        endpoint = f"bcdata.sgs.{code}/dados/ultimos/{last_n}"
        payload = self.get_json(endpoint, {"formato": "json"}, timeout=timeout)
        data = records_from(payload, DataPoint, "series data point")

        return IndicatorResponse(indicator=indicator, data=data, total=len(data))

    def get_selic(self, last_n: Optional[int] = 30, timeout: Optional[float] = None) -> IndicatorResponse:
        return self.get_indicator("selic", last_n, timeout=timeout)

    def get_ipca(self, last_n: Optional[int] = 12, timeout: Optional[float] = None) -> IndicatorResponse:
        return self.get_indicator("ipca", last_n, timeout=timeout)

    def get_exchange_rate(
        self,
        currency: Optional[str] = None,
        date: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> ExchangeRateResponse:
        """Fetch PTAX quotes for a currency on a date.

        Args:
            currency: ISO currency code (default USD)
            date: Quote date as MM-DD-YYYY (default today)
            timeout: Per-call timeout override in seconds
        """
        currency = (currency or DEFAULT_CURRENCY).strip().upper()
        date = (date or "").strip() or today_mmddyyyy()

        params = {
            "@moeda": _odata_literal(currency),
            "@dataCotacao": _odata_literal(date),
            "$format": "json",
        }
        payload = expect_object(
            self.get_json(
                "PTAX/versao/v1/odata/CotacaoMoedaDia(moeda=@moeda,dataCotacao=@dataCotacao)",
                params,
                base_url=self.olinda_url,
                timeout=timeout,
            ),
            "PTAX quotes",
        )
        rates = records_from(payload.get("value") or [], ExchangeRate, "exchange rate")

        return ExchangeRateResponse(currency=currency, date=date, rates=rates)

    def get_pix_stats(
        self,
        database: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> PIXResponse:
        """Fetch PIX transaction statistics for a reference month (YYYYMM)."""
        database = (database or "").strip() or DEFAULT_PIX_DATABASE
        params = {"@Database": _odata_literal(database), "$format": "json"}

        payload = expect_object(
            self.get_json(
                "Pix_DadosAbertos/versao/v1/odata/EstatisticasTransacoesPix(Database=@Database)",
                params,
                base_url=self.olinda_url,
                timeout=timeout,
            ),
            "PIX statistics",
        )
        return PIXResponse(stats=PIXStats(data=payload))
