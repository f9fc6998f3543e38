"""PNCP client - public procurement search (no authentication)."""

import logging
from types import MappingProxyType
from typing import Optional, Union

import requests

from brasil_data.clients.base import BaseAPIClient, expect_object, records_from
from brasil_data.config import get_settings
from brasil_data.exceptions import ValidationError
from brasil_data.models.pncp import (
    ContractPublication,
    ContractsResponse,
    PriceRegistration,
    PriceRegistrationsResponse,
)
from brasil_data.params import clamp_page, clamp_page_size, is_empty, require

logger = logging.getLogger(__name__)

BASE_URL = "https://pncp.gov.br/api/consulta/v1"

MODALITIES = MappingProxyType({
    "pregao_eletronico": 6,
    "concorrencia_eletronica": 1,
    "concorrencia": 2,
    "concurso": 3,
    "leilao_eletronico": 4,
    "leilao": 5,
    "dialogo_competitivo": 7,
    "credenciamento": 8,
})

DEFAULT_MODALITY = MODALITIES["pregao_eletronico"]


def resolve_modality(modality: Union[int, float, str, None]) -> int:
    """Translate a modality name or code into the numeric code PNCP expects.

    Empty values and 0 select pregao eletronico. Names are matched
    case-insensitively; numeric strings and whole-number floats (as JSON
    callers send them) are taken as codes.

    Raises:
        ValidationError: If a name is not in MODALITIES, or the value is
            a bool or a fractional number
    """
    if isinstance(modality, bool) or (
        isinstance(modality, float) and not modality.is_integer()
    ):
        raise ValidationError(f"invalid modality: {modality!r}", field="modality")
    if isinstance(modality, float):
        modality = int(modality)
    if is_empty(modality) or modality == 0:
        return DEFAULT_MODALITY
    if isinstance(modality, int):
        return modality
    text = str(modality).strip()
    if text.isdigit():
        return int(text) or DEFAULT_MODALITY
    code = MODALITIES.get(text.lower())
    if code is None:
        raise ValidationError(
            f"unknown modality: {text}. Available: {', '.join(MODALITIES)}",
            field="modality",
        )
    return code


class PNCPClient(BaseAPIClient):
    """Client for the PNCP consultation API.

    Page sizes are clamped to [10, 500] as the upstream requires.
    """

    source = "pncp_api"

    MIN_PAGE_SIZE = 10
    MAX_PAGE_SIZE = 500
    DEFAULT_PAGE_SIZE = 50

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        settings = get_settings()
        super().__init__(
            base_url=base_url or BASE_URL,
            timeout=timeout if timeout is not None else settings.timeout,
            session=session,
        )

    def _page_size(self, page_size: Optional[int]) -> int:
        return clamp_page_size(
            page_size, self.MIN_PAGE_SIZE, self.MAX_PAGE_SIZE, self.DEFAULT_PAGE_SIZE
        )

    def search_contracts(
        self,
        start_date: str,
        end_date: str,
        modality: Union[int, float, str, None] = None,
        state: Optional[str] = None,
        page: Optional[int] = 1,
        page_size: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> ContractsResponse:
        """Search procurement publications in a date range.

        Args:
            start_date: First publication date, YYYYMMDD
            end_date: Last publication date, YYYYMMDD
            modality: Modality code or name (default pregao eletronico)
            state: Two-letter state code filter (optional)
            page: Page number, floored at 1
            page_size: Results per page, clamped to [10, 500]
            timeout: Per-call timeout override in seconds

        Returns:
            ContractsResponse with the upstream total (totalRegistros)
        """
        start_date = require(start_date, "start_date")
        end_date = require(end_date, "end_date")
        modality_code = resolve_modality(modality)
        page = clamp_page(page)
        page_size = self._page_size(page_size)

        params = {
            "dataInicial": start_date,
            "dataFinal": end_date,
            "codigoModalidadeContratacao": modality_code,
            "tamanhoPagina": page_size,
            "pagina": page,
            "uf": state,
        }

        logger.info(
            "Searching PNCP contracts",
            extra={"source": self.source, "modality": modality_code, "page": page},
        )
        payload = expect_object(
            self.get_json("contratacoes/publicacao", params, timeout=timeout),
            "contracts page",
        )
        contracts = records_from(
            payload.get("data") or [], ContractPublication, "contract publication"
        )

        return ContractsResponse(
            contracts=contracts,
            total=payload.get("totalRegistros") or 0,
            page=page,
            page_size=page_size,
        )

    def search_price_registrations(
        self,
        state: Optional[str] = None,
        page: Optional[int] = 1,
        page_size: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> PriceRegistrationsResponse:
        """Search price registration records (atas de registro de preco)."""
        page = clamp_page(page)
        page_size = self._page_size(page_size)

        params = {"tamanhoPagina": page_size, "pagina": page, "uf": state}

        payload = expect_object(
            self.get_json("atas-registro-preco", params, timeout=timeout),
            "price registrations page",
        )
        registrations = records_from(
            payload.get("data") or [], PriceRegistration, "price registration"
        )

        # The upstream sends no total here; count what came back
        return PriceRegistrationsResponse(
            registrations=registrations,
            total=len(registrations),
            page=page,
        )

    def list_modalities(self) -> dict[str, int]:
        """Available modality names and their codes."""
        return dict(MODALITIES)
