"""Portal da Transparencia client - API key authentication."""

import logging
from types import MappingProxyType
from typing import Optional

import requests

from brasil_data.auth.api_key import APIKeyAuth
from brasil_data.clients.base import BaseAPIClient, records_from
from brasil_data.config import TRANSPARENCY_API_KEY_ENV, get_settings
from brasil_data.models.transparencia import (
    CEISResponse,
    Contract,
    ContractsResponse,
    Convenio,
    ConveniosResponse,
    Remuneracao,
    RemuneracaoResponse,
    SanctionedCompany,
    Servidor,
    ServidoresResponse,
)
from brasil_data.params import (
    clamp_page,
    clamp_page_size,
    last_month_mmyyyy,
    only_digits,
    require,
)

logger = logging.getLogger(__name__)

BASE_URL = "https://api.portaldatransparencia.gov.br/api-de-dados"
API_KEY_HEADER = "chave-api-dados"

# SIAPE codes of the ministries most often queried
KNOWN_ORGAOS = MappingProxyType({
    "36000": "Ministério da Saúde",
    "26000": "Ministério da Educação",
    "25000": "Ministério da Economia",
    "30000": "Ministério da Justiça",
    "52000": "Ministério da Defesa",
    "35000": "Ministério das Relações Exteriores",
    "44000": "Ministério do Meio Ambiente",
})

DEFAULT_ORGAO = "36000"
DEFAULT_UF = "MG"
UNKNOWN_ORGAO_NAME = "Orgao Desconhecido"


class TransparenciaClient(BaseAPIClient):
    """Client for the Portal da Transparencia data API.

    Features:
    - API key authentication (``chave-api-dados`` header)
    - Client identifier sent as User-Agent
    - Page/page-size pagination, page size clamped to [1, 500]

    Without an API key the client still builds, but every network call
    raises MissingAPIKeyError before a request is made.
    """

    source = "portal_transparencia_api"

    MIN_PAGE_SIZE = 1
    MAX_PAGE_SIZE = 500
    DEFAULT_PAGE_SIZE = 100

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize Portal da Transparencia client.

        Args:
            api_key: API key (or from env: TRANSPARENCY_API_KEY)
            base_url: API base URL override
            timeout: Default request timeout in seconds
            user_agent: Client identifier header value
            session: HTTP session to use
        """
        settings = get_settings()
        super().__init__(
            base_url=base_url or BASE_URL,
            timeout=timeout if timeout is not None else settings.timeout,
            headers={"User-Agent": user_agent or settings.user_agent},
            session=session,
        )

        self.api_key_auth = APIKeyAuth(
            api_key=api_key or settings.transparency_api_key,
            key_name=API_KEY_HEADER,
            env_var=TRANSPARENCY_API_KEY_ENV,
        )
        if not self.api_key_auth.is_configured:
            logger.warning(
                f"{TRANSPARENCY_API_KEY_ENV} not set, Portal da Transparencia calls will fail",
                extra={"source": self.source},
            )

    def get_auth_headers(self) -> dict:
        """Get API key authorization headers."""
        return self.api_key_auth.get_auth_header()

    def _paging(self, page: Optional[int], page_size: Optional[int]) -> tuple[int, int]:
        return clamp_page(page), clamp_page_size(
            page_size, self.MIN_PAGE_SIZE, self.MAX_PAGE_SIZE, self.DEFAULT_PAGE_SIZE
        )

    def search_contracts(
        self,
        orgao_code: Optional[str] = None,
        page: Optional[int] = 1,
        page_size: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> ContractsResponse:
        """Search contracts signed by a federal organization.

        Args:
            orgao_code: SIAPE organization code (default 36000, Saude)
            page: Page number, floored at 1
            page_size: Results per page, clamped to [1, 500]
            timeout: Per-call timeout override in seconds
        """
        orgao_code = (orgao_code or "").strip() or DEFAULT_ORGAO
        page, page_size = self._paging(page, page_size)

        params = {"codigoOrgao": orgao_code, "pagina": page, "tamanhoPagina": page_size}
        contracts = records_from(
            self.get_json("contratos", params, timeout=timeout), Contract, "contract"
        )

        return ContractsResponse(
            contracts=contracts,
            total=len(contracts),
            page=page,
            page_size=page_size,
            orgao_code=orgao_code,
            orgao_name=KNOWN_ORGAOS.get(orgao_code, UNKNOWN_ORGAO_NAME),
        )

    def search_servidores(
        self,
        nome: str,
        page: Optional[int] = 1,
        page_size: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> ServidoresResponse:
        """Search federal public servants by name."""
        nome = require(nome, "nome")
        page, page_size = self._paging(page, page_size)

        params = {"nome": nome, "pagina": page, "tamanhoPagina": page_size}
        servidores = records_from(
            self.get_json("servidores", params, timeout=timeout), Servidor, "servidor"
        )

        return ServidoresResponse(
            servidores=servidores,
            total=len(servidores),
            page=page,
            page_size=page_size,
        )

    def get_remuneracao(
        self,
        cpf: str,
        mes_ano: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> RemuneracaoResponse:
        """Get a servant's pay for one month.

        Args:
            cpf: Servant CPF, punctuation allowed
            mes_ano: Reference month as MM/YYYY (default last month)
            timeout: Per-call timeout override in seconds
        """
        cpf = require(only_digits(cpf), "cpf")
        mes_ano = (mes_ano or "").strip() or last_month_mmyyyy()

        remuneracao = records_from(
            self.get_json(
                f"servidores/{cpf}/remuneracao", {"mesAno": mes_ano}, timeout=timeout
            ),
            Remuneracao,
            "remuneracao",
        )

        return RemuneracaoResponse(cpf=cpf, remuneracao=remuneracao, mes_ano=mes_ano)

    def search_convenios(
        self,
        uf: Optional[str] = None,
        page: Optional[int] = 1,
        page_size: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> ConveniosResponse:
        """Search federal agreements by state (default MG)."""
        uf = ((uf or "").strip() or DEFAULT_UF).upper()
        page, page_size = self._paging(page, page_size)

        params = {"uf": uf, "pagina": page, "tamanhoPagina": page_size}
        convenios = records_from(
            self.get_json("convenios", params, timeout=timeout), Convenio, "convenio"
        )

        return ConveniosResponse(
            convenios=convenios,
            total=len(convenios),
            page=page,
            page_size=page_size,
            uf=uf,
        )

    def search_ceis(
        self,
        cnpj: Optional[str] = None,
        page: Optional[int] = 1,
        page_size: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> CEISResponse:
        """Search the CEIS sanctions list, optionally for one CNPJ."""
        page, page_size = self._paging(page, page_size)

        params = {"cnpj": cnpj, "pagina": page, "tamanhoPagina": page_size}
        empresas = records_from(
            self.get_json("ceis", params, timeout=timeout),
            SanctionedCompany,
            "sanctioned company",
        )

        return CEISResponse(
            empresas=empresas,
            total=len(empresas),
            page=page,
            page_size=page_size,
        )

    def list_orgaos(self) -> list[dict]:
        """Known organization codes and names."""
        return [{"codigo": code, "nome": name} for code, name in KNOWN_ORGAOS.items()]
