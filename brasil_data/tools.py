"""MCP tools over the five data source clients.

Each tool is a typed function registered on the ``mcp`` FastMCP server,
which derives the argument schema from the signature and the description
from the docstring. ``call_tool`` runs the same functions by name for the
CLI, validating loose (string) arguments against the same signatures.
"""

import asyncio
import logging
from typing import Any, Callable, Optional, Union

import pydantic
from mcp.server.fastmcp import FastMCP

from brasil_data.clients import (
    BCBClient,
    CNPJClient,
    IBGEClient,
    PNCPClient,
    TransparenciaClient,
)
from brasil_data.exceptions import ValidationError

logger = logging.getLogger(__name__)


class Toolbox:
    """The client instances tools run against.

    Clients are built on first use, so a call to one source never
    constructs (or warns about the configuration of) the others.
    """

    _factories = {
        "transparencia": TransparenciaClient,
        "ibge": IBGEClient,
        "cnpj": CNPJClient,
        "bcb": BCBClient,
        "pncp": PNCPClient,
    }

    def __init__(
        self,
        transparencia: Optional[TransparenciaClient] = None,
        ibge: Optional[IBGEClient] = None,
        cnpj: Optional[CNPJClient] = None,
        bcb: Optional[BCBClient] = None,
        pncp: Optional[PNCPClient] = None,
    ):
        given = {
            "transparencia": transparencia,
            "ibge": ibge,
            "cnpj": cnpj,
            "bcb": bcb,
            "pncp": pncp,
        }
        self._clients = {name: c for name, c in given.items() if c is not None}

    def _client(self, name: str):
        client = self._clients.get(name)
        if client is None:
            client = self._clients[name] = self._factories[name]()
        return client

    @property
    def transparencia(self) -> TransparenciaClient:
        return self._client("transparencia")

    @property
    def ibge(self) -> IBGEClient:
        return self._client("ibge")

    @property
    def cnpj(self) -> CNPJClient:
        return self._client("cnpj")

    @property
    def bcb(self) -> BCBClient:
        return self._client("bcb")

    @property
    def pncp(self) -> PNCPClient:
        return self._client("pncp")

    @property
    def built(self) -> list[str]:
        """Names of the clients constructed so far."""
        return sorted(self._clients)

    def close(self) -> None:
        """Close every constructed client's HTTP session."""
        for client in self._clients.values():
            client.close()
        self._clients.clear()


_toolbox: Optional[Toolbox] = None


def get_toolbox() -> Toolbox:
    """The process-wide Toolbox, created on first use."""
    global _toolbox
    if _toolbox is None:
        _toolbox = Toolbox()
    return _toolbox


def close_toolbox() -> None:
    global _toolbox
    if _toolbox is not None:
        _toolbox.close()
        _toolbox = None


mcp = FastMCP(
    "brasil-data",
    instructions=(
        "Brazilian government open data: federal spending and public servants "
        "(Portal da Transparencia), geography and population (IBGE), company "
        "registry (CNPJ), economic indicators (Banco Central) and public "
        "procurement (PNCP)."
    ),
)


# Portal da Transparencia


@mcp.tool()
def search_contracts(
    orgao_code: Optional[str] = None, page: int = 1, page_size: int = 100
) -> dict:
    """Search government contracts from Portal da Transparencia.

    Args:
        orgao_code: Organization SIAPE code (e.g. 36000 for Ministry of Health)
        page: Page number (default 1)
        page_size: Results per page (max 500)
    """
    return get_toolbox().transparencia.search_contracts(orgao_code, page, page_size).to_dict()


@mcp.tool()
def search_servidores(nome: str, page: int = 1, page_size: int = 100) -> dict:
    """Search federal public servants by name.

    Args:
        nome: Name of the public servant
        page: Page number (default 1)
        page_size: Results per page (max 500)
    """
    return get_toolbox().transparencia.search_servidores(nome, page, page_size).to_dict()


@mcp.tool()
def get_remuneracao(cpf: str, mes_ano: Optional[str] = None) -> dict:
    """Get salary data for a public servant by CPF.

    Args:
        cpf: CPF (11 digits)
        mes_ano: Month/Year in MM/YYYY format (default last month)
    """
    return get_toolbox().transparencia.get_remuneracao(cpf, mes_ano).to_dict()


@mcp.tool()
def search_convenios(uf: Optional[str] = None, page: int = 1, page_size: int = 100) -> dict:
    """Search federal government agreements (convenios) by state.

    Args:
        uf: State code (e.g. MG, SP, RJ)
        page: Page number (default 1)
        page_size: Results per page (max 500)
    """
    return get_toolbox().transparencia.search_convenios(uf, page, page_size).to_dict()


@mcp.tool()
def search_ceis(cnpj: Optional[str] = None, page: int = 1, page_size: int = 100) -> dict:
    """Search sanctioned companies in CEIS (Cadastro de Empresas Inidoneas e Suspensas).

    Args:
        cnpj: Company CNPJ (optional)
        page: Page number (default 1)
        page_size: Results per page (max 500)
    """
    return get_toolbox().transparencia.search_ceis(cnpj, page, page_size).to_dict()


@mcp.tool()
def list_orgaos() -> list[dict]:
    """List known government organization codes (SIAPE)."""
    return get_toolbox().transparencia.list_orgaos()


# IBGE


@mcp.tool()
def ibge_states() -> dict:
    """List all Brazilian states with their codes and regions."""
    return get_toolbox().ibge.get_states().to_dict()


@mcp.tool()
def ibge_municipalities(state_id: Optional[str] = None) -> dict:
    """List municipalities, optionally filtered by state.

    Args:
        state_id: State ID (e.g. 33 for RJ, 35 for SP). Leave empty for all.
    """
    return get_toolbox().ibge.get_municipalities(state_id).to_dict()


@mcp.tool()
def ibge_population(location_id: Optional[str] = None) -> dict:
    """Get population estimates for Brazil or a single municipality.

    Args:
        location_id: Municipality IBGE code (optional, whole country when empty)
    """
    return get_toolbox().ibge.get_population(location_id).to_dict()


# Minha Receita


@mcp.tool()
def lookup_cnpj(cnpj: str) -> dict:
    """Look up company data by CNPJ.

    Returns registration info, address, partners (QSA) and economic activity.

    Args:
        cnpj: CNPJ (14 digits, with or without formatting)
    """
    return get_toolbox().cnpj.lookup(cnpj).to_dict()


# Banco Central


@mcp.tool()
def bcb_selic(last_n: int = 30) -> dict:
    """Get SELIC interest rate data from Banco Central.

    Args:
        last_n: Number of data points to retrieve (default 30)
    """
    return get_toolbox().bcb.get_selic(last_n).to_dict()


@mcp.tool()
def bcb_ipca(last_n: int = 12) -> dict:
    """Get IPCA (inflation index) data from Banco Central.

    Args:
        last_n: Number of months to retrieve (default 12)
    """
    return get_toolbox().bcb.get_ipca(last_n).to_dict()


@mcp.tool()
def bcb_exchange_rate(currency: Optional[str] = None, date: Optional[str] = None) -> dict:
    """Get the PTAX exchange rate for a currency (USD, EUR, etc.).

    Args:
        currency: Currency code (default USD)
        date: Date in MM-DD-YYYY format (default today)
    """
    return get_toolbox().bcb.get_exchange_rate(currency, date).to_dict()


@mcp.tool()
def bcb_indicator(indicator: str, last_n: int = 30) -> dict:
    """Get any economic indicator: selic, selic_monthly, ipca, igpm, cdi.

    Args:
        indicator: Indicator name
        last_n: Number of data points (default 30)
    """
    return get_toolbox().bcb.get_indicator(indicator, last_n).to_dict()


@mcp.tool()
def bcb_pix_stats(database: Optional[str] = None) -> dict:
    """Get PIX transaction statistics for a reference month.

    Args:
        database: Reference month YYYYMM (default 202401)
    """
    return get_toolbox().bcb.get_pix_stats(database).to_dict()


# PNCP


@mcp.tool()
def pncp_contracts(
    start_date: str,
    end_date: str,
    state: Optional[str] = None,
    modality: Union[int, str, None] = None,
    page: int = 1,
    page_size: int = 50,
) -> dict:
    """Search public procurement contracts from PNCP (Portal Nacional de Contratacoes Publicas).

    Args:
        start_date: Start date in YYYYMMDD format
        end_date: End date in YYYYMMDD format
        state: State code (e.g. SP, RJ)
        modality: Modality code or name (default 6 = pregao_eletronico)
        page: Page number (default 1)
        page_size: Results per page (10 to 500, default 50)
    """
    return get_toolbox().pncp.search_contracts(
        start_date, end_date, modality, state, page, page_size
    ).to_dict()


@mcp.tool()
def pncp_price_registrations(
    state: Optional[str] = None, page: int = 1, page_size: int = 50
) -> dict:
    """Search price registration records (atas de registro de preco) from PNCP.

    Args:
        state: State code (e.g. SP, RJ)
        page: Page number (default 1)
        page_size: Results per page (10 to 500, default 50)
    """
    return get_toolbox().pncp.search_price_registrations(state, page, page_size).to_dict()


@mcp.tool()
def pncp_modalities() -> dict:
    """List available procurement modality codes for PNCP queries."""
    return get_toolbox().pncp.list_modalities()


TOOLS: dict[str, Callable[..., Any]] = {
    fn.__name__: fn
    for fn in (
        search_contracts,
        search_servidores,
        get_remuneracao,
        search_convenios,
        search_ceis,
        list_orgaos,
        ibge_states,
        ibge_municipalities,
        ibge_population,
        lookup_cnpj,
        bcb_selic,
        bcb_ipca,
        bcb_exchange_rate,
        bcb_indicator,
        bcb_pix_stats,
        pncp_contracts,
        pncp_price_registrations,
        pncp_modalities,
    )
}

# Same lax coercion FastMCP applies: "7" and 7.0 become 7, "inf" is rejected
_VALIDATED = {name: pydantic.validate_call(fn) for name, fn in TOOLS.items()}


def _argument_error(exc: pydantic.ValidationError) -> ValidationError:
    error = exc.errors()[0]
    param = str(error["loc"][0]) if error.get("loc") else "arguments"
    if error["type"] == "missing_argument":
        return ValidationError(f"Parameter '{param}' is required", field=param)
    return ValidationError(f"Parameter '{param}': {error['msg']}", field=param)


def call_tool(name: str, arguments: Optional[dict] = None) -> Any:
    """Run a tool by name and return its JSON-ready result.

    Raises:
        ValidationError: Unknown tool or bad arguments
        BrasilDataError: Whatever the underlying client raises
    """
    tool = _VALIDATED.get(name)
    if tool is None:
        raise ValidationError(
            f"unknown tool: {name}. Available: {', '.join(sorted(TOOLS))}",
            field="tool",
        )

    logger.info(f"Calling tool {name}", extra={"tool": name})
    try:
        return tool(**(arguments or {}))
    except pydantic.ValidationError as e:
        raise _argument_error(e) from e


def list_tools() -> list[dict]:
    """Tool catalogue as the MCP server advertises it."""
    tools = asyncio.run(mcp.list_tools())
    return [
        {
            "name": t.name,
            "description": t.description,
            "input_schema": t.inputSchema,
        }
        for t in sorted(tools, key=lambda t: t.name)
    ]
