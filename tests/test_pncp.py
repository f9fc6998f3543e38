"""Tests for the PNCP client."""

import pytest

from brasil_data.clients.pncp import MODALITIES, PNCPClient, resolve_modality
from brasil_data.exceptions import UpstreamHTTPError, ValidationError
from tests.conftest import FakeResponse, FakeSession

CONTRACTS_PAGE = {
    "data": [
        {
            "numeroControlePNCP": "46068425000133-1-000123/2024",
            "anoCompra": 2024,
            "sequencialCompra": 123,
            "modalidadeId": 6,
            "modalidadeNome": "Pregão - Eletrônico",
            "orgaoEntidade": {"cnpj": "46068425000133", "razaoSocial": "MUNICIPIO DE X"},
            "objetoCompra": "Aquisição de material de escritório",
            "valorTotalEstimado": 15000.5,
        }
    ],
    "totalRegistros": 4821,
    "totalPaginas": 97,
    "numeroPagina": 1,
}


class TestResolveModality:
    """Tests for modality name/code lookup."""

    def test_every_name_maps_to_its_code(self):
        for name, code in MODALITIES.items():
            assert resolve_modality(name) == code

    @pytest.mark.parametrize("value", [None, "", 0, "0"])
    def test_empty_defaults_to_pregao(self, value):
        assert resolve_modality(value) == 6

    def test_codes_pass_through(self):
        assert resolve_modality(8) == 8
        assert resolve_modality("2") == 2

    def test_whole_float_is_a_code(self):
        assert resolve_modality(6.0) == 6
        assert resolve_modality(8.0) == 8
        assert resolve_modality(0.0) == 6

    @pytest.mark.parametrize("value", [True, False, 6.5, float("inf"), float("nan")])
    def test_bool_and_fractional_rejected(self, value):
        with pytest.raises(ValidationError) as exc_info:
            resolve_modality(value)

        assert exc_info.value.field == "modality"

    def test_case_insensitive(self):
        assert resolve_modality("Leilao") == 5

    def test_unknown_name(self):
        with pytest.raises(ValidationError) as exc_info:
            resolve_modality("carta_convite")

        assert "pregao_eletronico" in str(exc_info.value)


class TestSearchContracts:
    """Tests for contract publication search."""

    def test_request_and_envelope(self):
        session = FakeSession(FakeResponse(payload=CONTRACTS_PAGE))
        client = PNCPClient(session=session)

        result = client.search_contracts("20240101", "20240131", state="SP")

        assert session.last_call["url"] == (
            "https://pncp.gov.br/api/consulta/v1/contratacoes/publicacao"
            "?dataInicial=20240101&dataFinal=20240131&codigoModalidadeContratacao=6"
            "&tamanhoPagina=50&pagina=1&uf=SP"
        )
        assert result.total == 4821
        assert result.page == 1
        assert result.page_size == 50
        assert result.source == "pncp_api"
        contract = result.contracts[0]
        assert contract.ano_compra == 2024
        assert contract.orgao_entidade["cnpj"] == "46068425000133"
        assert contract.valor_total_estimado == 15000.5

    def test_state_omitted_when_empty(self):
        session = FakeSession(FakeResponse(payload={"data": [], "totalRegistros": 0}))
        client = PNCPClient(session=session)

        client.search_contracts("20240101", "20240131", state="")

        assert "uf=" not in session.last_call["url"]

    @pytest.mark.parametrize("requested,effective", [(5, 10), (10000, 500), (120, 120)])
    def test_page_size_clamped(self, requested, effective):
        session = FakeSession(FakeResponse(payload={"data": [], "totalRegistros": 0}))
        client = PNCPClient(session=session)

        result = client.search_contracts("20240101", "20240131", page=-2, page_size=requested)

        assert result.page_size == effective
        assert result.page == 1
        assert f"tamanhoPagina={effective}&pagina=1" in session.last_call["url"]

    def test_modality_name(self):
        session = FakeSession(FakeResponse(payload={"data": [], "totalRegistros": 0}))
        client = PNCPClient(session=session)

        client.search_contracts("20240101", "20240131", modality="concorrencia")

        assert "codigoModalidadeContratacao=2" in session.last_call["url"]

    def test_dates_required(self):
        session = FakeSession()
        client = PNCPClient(session=session)

        with pytest.raises(ValidationError):
            client.search_contracts("", "20240131")
        assert session.calls == []

    def test_upstream_error(self):
        session = FakeSession(FakeResponse(status_code=422, text="data inválida"))
        client = PNCPClient(session=session)

        with pytest.raises(UpstreamHTTPError) as exc_info:
            client.search_contracts("2024", "20240131")

        assert exc_info.value.status_code == 422
        assert exc_info.value.body == "data inválida"


class TestPriceRegistrations:
    """Tests for price registration search."""

    def test_total_counts_results(self):
        payload = {
            "data": [{"numeroAta": "1/2024", "anoAta": 2024}, {"numeroAta": "2/2024"}],
            "totalRegistros": 900,
        }
        session = FakeSession(FakeResponse(payload=payload))
        client = PNCPClient(session=session)

        result = client.search_price_registrations(page_size=10)

        assert result.total == 2
        assert result.registrations[0].ano_ata == 2024
        assert session.last_call["url"] == (
            "https://pncp.gov.br/api/consulta/v1/atas-registro-preco?tamanhoPagina=10&pagina=1"
        )


def test_list_modalities_is_a_copy():
    client = PNCPClient(session=FakeSession())
    modalities = client.list_modalities()
    modalities["pregao_eletronico"] = 99

    assert MODALITIES["pregao_eletronico"] == 6
