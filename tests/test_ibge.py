"""Tests for the IBGE client and population extraction."""

import pytest

from brasil_data.clients.ibge import IBGEClient, extract_population
from brasil_data.exceptions import DecodeError
from tests.conftest import FakeResponse, FakeSession

BASE = "https://servicodados.ibge.gov.br/api"


class TestExtractPopulation:
    """Tests for the lenient population extraction."""

    def test_flattens_series(self, population_payload):
        rows = extract_population(population_payload)

        assert [(r.location, r.year, r.population) for r in rows] == [
            ("São Paulo - SP", "2020", "12325232"),
            ("São Paulo - SP", "2021", "12396372"),
        ]

    def test_numeric_values_become_strings(self):
        tree = [{"resultados": [{"series": [
            {"localidade": {"nome": "Brasil"}, "serie": {"2022": 203062512}}
        ]}]}]

        rows = extract_population(tree)

        assert rows[0].population == "203062512"

    @pytest.mark.parametrize(
        "tree",
        [
            None,
            {},
            [],
            ["not a dict"],
            [{}],
            [{"resultados": []}],
            [{"resultados": "x"}],
            [{"resultados": [{}]}],
            [{"resultados": [{"series": None}]}],
            [{"resultados": [{"series": [{"localidade": {"nome": "X"}}]}]}],
            [{"resultados": [{"series": ["junk", {"serie": "x"}]}]}],
        ],
    )
    def test_missing_shape_yields_empty(self, tree):
        assert extract_population(tree) == []

    def test_missing_location_name(self):
        tree = [{"resultados": [{"series": [{"serie": {"2021": "10"}}]}]}]

        rows = extract_population(tree)

        assert rows[0].location == ""
        assert rows[0].population == "10"


class TestIBGEClient:
    """Tests for the IBGE requests."""

    def test_states(self):
        payload = [
            {"id": 12, "sigla": "AC", "nome": "Acre", "regiao": {"id": 1, "sigla": "N", "nome": "Norte"}},
            {"id": 27, "sigla": "AL", "nome": "Alagoas", "regiao": {"id": 2, "sigla": "NE", "nome": "Nordeste"}},
        ]
        session = FakeSession(FakeResponse(payload=payload))
        client = IBGEClient(session=session)

        result = client.get_states()

        assert session.last_call["url"] == f"{BASE}/v1/localidades/estados?orderBy=nome"
        assert result.total == 2
        assert result.states[0].regiao.nome == "Norte"
        assert result.to_dict()["states"][1]["sigla"] == "AL"

    def test_municipalities_for_state(self):
        payload = [{"id": 3304557, "nome": "Rio de Janeiro", "microrregiao": {"id": 33018, "nome": "Rio de Janeiro"}}]
        session = FakeSession(FakeResponse(payload=payload))
        client = IBGEClient(session=session)

        result = client.get_municipalities("33")

        assert session.last_call["url"] == f"{BASE}/v1/localidades/estados/33/municipios?orderBy=nome"
        assert result.state_id == "33"
        assert result.municipalities[0].microrregiao.id == 33018

    def test_all_municipalities(self):
        session = FakeSession(FakeResponse(payload=[]))
        client = IBGEClient(session=session)

        result = client.get_municipalities("")

        assert session.last_call["url"] == f"{BASE}/v1/localidades/municipios?orderBy=nome"
        assert result.state_id is None
        assert result.total == 0

    def test_population_for_municipality(self, population_payload):
        session = FakeSession(FakeResponse(payload=population_payload))
        client = IBGEClient(session=session)

        result = client.get_population("3550308")

        assert session.last_call["url"] == (
            f"{BASE}/v3/agregados/6579/periodos/-6/variaveis/9324?localidades=N6[3550308]"
        )
        assert len(result.data) == 2
        assert result.source == "ibge_api"

    def test_population_for_brazil(self):
        session = FakeSession(FakeResponse(payload=[]))
        client = IBGEClient(session=session)

        result = client.get_population()

        assert session.last_call["url"].endswith("localidades=N1[all]")
        assert result.data == []

    def test_population_invalid_json_is_decode_error(self):
        session = FakeSession(FakeResponse(text="not json"))
        client = IBGEClient(session=session)

        with pytest.raises(DecodeError):
            client.get_population()
