"""Pytest configuration and fixtures."""

import json
import logging

import pytest


class FakeResponse:
    """Stand-in for requests.Response."""

    def __init__(self, status_code: int = 200, payload=None, text: str = None):
        self.status_code = status_code
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.text = text

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Records GET calls and replays queued responses or exceptions."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []
        self.closed = False

    def queue(self, response) -> None:
        self.responses.append(response)

    def close(self) -> None:
        self.closed = True

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers or {}, "timeout": timeout})
        if not self.responses:
            raise AssertionError(f"unexpected request to {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last_call(self) -> dict:
        return self.calls[-1]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep tests independent of the developer's environment and .env file."""
    monkeypatch.setattr("brasil_data.config.load_dotenv", lambda *a, **kw: False)
    for name in (
        "TRANSPARENCY_API_KEY",
        "BRASIL_DATA_TIMEOUT",
        "BRASIL_DATA_USER_AGENT",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """The CLI reconfigures the root logger; undo it after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def population_payload():
    """Trimmed IBGE aggregate 6579 response."""
    return [
        {
            "id": "9324",
            "variavel": "População residente estimada",
            "unidade": "Pessoas",
            "resultados": [
                {
                    "classificacoes": [],
                    "series": [
                        {
                            "localidade": {
                                "id": "3550308",
                                "nivel": {"id": "N6", "nome": "Município"},
                                "nome": "São Paulo - SP",
                            },
                            "serie": {"2020": "12325232", "2021": "12396372"},
                        }
                    ],
                }
            ],
        }
    ]


@pytest.fixture
def cnpj_payload():
    """Trimmed Minha Receita company record."""
    return {
        "cnpj": "33000167000101",
        "razao_social": "PETROLEO BRASILEIRO S A PETROBRAS",
        "nome_fantasia": "PETROBRAS",
        "situacao_cadastral": 2,
        "descricao_situacao_cadastral": "ATIVA",
        "data_inicio_atividade": "1966-09-28",
        "uf": "RJ",
        "municipio": "RIO DE JANEIRO",
        "capital_social": 205431960490.52,
        "qsa": [
            {
                "nome_socio": "JOAO DA SILVA",
                "qualificacao_socio": "Diretor",
                "data_entrada_sociedade": "2023-01-26",
            }
        ],
    }
