"""IBGE response shapes."""

from dataclasses import dataclass, field
from typing import Optional

from brasil_data.models.base import Envelope, as_dict, as_int, as_str

SOURCE = "ibge_api"


@dataclass
class Region:
    id: Optional[int] = None
    nome: Optional[str] = None

    @classmethod
    def from_api(cls, payload: dict) -> "Region":
        return cls(id=as_int(payload.get("id")), nome=as_str(payload.get("nome")))


@dataclass
class State:
    id: Optional[int] = None
    sigla: Optional[str] = None
    nome: Optional[str] = None
    regiao: Region = field(default_factory=Region)

    @classmethod
    def from_api(cls, payload: dict) -> "State":
        return cls(
            id=as_int(payload.get("id")),
            sigla=as_str(payload.get("sigla")),
            nome=as_str(payload.get("nome")),
            regiao=Region.from_api(as_dict(payload.get("regiao"))),
        )


@dataclass
class Microregion:
    id: Optional[int] = None
    nome: Optional[str] = None

    @classmethod
    def from_api(cls, payload: dict) -> "Microregion":
        return cls(id=as_int(payload.get("id")), nome=as_str(payload.get("nome")))


@dataclass
class Municipality:
    id: Optional[int] = None
    nome: Optional[str] = None
    microrregiao: Microregion = field(default_factory=Microregion)

    @classmethod
    def from_api(cls, payload: dict) -> "Municipality":
        return cls(
            id=as_int(payload.get("id")),
            nome=as_str(payload.get("nome")),
            microrregiao=Microregion.from_api(as_dict(payload.get("microrregiao"))),
        )


@dataclass
class PopulationData:
    """One (location, year, population) row from the population aggregate."""

    location: str
    year: str
    population: str


@dataclass
class StatesResponse(Envelope):
    states: list[State]
    total: int
    source: str = SOURCE


@dataclass
class MunicipalitiesResponse(Envelope):
    municipalities: list[Municipality]
    total: int
    state_id: Optional[str] = None
    source: str = SOURCE


@dataclass
class PopulationResponse(Envelope):
    data: list[PopulationData]
    source: str = SOURCE
