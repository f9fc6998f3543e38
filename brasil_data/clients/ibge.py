"""IBGE client - localities (v1) and aggregates (v3) APIs."""

import logging
from typing import Any, Optional

import requests

from brasil_data.clients.base import BaseAPIClient, records_from
from brasil_data.config import get_settings
from brasil_data.models.ibge import (
    MunicipalitiesResponse,
    Municipality,
    PopulationData,
    PopulationResponse,
    State,
    StatesResponse,
)

logger = logging.getLogger(__name__)

BASE_URL = "https://servicodados.ibge.gov.br/api"

# Population estimates: aggregate 6579, variable 9324, last six periods
POPULATION_ENDPOINT = "v3/agregados/6579/periodos/-6/variaveis/9324"


def extract_population(tree: Any) -> list[PopulationData]:
    """Flatten the aggregates payload into (location, year, population) rows.

    Expected shape::

        [{"resultados": [{"series": [
            {"localidade": {"nome": "Brasil"}, "serie": {"2021": "213317639"}}
        ]}]}]

    Any level that is missing or of the wrong type yields no rows.
    """
    rows: list[PopulationData] = []
    if not isinstance(tree, list) or not tree or not isinstance(tree[0], dict):
        return rows

    resultados = tree[0].get("resultados")
    if not isinstance(resultados, list) or not resultados:
        return rows
    if not isinstance(resultados[0], dict):
        return rows

    series = resultados[0].get("series")
    if not isinstance(series, list):
        return rows

    for entry in series:
        if not isinstance(entry, dict):
            continue
        localidade = entry.get("localidade")
        location = localidade.get("nome") if isinstance(localidade, dict) else None
        values = entry.get("serie")
        if not isinstance(values, dict):
            continue
        for year, population in values.items():
            rows.append(PopulationData(
                location=str(location) if location is not None else "",
                year=str(year),
                population=str(population),
            ))

    return rows


class IBGEClient(BaseAPIClient):
    """Client for IBGE open data (no authentication)."""

    source = "ibge_api"

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

    def get_states(self, timeout: Optional[float] = None) -> StatesResponse:
        """All Brazilian states ordered by name."""
        states = records_from(
            self.get_json("v1/localidades/estados", {"orderBy": "nome"}, timeout=timeout),
            State,
            "state",
        )
        return StatesResponse(states=states, total=len(states))

    def get_municipalities(
        self,
        state_id: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> MunicipalitiesResponse:
        """Municipalities ordered by name, optionally for one state.

        Args:
            state_id: IBGE state code or acronym (e.g. 33 or RJ)
            timeout: Per-call timeout override in seconds
        """
        state_id = (str(state_id).strip() if state_id is not None else "") or None
        if state_id:
            endpoint = f"v1/localidades/estados/{state_id}/municipios"
        else:
            endpoint = "v1/localidades/municipios"

        municipalities = records_from(
            self.get_json(endpoint, {"orderBy": "nome"}, timeout=timeout),
            Municipality,
            "municipality",
        )
        return MunicipalitiesResponse(
            municipalities=municipalities,
            total=len(municipalities),
            state_id=state_id,
        )

    def get_population(
        self,
        location_id: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> PopulationResponse:
        """Population estimates for a municipality, or for Brazil when omitted."""
        location_id = (str(location_id).strip() if location_id is not None else "")
        if location_id:
            localidades = f"N6[{location_id}]"
        else:
            localidades = "N1[all]"

        tree = self.get_json(POPULATION_ENDPOINT, {"localidades": localidades}, timeout=timeout)
        data = extract_population(tree)

        logger.debug(
            "Extracted population rows",
            extra={"source": self.source, "row_count": len(data)},
        )
        return PopulationResponse(data=data)
