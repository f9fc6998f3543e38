"""Minha Receita client - company lookup by CNPJ."""

import logging
from typing import Optional

import requests

from brasil_data.clients.base import BaseAPIClient, expect_object
from brasil_data.config import get_settings
from brasil_data.exceptions import CNPJNotFoundError, UpstreamHTTPError
from brasil_data.models.cnpj import CNPJData
from brasil_data.params import format_cnpj

logger = logging.getLogger(__name__)

BASE_URL = "https://minhareceita.org"


class CNPJClient(BaseAPIClient):
    """Client for the Minha Receita API.

    A 404 from the upstream is raised as CNPJNotFoundError so callers can
    tell a missing company apart from an upstream failure.
    """

    source = "minhareceita_api"

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

    def lookup(self, cnpj: str, timeout: Optional[float] = None) -> CNPJData:
        """Fetch the registration record for a CNPJ.

        Args:
            cnpj: 14-digit CNPJ, with or without punctuation
            timeout: Per-call timeout override in seconds

        Raises:
            ValidationError: The input does not hold 14 digits
            CNPJNotFoundError: No company is registered under the CNPJ
        """
        formatted = format_cnpj(cnpj)

        try:
            payload = self.get_json(formatted, timeout=timeout)
        except UpstreamHTTPError as e:
            if e.status_code == 404:
                raise CNPJNotFoundError(formatted, e.body, e.url) from e
            raise

        return CNPJData.from_api(expect_object(payload, "company"))
