from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from boe_iadb.domain.iadb.catalog import SERIES_CATALOG
from boe_iadb.domain.iadb.models import IadbSeries
from boe_iadb.domain.iadb.parsing import parse_iadb_csv
from boe_iadb.errors import TransportError
from boe_iadb.extractors.iadb_request import build_query_url
from boe_iadb.extractors.iadb_specs import BASE_URL, DEFAULT_QUERY, DEFAULT_USER_AGENT, IadbQuerySpec
from boe_iadb.utils.io.http import HTTPConfig, HttpTransport, RequestsTransport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IadbConfig:
    base_url: str = BASE_URL
    user_agent: str = DEFAULT_USER_AGENT


class IadbSeriesExtractor:
    """
    Extractor do IADB (Bank of England): URL -> GET -> CSV -> IadbSeries.

    Uma chamada = uma URL + uma requisição + um parse. Sem retry, sem cache,
    sem estado entre chamadas.

    Erros:
      - TransportError: falha de rede ou status HTTP != 2xx (nada é parseado)
      - ParseError: corpo recebido mas fora do formato date,value
    """

    def __init__(
        self,
        transport: HttpTransport,
        cfg: Optional[IadbConfig] = None,
        spec: Optional[IadbQuerySpec] = None,
    ):
        self.transport = transport
        self.cfg = cfg or IadbConfig()
        self.spec = spec or DEFAULT_QUERY

    def build_url(
        self,
        series_code: str,
        date_from: str,
        date_to: str,
        additional_params: Optional[str] = None,
    ) -> str:
        return build_query_url(
            series_code,
            date_from,
            date_to,
            spec=self.spec,
            additional_params=additional_params,
            base_url=self.cfg.base_url,
        )

    def fetch_csv_text(self, url: str) -> str:
        """Faz o GET com o User-Agent fixo e devolve o corpo inteiro como texto."""
        logger.debug("GET %s", url)
        try:
            r = self.transport.get(url, headers={"User-Agent": self.cfg.user_agent})
            r.raise_for_status()
            return r.text
        except Exception as exc:
            logger.warning("IADB request failed: url=%s error=%s", url, exc)
            raise TransportError(f"Falha ao baixar IADB url={url}") from exc

    def get_data(
        self,
        series_code: str,
        date_from: str,
        date_to: str,
        additional_params: Optional[str] = None,
    ) -> IadbSeries:
        """
        Baixa e deserializa uma série.

        - series_code: código IADB (ex.: "IUDSOIA")
        - date_from / date_to: formato %d/%b/%Y (ex.: "01/Jan/2000"), repassados sem validação
        """
        logger.info("Fetching IADB series %s (%s -> %s)", series_code, date_from, date_to)

        url = self.build_url(series_code, date_from, date_to, additional_params)
        text = self.fetch_csv_text(url)
        points = parse_iadb_csv(text)

        logger.info("IADB series %s: %d points", series_code, len(points))
        return IadbSeries(
            name=series_code,
            data=points,
            description=SERIES_CATALOG.get(series_code.strip().upper(), ""),
        )


def get_data(
    series_code: str,
    date_from: str,
    date_to: str,
    transport: Optional[HttpTransport] = None,
) -> IadbSeries:
    """Atalho: uma série com a política padrão. Sem transport, usa RequestsTransport(HTTPConfig())."""
    if transport is not None:
        return IadbSeriesExtractor(transport).get_data(series_code, date_from, date_to)

    http = RequestsTransport(HTTPConfig())
    try:
        return IadbSeriesExtractor(http).get_data(series_code, date_from, date_to)
    finally:
        http.close()
