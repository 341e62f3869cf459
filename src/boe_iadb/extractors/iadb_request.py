from __future__ import annotations

from typing import Optional, Sequence, Union

from boe_iadb.extractors.iadb_specs import BASE_URL, DEFAULT_QUERY, IadbQuerySpec


def _join_codes(series_codes: Union[str, Sequence[str]]) -> str:
    if isinstance(series_codes, str):
        return series_codes
    return ",".join(series_codes)


def build_query_url(
    series_codes: Union[str, Sequence[str]],
    date_from: str,
    date_to: str,
    spec: IadbQuerySpec = DEFAULT_QUERY,
    additional_params: Optional[str] = None,
    base_url: str = BASE_URL,
) -> str:
    """
    Monta a URL de exportação CSV do IADB. Função pura (sem I/O).

    Os valores entram literalmente na URL (sem percent-encoding): o IADB
    espera datas como 01/Jan/2000. Código ou datas vazios não são rejeitados
    aqui; o erro aparece na resposta do servidor ou no parse.

    additional_params é anexado depois dos parâmetros fixos
    (ex.: "Travel=NIxIRx"); o "&" inicial é opcional.
    """
    url = f"{base_url}?csv.x=yes&SeriesCodes={_join_codes(series_codes)}"
    for key, value in spec.build_params(date_from, date_to):
        url += f"&{key}={value}"

    if additional_params:
        if not additional_params.startswith("&"):
            url += "&"
        url += additional_params

    return url
