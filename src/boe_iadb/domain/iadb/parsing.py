from __future__ import annotations

import io
from typing import List, Tuple

import pandas as pd

from boe_iadb.domain.iadb.models import IadbDataPoint
from boe_iadb.errors import ParseError

IADB_COLUMNS = ["date", "value"]


def read_iadb_csv(text: str) -> pd.DataFrame:
    """
    Lê o CSV do IADB como texto e impõe o schema fixo (date, value).

    O cabeçalho enviado pelo servidor não é confiável, então a primeira linha
    é descartada e as colunas são identificadas só pela posição:
    1ª = date, 2ª = value. Retorna tudo como str; a conversão fica em
    parse_iadb_csv.
    """
    if not text or not text.strip():
        return pd.DataFrame(columns=IADB_COLUMNS, dtype=str)

    try:
        raw = pd.read_csv(
            io.StringIO(text),
            header=None,            # o header do servidor é tratado como linha comum e descartado abaixo
            dtype=str,
            keep_default_na=False,  # "" fica "", campo ausente vira NaN
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError:
        return pd.DataFrame(columns=IADB_COLUMNS, dtype=str)
    except (pd.errors.ParserError, ValueError) as exc:
        raise ParseError(f"Malformed IADB CSV: {exc}") from exc

    if raw.shape[1] != len(IADB_COLUMNS):
        raise ParseError(
            f"Expected {len(IADB_COLUMNS)} columns (date, value), got {raw.shape[1]}"
        )

    df = raw.iloc[1:].reset_index(drop=True)
    df.columns = IADB_COLUMNS

    missing = df.isna().any(axis=1)
    if missing.any():
        row = int(missing.idxmax()) + 1
        raise ParseError(f"Missing field in data row {row}")

    return df


def parse_iadb_csv(text: str) -> Tuple[IadbDataPoint, ...]:
    """
    Converte o corpo CSV em pontos, na ordem das linhas.

    Qualquer linha com value não numérico aborta o parse inteiro (ParseError):
    não existe retorno parcial.
    """
    df = read_iadb_csv(text)

    out: List[IadbDataPoint] = []
    for i, (d, v) in enumerate(zip(df["date"], df["value"]), start=1):
        try:
            value = float(v)
        except (TypeError, ValueError) as exc:
            raise ParseError(f"Invalid value {v!r} in data row {i} (date={d!r})") from exc
        out.append(IadbDataPoint(date=str(d), value=value))

    return tuple(out)
