from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

import pandas as pd


@dataclass(frozen=True)
class IadbDataPoint:
    """Observação de uma série. date é o token literal enviado pelo IADB (não é parseado)."""
    date: str
    value: float

    def __str__(self) -> str:
        return f"IADB Data Point ({self.date}): {self.value}"


@dataclass(frozen=True)
class IadbSeries:
    """
    Série retornada por uma chamada.

    - name: código IADB solicitado
    - data: pontos na ordem das linhas do CSV (sem ordenação, sem dedup)
    - description: descrição do catálogo, "" se o código não for conhecido
    """
    name: str
    data: Tuple[IadbDataPoint, ...] = ()
    description: str = ""

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[IadbDataPoint]:
        return iter(self.data)

    def __str__(self) -> str:
        lines = [f"IADB Series ({self.name})"]
        lines.extend(str(p) for p in self.data)
        return "\n".join(lines) + "\n"

    def to_frame(self) -> pd.DataFrame:
        df = pd.DataFrame(
            {
                "date": [p.date for p in self.data],
                "value": [p.value for p in self.data],
            }
        )
        # Garante dtypes estáveis mesmo com série vazia
        df["date"] = df["date"].astype("object")
        df["value"] = df["value"].astype("float64")
        return df
