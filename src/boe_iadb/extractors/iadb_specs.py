from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Tuple

BASE_URL = "http://www.bankofengland.co.uk/boeapps/iadb/fromshowcolumns.asp"

# O IADB recusa requisições sem um User-Agent de navegador.
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/54.0.2840.90 Safari/537.36"
)

CsvFormat = Literal["TT", "TN", "CT", "CN"]
YesNo = Literal["Y", "N"]

_CSV_FORMATS = ("TT", "TN", "CT", "CN")
_YES_NO = ("Y", "N")


@dataclass(frozen=True)
class IadbQuerySpec:
    """
    Política fixa de flags da exportação CSV do IADB.

    - csv_format: formato do CSV (CSVF): TT, TN, CT ou CN
    - using_codes: UsingCodes (Y/N)
    - vpd: dados vintage (VPD, Y/N)
    - vfd: VFD (Y/N)

    A ordem dos parâmetros na query é sempre:
      Datefrom, Dateto, CSVF, UsingCodes, VPD, VFD
    """
    csv_format: CsvFormat = "TN"
    using_codes: YesNo = "Y"
    vpd: YesNo = "Y"
    vfd: YesNo = "N"

    def __post_init__(self) -> None:
        if self.csv_format not in _CSV_FORMATS:
            raise ValueError(f"csv_format inválido: {self.csv_format!r}. Use um de {_CSV_FORMATS}.")
        for name in ("using_codes", "vpd", "vfd"):
            v = getattr(self, name)
            if v not in _YES_NO:
                raise ValueError(f"{name} inválido: {v!r}. Use 'Y' ou 'N'.")

    def build_params(self, date_from: str, date_to: str) -> List[Tuple[str, str]]:
        return [
            ("Datefrom", date_from),
            ("Dateto", date_to),
            ("CSVF", self.csv_format),
            ("UsingCodes", self.using_codes),
            ("VPD", self.vpd),
            ("VFD", self.vfd),
        ]


# Política usada por get_data: CSV TN, usando códigos, com vintage, VFD=N
DEFAULT_QUERY = IadbQuerySpec()
