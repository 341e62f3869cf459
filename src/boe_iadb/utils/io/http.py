from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Dict, Any, Protocol
import requests


class HttpTransport(Protocol):
    def get(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> requests.Response: ...


@dataclass(frozen=True)
class HTTPConfig:
    timeout_sec: int = 30
    headers: Optional[Dict[str, str]] = None


class RequestsTransport:
    """Transporte síncrono sobre requests.Session (sem retry: cada chamada é uma única tentativa)."""

    def __init__(self, cfg: Optional[HTTPConfig] = None):
        self.cfg = cfg or HTTPConfig()
        self.session = requests.Session()

    def get(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        h = headers or self.cfg.headers
        return self.session.get(url, params=params, headers=h, timeout=self.cfg.timeout_sec)

    def close(self) -> None:
        self.session.close()
