from __future__ import annotations


class IadbError(RuntimeError):
    pass


class TransportError(IadbError):
    """Falha de rede/HTTP: DNS, conexão, timeout, status != 2xx, leitura do corpo."""


class ParseError(IadbError):
    """Corpo recebido mas não interpretável como CSV de duas colunas (date, value)."""
