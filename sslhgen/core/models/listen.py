"""
Listen model — one host/port pair from the sslh ``listen`` list.
"""

from __future__ import annotations

from pydantic import BaseModel


def format_address(host: str, port: str) -> str:
    """Join a host and a port into a bare ``host:port`` listen token.

    No quoting, bracketing or validation: the values are used exactly
    as they appear in the config file.
    """
    return f"{host}:{port}"


class ListenSpec(BaseModel):
    """A listen record as declared in the sslh config.

    Attributes:
        host: Hostname or address, verbatim.
        port: Port or service name, verbatim.
    """

    host: str
    port: str

    @property
    def address(self) -> str:
        return format_address(self.host, self.port)
