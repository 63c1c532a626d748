"""
Generator settings — the fixed identity of the generated socket unit.

Defaults describe the sslh deployment. Tests and the ``--config``
option derive variants with ``model_copy(update=...)``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# Config locations, first one wins
DEFAULT_CONFIG_CANDIDATES = ["/etc/sslh.cfg", "/etc/sslh/sslh.cfg"]


class GeneratorSettings(BaseModel):
    """What the generator reads and how the unit it writes is labelled."""

    generator_name: str = "systemd-sslh-generator"
    service: str = "sslh.service"
    unit_name: str = "sslh.socket"
    documentation: list[str] = Field(
        default_factory=lambda: ["man:sslh(8)", "man:systemd-sslh-generator(8)"]
    )
    config_candidates: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CONFIG_CANDIDATES)
    )
    free_bind: bool = True
