"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path

import pytest

from sslhgen.core.models.settings import GeneratorSettings


@pytest.fixture
def sslh_cfg(tmp_path: Path) -> Path:
    """A typical sslh.cfg listening on IPv4 and IPv6."""
    content = textwrap.dedent("""\
        verbose: 0;
        foreground: true;
        timeout: 2;

        # Listen on every address, both families
        listen:
        (
            { host: "0.0.0.0"; port: "443"; },
            { host: "::"; port: "443"; }
        );

        protocols:
        (
            { name: "ssh"; service: "ssh"; host: "localhost"; port: "22"; },
            { name: "tls"; host: "localhost"; port: "8443"; }
        );
    """)
    path = tmp_path / "sslh.cfg"
    path.write_text(content)
    return path


@pytest.fixture
def write_cfg(tmp_path: Path):
    """Return a helper that writes a config file under tmp_path."""

    def _write(content: str, name: str = "sslh.cfg") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content))
        return path

    return _write


@pytest.fixture
def unit_dirs(tmp_path: Path) -> tuple[Path, Path, Path]:
    """The normal/early/late generator directories."""
    dirs = tuple(tmp_path / name for name in ("normal", "early", "late"))
    for d in dirs:
        d.mkdir()
    return dirs


@pytest.fixture
def settings_for():
    """Return a helper building GeneratorSettings for given candidates."""

    def _settings(*candidates: Path) -> GeneratorSettings:
        return GeneratorSettings(config_candidates=[str(c) for c in candidates])

    return _settings
