"""
Socket unit generator — render ``sslh.socket`` from the listen addresses.

One ``ListenStream=`` line per address, in input order. The unit is
ordered before the sslh service and points back at the config it was
generated from.
"""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from sslhgen.core.models.listen import ListenSpec
from sslhgen.core.models.settings import GeneratorSettings
from sslhgen.core.models.template import GeneratedFile


def render_socket_unit(
    addresses: list[str],
    source: Path | str,
    settings: GeneratorSettings | None = None,
) -> str:
    """Build the socket unit text.

    Args:
        addresses: Formatted ``host:port`` tokens, in order.
        source: Config file the addresses came from (``SourcePath=``).
        settings: Unit identity (default: sslh).

    Returns:
        Complete unit file content, newline-terminated.
    """
    settings = settings or GeneratorSettings()

    lines = [
        f"# Automatically generated by {settings.generator_name}",
        "",
        "[Unit]",
        f"Before={settings.service}",
        f"SourcePath={source}",
        f"Documentation={' '.join(settings.documentation)}",
        "",
        "[Socket]",
        f"FreeBind={'true' if settings.free_bind else 'false'}",
    ]
    lines.extend(f"ListenStream={address}" for address in addresses)

    return "\n".join(lines) + "\n"


def write_socket_unit(
    sink: TextIO,
    addresses: list[str],
    source: Path | str,
    settings: GeneratorSettings | None = None,
) -> None:
    """Write the socket unit to an open text stream."""
    sink.write(render_socket_unit(addresses, source, settings))


def generate_socket_unit(
    specs: list[ListenSpec],
    source: Path,
    settings: GeneratorSettings | None = None,
) -> GeneratedFile:
    """Generate the socket unit for a set of listen records.

    Args:
        specs: Listen records from the sslh config.
        source: Path of that config.
        settings: Unit identity (default: sslh).

    Returns:
        GeneratedFile named after the unit.
    """
    settings = settings or GeneratorSettings()
    addresses = [spec.address for spec in specs]

    return GeneratedFile(
        path=settings.unit_name,
        content=render_socket_unit(addresses, source, settings),
        reason=f"{len(addresses)} listen address(es) from {source}",
    )
