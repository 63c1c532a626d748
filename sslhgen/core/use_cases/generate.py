"""
Generate use case — sslh config in, socket unit out.

    locate config → read listen records → format addresses → write unit

Any failure stops the pipeline before output is produced. A missing
config is not a failure: the result is simply empty.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from sslhgen.core.config.loader import ConfigError, find_config_file, load_listen_specs
from sslhgen.core.models.listen import ListenSpec
from sslhgen.core.models.settings import GeneratorSettings
from sslhgen.core.persistence.unit_file import OutputError, write_unit_file
from sslhgen.core.services.generators.socket_unit import (
    generate_socket_unit,
    write_socket_unit,
)

logger = logging.getLogger(__name__)


@dataclass
class GenerateResult:
    """Result of one generator run."""

    config_path: Path | None = None
    listen: list[ListenSpec] = field(default_factory=list)
    written_to: Path | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def config_found(self) -> bool:
        return self.config_path is not None


def run_generate(
    output_dir: Path | None = None,
    settings: GeneratorSettings | None = None,
    stream: TextIO | None = None,
) -> GenerateResult:
    """Generate the sslh socket unit.

    Args:
        output_dir: Directory to write the unit into. None writes the
            unit to ``stream`` instead.
        settings: Config candidates and unit identity (default: sslh).
        stream: Text stream used when ``output_dir`` is None
            (default: stdout).

    Returns:
        GenerateResult; ``error`` is set when the run failed.
    """
    settings = settings or GeneratorSettings()
    result = GenerateResult()

    config_path = find_config_file(settings.config_candidates)
    if config_path is None:
        return result
    result.config_path = config_path

    try:
        result.listen = load_listen_specs(config_path)
    except ConfigError as e:
        result.error = str(e)
        return result

    if output_dir is None:
        addresses = [spec.address for spec in result.listen]
        write_socket_unit(stream or sys.stdout, addresses, config_path, settings)
        return result

    unit = generate_socket_unit(result.listen, config_path, settings)
    try:
        result.written_to = write_unit_file(output_dir, unit)
    except OutputError as e:
        result.error = str(e)

    return result
