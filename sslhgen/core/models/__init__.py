"""
Domain models — Pydantic types for the generator.

All models are re-exported here for convenient access:

    from sslhgen.core.models import ListenSpec, GeneratorSettings, GeneratedFile
"""

from sslhgen.core.models.listen import ListenSpec, format_address
from sslhgen.core.models.settings import DEFAULT_CONFIG_CANDIDATES, GeneratorSettings
from sslhgen.core.models.template import GeneratedFile

__all__ = [
    # settings.py
    "DEFAULT_CONFIG_CANDIDATES",
    # template.py
    "GeneratedFile",
    "GeneratorSettings",
    # listen.py
    "ListenSpec",
    "format_address",
]
