"""
Generated file model — what the generator hands to the writer.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A unit file produced by the generator.

    Attributes:
        path:      File name inside the output directory.
        content:   Full file content.
        reason:    Why this file was generated.
    """

    path: str
    content: str
    reason: str = ""
