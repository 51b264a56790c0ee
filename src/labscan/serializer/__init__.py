"""labscan serializer module.

Exports the ``TokenSerializer`` for converting token streams to and
from JSON/YAML.
"""
from __future__ import annotations

from labscan.serializer.serializer import TokenSerializer

__all__ = ["TokenSerializer"]
