"""labscan Formatter module.

Exports the ``TokenFormatter`` class and the ``format_tokens`` and
``reconstruct`` convenience functions.
"""
from __future__ import annotations

from labscan.formatter.formatter import TokenFormatter, format_tokens, reconstruct

__all__ = ["TokenFormatter", "format_tokens", "reconstruct"]
