"""Schema objects for parse results."""

from .hex_scan import HexScan

__all__ = ["HexScan"]
