"""pytest-benchmark timings for rule parsing, operand derivation and selection.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
