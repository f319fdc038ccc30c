"""
Gene value holder.

A gene is the smallest unit of encoded information in a chromosome. Genes are
immutable: chromosomes replace a whole Gene in a slot instead of editing it.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Gene:
    """Single immutable gene value.

    The value type is decided by the concrete encoding (int, float, bool,
    symbol, ...). ``None`` is the unset sentinel used for fresh or resized
    slots.

    Example:
        >>> Gene(3) == Gene(3)
        True
        >>> Gene() == Gene(None)
        True
        >>> str(Gene())
        ''
    """

    value: Any = None

    def __str__(self) -> str:
        return "" if self.value is None else str(self.value)
