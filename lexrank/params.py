"""
Shape parameters for lexicographic enumeration.

Key parameters:
- frequency: Maximum multiplicity per symbol of the alphabet {0, ..., n-1}
- length: Arrangement length r

Families without repetition use Params.distinct(n, r), where every
symbol has multiplicity 1. Negative multiplicities are clamped to 0.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from .counting import InvalidRange, check_range, clamp_frequency


@dataclass
class Params:
    """Shape of an enumeration: per-symbol multiplicities and arrangement length."""

    frequency: Sequence[int]  # Multiplicity per symbol (clamped to >= 0)
    length: int  # Arrangement length r

    def __post_init__(self):
        self.frequency = clamp_frequency(self.frequency)
        check_range(self.set_cardinality, self.length)

    @classmethod
    def distinct(cls, n: int, r: int) -> "Params":
        """Shape for n distinct symbols, each usable once."""
        if n < 0:
            raise InvalidRange(f"Invalid range: n={n}, r={r}")
        return cls(frequency=(1,) * n, length=r)

    @property
    def num_symbols(self) -> int:
        """Alphabet size (including symbols with multiplicity 0)."""
        return len(self.frequency)

    @property
    def set_cardinality(self) -> int:
        """Total number of symbol copies: sum(frequency)."""
        return sum(self.frequency)

    @property
    def is_distinct(self) -> bool:
        """True when every symbol has multiplicity exactly 1."""
        return all(f == 1 for f in self.frequency)

    def __repr__(self) -> str:
        if self.is_distinct:
            return f"Params(n={self.num_symbols}, r={self.length})"
        return f"Params(frequency={list(self.frequency)}, r={self.length})"
