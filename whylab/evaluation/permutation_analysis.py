"""Injectivity check for the (i*7 + 3) mod n byte relocation."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from whylab.cipher.components import permutation_collisions, permutation_target


@dataclass
class PermutationAnalysisResult:
    length: int
    is_bijective: bool
    lost_sources: List[int] = field(default_factory=list)   # bytes overwritten by a later index
    empty_slots: List[int] = field(default_factory=list)    # output positions left zero

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        if self.is_bijective:
            return f"n={self.length}: bijective"
        return (
            f"n={self.length}: NOT bijective, "
            f"{len(self.lost_sources)} bytes lost, {len(self.empty_slots)} slots zero"
        )


def analyze_permutation(n: int) -> PermutationAnalysisResult:
    if n < 0:
        raise ValueError(f"length must be >= 0, got {n}")
    written = {permutation_target(i, n) for i in range(n)}
    lost = permutation_collisions(n)
    return PermutationAnalysisResult(
        length=n,
        is_bijective=not lost,
        lost_sources=lost,
        empty_slots=[p for p in range(n) if p not in written],
    )
