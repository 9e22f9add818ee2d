"""S-box differential and linear analysis.

Wraps sbox_ddt_max and sbox_lat_max_abs from whylab.cipher.cryptanalysis
with structured result output and bijectivity checking.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from whylab.cipher.components import generate_sbox, is_permutation
from whylab.cipher.cryptanalysis import sbox_ddt_max, sbox_lat_max_abs


@dataclass
class SBoxAnalysisResult:
    """Structured result of S-box differential/linear analysis."""
    name: str
    sbox_size: int              # 16 (4-bit) or 256 (8-bit)
    ddt_max: int                # Max DDT entry (ideal: 4 for 8-bit)
    lat_max_abs: int            # Max LAT absolute bias (lower = better)
    is_bijective: bool
    fixed_points: int           # x with S[x] == x
    differential_uniformity: str  # "good" / "fair" / "poor"
    linearity: str              # "good" / "fair" / "poor"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        bij = "bijective" if self.is_bijective else "NOT bijective"
        return (
            f"{self.name} ({self.sbox_size}-entry): "
            f"DDT_max={self.ddt_max} ({self.differential_uniformity}), "
            f"LAT_max={self.lat_max_abs} ({self.linearity}), "
            f"fixed_points={self.fixed_points}, {bij}"
        )


def _rate_differential_uniformity(ddt_max: int, sbox_size: int) -> str:
    """Rate DDT max value quality."""
    fair = 6 if sbox_size == 16 else 8
    if ddt_max <= 4:
        return "good"
    elif ddt_max <= fair:
        return "fair"
    return "poor"


def _rate_linearity(lat_max: int, sbox_size: int) -> str:
    """Rate LAT max absolute bias quality."""
    good, fair = (4, 6) if sbox_size == 16 else (16, 32)
    if lat_max <= good:
        return "good"
    elif lat_max <= fair:
        return "fair"
    return "poor"


def analyze_sbox(
    sbox: Optional[List[int]] = None,
    *,
    name: str = "sbox.pipeline",
    constant: int = 42,
) -> SBoxAnalysisResult:
    """Analyze an S-box table; defaults to the pipeline's generated S-box.

    Args:
        sbox: Lookup table of 16 or 256 entries. Generated from ``constant``
            when omitted.
        name: Label used in summaries.
        constant: Shuffle constant for the generated S-box.
    """
    table = list(sbox) if sbox is not None else generate_sbox(constant)
    size = len(table)

    ddt = sbox_ddt_max(table)
    lat = sbox_lat_max_abs(table)

    return SBoxAnalysisResult(
        name=name,
        sbox_size=size,
        ddt_max=ddt,
        lat_max_abs=lat,
        is_bijective=is_permutation(table, size),
        fixed_points=sum(1 for x, y in enumerate(table) if x == y),
        differential_uniformity=_rate_differential_uniformity(ddt, size),
        linearity=_rate_linearity(lat, size),
    )
