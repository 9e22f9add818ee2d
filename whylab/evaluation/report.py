"""Structured evaluation report builder.

Aggregates S-box, permutation and avalanche results into a single
serializable report for export and UI display.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from whylab.cipher.spec import PipelineSpec

from .avalanche import DigestAvalancheResult, compute_digest_avalanche
from .permutation_analysis import PermutationAnalysisResult, analyze_permutation
from .sbox_analysis import SBoxAnalysisResult, analyze_sbox


@dataclass
class EvaluationReport:
    """Complete evaluation report aggregating all analysis results."""
    timestamp: str = ""
    spec: Dict[str, Any] = field(default_factory=dict)
    sbox_results: List[SBoxAnalysisResult] = field(default_factory=list)
    permutation_results: List[PermutationAnalysisResult] = field(default_factory=list)
    avalanche_results: List[DigestAvalancheResult] = field(default_factory=list)

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now(timezone.utc).isoformat()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize full report for JSON export."""
        return {
            "timestamp": self.timestamp,
            "spec": self.spec,
            "sbox": [s.to_dict() for s in self.sbox_results],
            "permutation": [p.to_dict() for p in self.permutation_results],
            "avalanche": [a.to_dict() for a in self.avalanche_results],
            "summary": {
                "sbox_all_bijective": all(s.is_bijective for s in self.sbox_results),
                "avalanche_all_pass": all(a.passes for a in self.avalanche_results),
                "lossy_lengths": self.lossy_lengths(),
            },
        }

    def to_summary(self) -> str:
        lines = [f"Evaluation Report — {self.timestamp}", "=" * 50]

        if self.sbox_results:
            lines.append(f"\nS-box Analysis: {len(self.sbox_results)} tables")
            for s in self.sbox_results:
                lines.append(f"  {s.summary()}")

        if self.permutation_results:
            lines.append(f"\nPermutation Analysis: {len(self.permutation_results)} lengths")
            for p in self.permutation_results:
                lines.append(f"  {p.summary()}")

        if self.avalanche_results:
            ok = sum(1 for a in self.avalanche_results if a.passes)
            lines.append(f"\nDigest Avalanche: {ok}/{len(self.avalanche_results)} pass")
            for a in self.avalanche_results:
                lines.append(f"  {a.summary()}")

        return "\n".join(lines)

    def lossy_lengths(self) -> List[int]:
        return [p.length for p in self.permutation_results if not p.is_bijective]


def run_evaluation(
    spec: Optional[PipelineSpec] = None,
    *,
    lengths: Optional[List[int]] = None,
    trials: int = 200,
    seed: int = 1337,
) -> EvaluationReport:
    """S-box analysis, permutation check over ``lengths`` and both avalanches."""
    spec = spec or PipelineSpec()
    if lengths is None:
        lengths = sorted({spec.digest_size, 7, 14, 28, 32})

    return EvaluationReport(
        spec=spec.model_dump(),
        sbox_results=[analyze_sbox(constant=spec.sbox_constant)],
        permutation_results=[analyze_permutation(n) for n in lengths],
        avalanche_results=[
            compute_digest_avalanche(spec, input_type="data", trials=trials, seed=seed),
            compute_digest_avalanche(spec, input_type="key", trials=trials, seed=seed + 1),
        ],
    )
