"""Deterministic evaluation of the ObfuscatedEncrypt pipeline.

S-box differential/linear analysis, permutation injectivity and digest
avalanche, aggregated into an EvaluationReport.

Research / education only. Do NOT use in production.
"""

from .avalanche import DigestAvalancheResult, compute_digest_avalanche
from .permutation_analysis import PermutationAnalysisResult, analyze_permutation
from .report import EvaluationReport, run_evaluation
from .sbox_analysis import SBoxAnalysisResult, analyze_sbox

__all__ = [
    "DigestAvalancheResult",
    "compute_digest_avalanche",
    "PermutationAnalysisResult",
    "analyze_permutation",
    "EvaluationReport",
    "run_evaluation",
    "SBoxAnalysisResult",
    "analyze_sbox",
]
