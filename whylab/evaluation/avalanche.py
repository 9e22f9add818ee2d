"""Digest avalanche: how many output bits flip for a single flipped input bit.

The pipeline ends in a hash, so a healthy run sits near 0.5 regardless of
what the inner stages do.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import random
import statistics
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, List, Optional

from whylab.cipher.cryptanalysis import _flip_bit, _hamming_distance_bytes, _rand_bytes
from whylab.cipher.pipeline import build_pipeline
from whylab.cipher.spec import PipelineSpec


@dataclass
class DigestAvalancheResult:
    input_type: str             # "data" or "key"
    profile: str
    num_trials: int
    input_bytes: int
    num_output_bits: int
    fractions: List[float] = field(default_factory=list)

    mean: float = 0.0           # ~0.5 ideal
    std: float = 0.0
    min_fraction: float = 0.0
    max_fraction: float = 0.0

    @property
    def passes(self) -> bool:
        """Heuristic: mean within 0.05 of 0.5."""
        return abs(self.mean - 0.5) < 0.05

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d.pop("fractions")
        d["passes"] = self.passes
        return d

    def summary(self) -> str:
        status = "PASS" if self.passes else "FAIL"
        return (
            f"[{status}] avalanche({self.input_type}, {self.profile}): "
            f"mean={self.mean:.4f}, std={self.std:.4f}, "
            f"min={self.min_fraction:.4f}, max={self.max_fraction:.4f}"
        )


def compute_digest_avalanche(
    spec: Optional[PipelineSpec] = None,
    *,
    input_type: str = "data",
    trials: int = 200,
    data_bytes: int = 16,
    key_bytes: int = 3,
    seed: int = 1337,
    progress_callback: Optional[Callable[[int, int], None]] = None,
) -> DigestAvalancheResult:
    """Flip one random bit of the data (or key) per trial and compare digests.

    Args:
        spec: Pipeline configuration; defaults to PipelineSpec().
        input_type: "data" or "key".
        trials: Number of random (data, key) pairs.
        data_bytes: Length of the random data.
        key_bytes: Length of the random key.
        seed: Random seed for reproducibility.
        progress_callback: Optional callback(current_trial, total_trials).
    """
    if input_type not in ("data", "key"):
        raise ValueError(f"input_type must be 'data' or 'key', got '{input_type}'")
    if data_bytes < 1 or key_bytes < 1:
        raise ValueError("data_bytes and key_bytes must be >= 1")

    spec = spec or PipelineSpec()
    pipeline = build_pipeline(spec)
    rng = random.Random(seed)
    num_output_bits = spec.digest_size * 8
    input_bytes = data_bytes if input_type == "data" else key_bytes

    fractions: List[float] = []
    for t in range(trials):
        if progress_callback:
            progress_callback(t, trials)

        data = _rand_bytes(rng, data_bytes)
        key = _rand_bytes(rng, key_bytes)
        d1 = pipeline.encrypt(data, key)

        bit = rng.randrange(0, input_bytes * 8)
        if input_type == "data":
            d2 = pipeline.encrypt(_flip_bit(data, bit), key)
        else:
            d2 = pipeline.encrypt(data, _flip_bit(key, bit))

        fractions.append(_hamming_distance_bytes(d1, d2) / num_output_bits)

    return DigestAvalancheResult(
        input_type=input_type,
        profile=spec.profile,
        num_trials=trials,
        input_bytes=input_bytes,
        num_output_bits=num_output_bits,
        fractions=fractions,
        mean=round(statistics.mean(fractions), 6) if fractions else 0.0,
        std=round(statistics.stdev(fractions), 6) if len(fractions) > 1 else 0.0,
        min_fraction=round(min(fractions), 6) if fractions else 0.0,
        max_fraction=round(max(fractions), 6) if fractions else 0.0,
    )
