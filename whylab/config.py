from __future__ import annotations

import os
from functools import lru_cache
from typing import List, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .cipher.spec import PipelineSpec


class Settings(BaseModel):
    # Pipeline
    profile: Literal["standard", "dotnet"] = Field(default="standard")
    hash_name: str = Field(default="sha256")
    strict_permutation: bool = Field(default=False)

    # Display
    display_format: Literal["hex", "hyphen", "base64"] = Field(default="hyphen")
    default_key: List[int] = Field(default_factory=lambda: [42, 17, 99])
    log_level: str = Field(default="INFO")

    # Reproducibility
    global_seed: int = Field(default=1337)

    runs_dir: str = Field(default="runs")

    def pipeline_spec(self) -> PipelineSpec:
        return PipelineSpec(
            profile=self.profile,
            hash_name=self.hash_name,
            strict_permutation=self.strict_permutation,
        )

    def default_key_bytes(self) -> bytes:
        return bytes(self.default_key)


def parse_key_list(text: str) -> List[int]:
    """Parse "42,17,99" into [42, 17, 99]."""
    values = [int(part.strip(), 0) for part in text.split(",") if part.strip()]
    for v in values:
        if not 0 <= v <= 255:
            raise ValueError(f"Key byte out of range: {v}")
    return values


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    # Load .env if present
    load_dotenv()

    def _bool(name: str, default: bool) -> bool:
        v = os.getenv(name)
        if v is None:
            return default
        return v.strip().lower() in {"1", "true", "yes", "y", "on"}

    return Settings(
        profile=os.getenv("WHY_PROFILE", "standard").strip().lower(),
        hash_name=os.getenv("WHY_HASH", "sha256"),
        strict_permutation=_bool("WHY_STRICT_PERMUTATION", False),
        display_format=os.getenv("WHY_DISPLAY_FORMAT", "hyphen").strip().lower(),
        default_key=parse_key_list(os.getenv("WHY_DEFAULT_KEY", "42,17,99")),
        log_level=os.getenv("WHY_LOG_LEVEL", "INFO").upper(),
        global_seed=int(os.getenv("WHY_GLOBAL_SEED", "1337")),
        runs_dir=os.getenv("WHY_RUNS_DIR", "runs"),
    )
