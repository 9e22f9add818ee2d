"""Category-tagged step logging for pipeline runs.

Each stage of a pipeline run is reported as one line "[CATEGORY] message" on
a standard ``logging`` logger. Output is only visible once the caller (the CLI
scripts, the Streamlit app, a test) configures logging.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class StepLogger:
    name: str = "whylab.pipeline"
    level: int = logging.DEBUG
    # Keep (category, message) pairs when set, for traces and tests.
    record: bool = False
    steps: List[Tuple[str, str]] = field(default_factory=list)
    _logger: Optional[logging.Logger] = field(default=None, repr=False)

    def __post_init__(self):
        self._logger = logging.getLogger(self.name)

    def step(self, message: str, category: str = "SYSTEM") -> None:
        category = category.upper()
        if self.record:
            self.steps.append((category, message))
        self._logger.log(self.level, "[%s] %s", category, message)

    def categories(self) -> List[str]:
        return [c for c, _ in self.steps]
