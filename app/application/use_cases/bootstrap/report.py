"""Outcome records produced by the bootstrap steps."""

from __future__ import annotations

from dataclasses import dataclass, field

OUTCOME_CREATED = "created"
OUTCOME_SKIPPED = "skipped"
OUTCOME_UPDATED = "updated"


@dataclass(frozen=True)
class StepResult:
    """What a single bootstrap action did."""

    step: str
    outcome: str
    detail: str = ""

    def describe(self) -> str:
        suffix = f" ({self.detail})" if self.detail else ""
        return f"[{self.outcome}] {self.step}{suffix}"


@dataclass
class BootstrapReport:
    """Ordered results of one bootstrap run."""

    database: str
    results: list[StepResult] = field(default_factory=list)
    aborted_step: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.aborted_step is None

    def add(self, *results: StepResult) -> None:
        self.results.extend(results)

    def outcomes_for(self, step: str) -> list[str]:
        return [result.outcome for result in self.results if result.step == step]


__all__ = [
    "BootstrapReport",
    "OUTCOME_CREATED",
    "OUTCOME_SKIPPED",
    "OUTCOME_UPDATED",
    "StepResult",
]
