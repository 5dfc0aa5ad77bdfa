from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, Sequence

from .context import InstallCtx

logger = logging.getLogger(__name__)


class Step(Protocol):
    """A single installation step."""

    step_id: str

    def run(self, ctx: InstallCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        ...


@dataclass(frozen=True)
class PipelineResult:
    state: Dict[str, Any]
    ran_steps: List[str]


def new_state() -> Dict[str, Any]:
    return {
        "execution": {
            "current_step": None,
            "completed_steps": [],
            "links": [],
            "backups": [],
            "warnings": [],
            "decisions": {},
        }
    }


def run_pipeline(
    *,
    ctx: InstallCtx,
    state: Dict[str, Any],
    steps: Sequence[Step],
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
) -> PipelineResult:
    """Run steps in order. The first exception aborts the run."""

    ids = [s.step_id for s in steps]
    for wanted in (start_at, stop_after):
        if wanted is not None and wanted not in ids:
            raise ValueError(f"Unknown step id: {wanted} (known: {', '.join(ids)})")

    ran: List[str] = []
    started = start_at is None

    for step in steps:
        if not started:
            if step.step_id == start_at:
                started = True
            else:
                continue

        exe = state.setdefault("execution", {})
        exe["current_step"] = step.step_id
        logger.info("Running step %s", step.step_id)
        state = step.run(ctx, state)
        state.setdefault("execution", {}).setdefault("completed_steps", []).append(step.step_id)
        ran.append(step.step_id)

        if stop_after is not None and step.step_id == stop_after:
            logger.info("Stopping after %s", stop_after)
            break

    state.setdefault("execution", {})["current_step"] = None
    return PipelineResult(state=state, ran_steps=ran)
