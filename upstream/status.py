"""
Translate an upstream run lifecycle state into a status label and progress.
"""

from typing import NamedTuple

PROGRESS_BY_LIFECYCLE_STATE = {
    "PENDING": 10,
    "QUEUED": 20,
    "RUNNING": 60,
    "TERMINATING": 90,
    "TERMINATED": 100,
}

STATUS_COMPLETED = "completed"
STATUS_ERROR = "error"


class RunProgress(NamedTuple):
    status: str
    progress: int


def translate_run_state(life_cycle_state: str) -> RunProgress:
    """
    Map a lifecycle state to (status, progress).

    TERMINATED is "completed" and INTERNAL_ERROR is "error"; every other
    state is passed through lower-cased. Unknown states report 0 progress.
    """
    if life_cycle_state == "TERMINATED":
        status = STATUS_COMPLETED
    elif life_cycle_state == "INTERNAL_ERROR":
        status = STATUS_ERROR
    else:
        status = life_cycle_state.lower()

    return RunProgress(status, PROGRESS_BY_LIFECYCLE_STATE.get(life_cycle_state, 0))
