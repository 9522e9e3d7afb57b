"""
Unit tests for the run status translator
"""

import pytest
from upstream.status import translate_run_state, RunProgress


class TestTranslateRunState:
    """Lifecycle state -> (status, progress)"""

    @pytest.mark.parametrize("state,progress", [
        ("PENDING", 10),
        ("QUEUED", 20),
        ("RUNNING", 60),
        ("TERMINATING", 90),
        ("TERMINATED", 100),
    ])
    def test_known_states_progress(self, state, progress):
        assert translate_run_state(state).progress == progress

    def test_terminated_is_completed(self):
        assert translate_run_state("TERMINATED") == RunProgress("completed", 100)

    def test_internal_error_is_error_with_no_progress(self):
        assert translate_run_state("INTERNAL_ERROR") == RunProgress("error", 0)

    def test_known_states_pass_through_lower_cased(self):
        assert translate_run_state("RUNNING").status == "running"
        assert translate_run_state("PENDING").status == "pending"
        assert translate_run_state("TERMINATING").status == "terminating"

    @pytest.mark.parametrize("state", ["SKIPPED", "BLOCKED", "WAITING_FOR_RETRY", "Something_Else"])
    def test_unknown_states(self, state):
        status, progress = translate_run_state(state)

        assert status == state.lower()
        assert progress == 0

    def test_is_deterministic(self):
        assert translate_run_state("QUEUED") == translate_run_state("QUEUED")
