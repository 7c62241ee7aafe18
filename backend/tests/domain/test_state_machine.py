"""Unit tests for the job application state machine."""

import pytest
from domain.enums import ApplicationAction, ApplicationStatus
from domain.exceptions import InvalidTransitionError
from domain.state_machine import TRANSITIONS, allowed_actions, is_terminal, next_status


class TestTransitionTable:
    """Test the (status, action) -> status table."""

    @pytest.mark.parametrize(
        "action, expected",
        [
            (ApplicationAction.ACCEPT, ApplicationStatus.ACCEPTED),
            (ApplicationAction.REJECT, ApplicationStatus.REJECTED),
            (ApplicationAction.PROCESS, ApplicationStatus.PROCESSING),
        ],
    )
    def test_active_transitions(self, action, expected):
        assert next_status(ApplicationStatus.ACTIVE, action) == expected

    @pytest.mark.parametrize(
        "status",
        [ApplicationStatus.ACCEPTED, ApplicationStatus.REJECTED, ApplicationStatus.PROCESSING],
    )
    @pytest.mark.parametrize(
        "action",
        [ApplicationAction.ACCEPT, ApplicationAction.REJECT, ApplicationAction.PROCESS],
    )
    def test_inactive_statuses_have_no_transitions(self, status, action):
        with pytest.raises(InvalidTransitionError) as exc_info:
            next_status(status, action)
        assert exc_info.value.current_status == status
        assert exc_info.value.action == action
        assert exc_info.value.code == "INVALID_STATE"

    def test_view_is_not_a_transition(self):
        with pytest.raises(InvalidTransitionError):
            next_status(ApplicationStatus.ACTIVE, ApplicationAction.VIEW)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            TRANSITIONS[(ApplicationStatus.ACCEPTED, ApplicationAction.ACCEPT)] = (
                ApplicationStatus.ACTIVE
            )


class TestTerminalStates:
    """Test helpers derived from the table."""

    def test_active_allows_three_actions(self):
        assert set(allowed_actions(ApplicationStatus.ACTIVE)) == {
            ApplicationAction.ACCEPT,
            ApplicationAction.REJECT,
            ApplicationAction.PROCESS,
        }

    def test_only_active_is_not_terminal(self):
        terminal = {status for status in ApplicationStatus if is_terminal(status)}
        assert terminal == {
            ApplicationStatus.ACCEPTED,
            ApplicationStatus.REJECTED,
            ApplicationStatus.PROCESSING,
        }
