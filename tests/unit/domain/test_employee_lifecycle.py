from uuid import uuid4

import pytest

from src.domain import employee_lifecycle
from src.domain.base import utcnow
from src.domain.entities import AssignmentStatus, OnboardingStatus
from src.domain.errors import InvalidTransitionError
from tests.fixtures.factories import make_assignment, make_employee, make_task


@pytest.mark.parametrize(
    "source,target,expected",
    [
        (OnboardingStatus.not_started, OnboardingStatus.invited, True),
        (OnboardingStatus.not_started, OnboardingStatus.in_progress, True),
        (OnboardingStatus.invited, OnboardingStatus.in_progress, True),
        (OnboardingStatus.in_progress, OnboardingStatus.completed, True),
        (OnboardingStatus.not_started, OnboardingStatus.completed, False),
        (OnboardingStatus.invited, OnboardingStatus.completed, False),
        (OnboardingStatus.in_progress, OnboardingStatus.invited, False),
        (OnboardingStatus.completed, OnboardingStatus.in_progress, False),
    ],
)
def test_can_transition(source, target, expected):
    assert employee_lifecycle.can_transition(source, target) is expected


def test_unknown_status_is_rejected():
    with pytest.raises(InvalidTransitionError):
        employee_lifecycle.validate_transition("archived", OnboardingStatus.completed)


def test_transition_to_completed_stamps_completion_time():
    employee = make_employee(uuid4(), status=OnboardingStatus.in_progress)
    now = utcnow()

    employee_lifecycle.transition(employee, OnboardingStatus.completed, now)

    assert employee.onboarding_status == OnboardingStatus.completed
    assert employee.onboarding_completed_at == now


def test_mark_invited_moves_not_started_to_invited():
    employee = make_employee(uuid4())
    now = utcnow()

    employee_lifecycle.mark_invited(employee, now)

    assert employee.onboarding_status == OnboardingStatus.invited
    assert employee.invitation_sent_at == now


def test_mark_invited_keeps_in_progress_status():
    employee = make_employee(uuid4(), status=OnboardingStatus.in_progress)
    now = utcnow()

    employee_lifecycle.mark_invited(employee, now)

    assert employee.onboarding_status == OnboardingStatus.in_progress
    assert employee.invitation_sent_at == now


def test_mark_invited_rejects_completed_employee():
    employee = make_employee(uuid4(), status=OnboardingStatus.completed)

    with pytest.raises(InvalidTransitionError):
        employee_lifecycle.mark_invited(employee, utcnow())


def test_record_first_login_starts_onboarding():
    employee = make_employee(uuid4(), status=OnboardingStatus.invited)
    now = utcnow()

    employee_lifecycle.record_first_login(employee, now)

    assert employee.onboarding_status == OnboardingStatus.in_progress
    assert employee.first_login_at == now


def test_record_task_activity_only_moves_pre_start_employees():
    not_started = make_employee(uuid4())
    in_progress = make_employee(uuid4(), status=OnboardingStatus.in_progress)

    assert employee_lifecycle.record_task_activity(not_started, utcnow()) is True
    assert not_started.onboarding_status == OnboardingStatus.in_progress
    assert employee_lifecycle.record_task_activity(in_progress, utcnow()) is False


def test_gate_ignores_optional_assignments():
    employee = make_employee(uuid4(), status=OnboardingStatus.in_progress)
    required = make_task(employee.company_id, required=True)
    optional = make_task(employee.company_id, title="Team lunch", required=False)
    rows = [
        (make_assignment(employee, required, AssignmentStatus.completed), required),
        (make_assignment(employee, optional, AssignmentStatus.pending), optional),
    ]

    assert employee_lifecycle.completion_gate_met(rows)


def test_gate_uses_required_flag_copied_onto_assignment():
    employee = make_employee(uuid4(), status=OnboardingStatus.in_progress)
    task = make_task(employee.company_id, required=False)
    assignment = make_assignment(employee, task, AssignmentStatus.pending)
    task.required = True

    assert employee_lifecycle.completion_gate_met([(assignment, task)])

    assignment.required = True
    task.required = False

    assert not employee_lifecycle.completion_gate_met([(assignment, task)])


def test_gate_counts_skipped_as_resolved():
    employee = make_employee(uuid4(), status=OnboardingStatus.in_progress)
    first = make_task(employee.company_id)
    second = make_task(employee.company_id, title="Laptop setup")
    rows = [
        (make_assignment(employee, first, AssignmentStatus.completed), first),
        (make_assignment(employee, second, AssignmentStatus.skipped), second),
    ]

    assert employee_lifecycle.completion_gate_met(rows)


def test_gate_blocked_by_open_required_assignment():
    employee = make_employee(uuid4(), status=OnboardingStatus.in_progress)
    task = make_task(employee.company_id)
    rows = [(make_assignment(employee, task, AssignmentStatus.in_progress), task)]

    assert not employee_lifecycle.completion_gate_met(rows)
    assert employee_lifecycle.apply_completion_gate(employee, rows, utcnow()) == []
    assert employee.onboarding_status == OnboardingStatus.in_progress


def test_apply_gate_passes_through_in_progress():
    employee = make_employee(uuid4(), status=OnboardingStatus.invited)
    task = make_task(employee.company_id)
    rows = [(make_assignment(employee, task, AssignmentStatus.completed), task)]

    entered = employee_lifecycle.apply_completion_gate(employee, rows, utcnow())

    assert entered == [OnboardingStatus.in_progress, OnboardingStatus.completed]
    assert employee.onboarding_status == OnboardingStatus.completed
    assert employee.onboarding_completed_at is not None


def test_apply_gate_is_idempotent_for_completed_employee():
    employee = make_employee(uuid4(), status=OnboardingStatus.completed)
    stamp = utcnow()
    employee.onboarding_completed_at = stamp

    assert employee_lifecycle.apply_completion_gate(employee, [], utcnow()) == []
    assert employee.onboarding_completed_at == stamp
