# tests/test_session_service.py
"""Session registry: new_session / apply / current_result and display listeners."""

import pytest

from core.exceptions import SessionNotFoundError
from models.assessment import (
    BackRequested,
    InfrastructureFlags,
    InfrastructureFlagsSubmitted,
    RestartRequested,
    SingleAnswerChosen,
    Step,
    Tier,
)


def answer_all(service, session_id, size, sensitivity, flags, governance):
    service.apply(session_id, SingleAnswerChosen(step=1, value=size))
    service.apply(session_id, SingleAnswerChosen(step=2, value=sensitivity))
    service.apply(session_id, InfrastructureFlagsSubmitted(flags=flags))
    return service.apply(session_id, SingleAnswerChosen(step=4, value=governance))


def test_new_session_starts_on_step_1(service):
    session_id = service.new_session()
    state = service.get_state(session_id)
    assert state.current_step == Step.ENTITY_SIZE
    assert service.current_result(session_id) is None


def test_full_run_exposes_result(service):
    session_id = service.new_session()
    view = answer_all(service, session_id, "large", "high",
                      InfrastructureFlags(mfa=True, incident_process=True), "iso")
    assert view.current_step == Step.RESULTS
    assert service.current_result(session_id).tier == Tier.TIER_2


def test_sessions_are_isolated(service):
    first = service.new_session()
    second = service.new_session()
    assert first != second

    answer_all(service, first, "small", "low", InfrastructureFlags(cloud=True), "none")

    assert service.current_result(first).tier == Tier.TIER_3
    assert service.current_result(second) is None
    assert service.get_state(second).answers.entity_size is None


def test_restart_clears_result(service):
    session_id = service.new_session()
    answer_all(service, session_id, "small", "low", InfrastructureFlags(), "none")
    view = service.apply(session_id, RestartRequested())
    assert view.current_step == Step.ENTITY_SIZE
    assert service.current_result(session_id) is None


def test_listeners_receive_every_transition(service):
    seen = []
    service.subscribe(seen.append)

    session_id = service.new_session()
    service.apply(session_id, BackRequested())
    answer_all(service, session_id, "medium", "medium",
               InfrastructureFlags(mfa=True, incident_process=True), "basic")

    assert [v.current_step for v in seen] == [1, 1, 2, 3, 4, 5]
    assert all(v.result is None for v in seen[:-1])
    assert seen[-1].result.tier == Tier.TIER_2
    assert seen[-1].result.score == 5


def test_unknown_session(service):
    with pytest.raises(SessionNotFoundError):
        service.apply("missing", BackRequested())
    with pytest.raises(KeyError):
        service.current_result("missing")


def test_end_session(service):
    session_id = service.new_session()
    service.end_session(session_id)
    with pytest.raises(SessionNotFoundError):
        service.get_state(session_id)
    with pytest.raises(SessionNotFoundError):
        service.end_session(session_id)
