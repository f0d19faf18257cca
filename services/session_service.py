from typing import Callable, Optional
from loguru import logger
from core.exceptions import SessionNotFoundError
from core.state_machine import AssessmentStateMachine
from models.assessment import Event, SessionState, StepView, TierResult

Listener = Callable[[StepView], None]


class SessionService:
    """Registry of questionnaire sessions keyed by session id."""

    def __init__(self):
        self._sessions: dict[str, SessionState] = {}
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener):
        self._listeners.append(listener)

    def new_session(self) -> str:
        state = SessionState()
        self._sessions[state.session_id] = state
        logger.info(f"Session started: {state.session_id}")
        self._publish(AssessmentStateMachine(state).view())
        return state.session_id

    def apply(self, session_id: str, event: Event) -> StepView:
        view = AssessmentStateMachine(self.get_state(session_id)).dispatch(event)
        self._publish(view)
        return view

    def current_result(self, session_id: str) -> Optional[TierResult]:
        return self.get_state(session_id).result

    def get_state(self, session_id: str) -> SessionState:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None

    def end_session(self, session_id: str):
        self.get_state(session_id)
        del self._sessions[session_id]
        logger.info(f"Session ended: {session_id}")

    def _publish(self, view: StepView):
        for listener in self._listeners:
            listener(view)
