from typing import Optional
from loguru import logger
from core.exceptions import ContractViolation
from core.tier_engine import calculate_tier
from models.assessment import (
    BackRequested, EntitySize, Event, GovernanceMaturity, InfrastructureFlags,
    InfrastructureFlagsSubmitted, RestartRequested, ServiceSensitivity,
    SessionState, SingleAnswerChosen, Step, StepView,
)

# Single-valued steps: answer field and the enum its values belong to
SINGLE_ANSWER_FIELDS = {
    Step.ENTITY_SIZE:         ("entity_size", EntitySize),
    Step.SERVICE_SENSITIVITY: ("service_sensitivity", ServiceSensitivity),
    Step.GOVERNANCE_MATURITY: ("governance_maturity", GovernanceMaturity),
}


class AssessmentStateMachine:
    """
    Drives one questionnaire session through steps 1 to 5.

    The machine mutates the SessionState it was given; callers own that
    state (directly or through the session service). Every transition
    returns the StepView the display collaborator should render.
    """

    def __init__(self, state: Optional[SessionState] = None):
        self.state = state if state is not None else SessionState()

    @property
    def current_step(self) -> Step:
        return self.state.current_step

    def view(self) -> StepView:
        return StepView(session_id=self.state.session_id,
                        current_step=self.state.current_step,
                        answers=self.state.answers.model_copy(deep=True),
                        result=self.state.result)

    def select_single_answer(self, step, value) -> StepView:
        if step not in SINGLE_ANSWER_FIELDS:
            raise ContractViolation(f"Step {step} does not take a single answer.")
        step = Step(step)
        self._require_step(step, "select_single_answer")
        field, enum_cls = SINGLE_ANSWER_FIELDS[step]
        try:
            answer = enum_cls(value)
        except ValueError:
            raise ContractViolation(f"{value!r} is not a valid answer for step {step.value}.")
        setattr(self.state.answers, field, answer)
        logger.debug(f"[{self.state.session_id}] {field} = {answer.value}")

        if step == Step.GOVERNANCE_MATURITY:
            return self._show_results()
        return self._go_to(Step(step + 1))

    def set_infrastructure_flags(self, flags: InfrastructureFlags) -> StepView:
        self._require_step(Step.DIGITAL_INFRASTRUCTURE, "set_infrastructure_flags")
        self.state.answers.digital_infrastructure = flags.model_copy()
        logger.debug(f"[{self.state.session_id}] digital_infrastructure = {flags.model_dump()}")
        return self._go_to(Step.GOVERNANCE_MATURITY)

    def go_back(self) -> StepView:
        if self.state.current_step == Step.ENTITY_SIZE:
            logger.debug(f"[{self.state.session_id}] back requested on first step, ignored")
            return self.view()
        return self._go_to(Step(self.state.current_step - 1))

    def restart(self) -> StepView:
        fresh = SessionState(session_id=self.state.session_id)
        self.state.answers = fresh.answers
        self.state.result = None
        logger.debug(f"[{self.state.session_id}] restart")
        return self._go_to(Step.ENTITY_SIZE)

    def dispatch(self, event: Event) -> StepView:
        if isinstance(event, SingleAnswerChosen):
            return self.select_single_answer(event.step, event.value)
        if isinstance(event, InfrastructureFlagsSubmitted):
            return self.set_infrastructure_flags(event.flags)
        if isinstance(event, BackRequested):
            return self.go_back()
        if isinstance(event, RestartRequested):
            return self.restart()
        raise ContractViolation(f"Unknown event: {event!r}")

    def _require_step(self, step: Step, operation: str):
        if self.state.current_step != step:
            raise ContractViolation(
                f"{operation} is only valid on step {step.value}, "
                f"session is on step {self.state.current_step.value}."
            )

    def _show_results(self) -> StepView:
        self.state.result = calculate_tier(self.state.answers)
        return self._go_to(Step.RESULTS)

    def _go_to(self, step: Step) -> StepView:
        if step != Step.RESULTS:
            # a result only exists while the results step is shown
            self.state.result = None
        self.state.current_step = step
        logger.debug(f"[{self.state.session_id}] -> step {step.value}")
        return self.view()
