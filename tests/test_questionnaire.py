# tests/test_questionnaire.py
import pytest

from core.questionnaire import INPUT_STEPS, QUESTIONS, current_choice
from models.assessment import (
    AnswerRecord,
    EntitySize,
    GovernanceMaturity,
    InfrastructureFlags,
    ServiceSensitivity,
    Step,
)


@pytest.mark.parametrize("step", INPUT_STEPS)
def test_unanswered_step_has_no_choice(step):
    assert current_choice(step, AnswerRecord()) is None


def test_single_answers_map_to_option_numbers(scenario_a_answers):
    assert current_choice(Step.ENTITY_SIZE, scenario_a_answers) == "3"
    assert current_choice(Step.SERVICE_SENSITIVITY, scenario_a_answers) == "3"
    assert current_choice(Step.GOVERNANCE_MATURITY, scenario_a_answers) == "4"


def test_flags_map_to_number_list(scenario_a_answers, scenario_b_answers):
    assert current_choice(Step.DIGITAL_INFRASTRUCTURE, scenario_a_answers) == "2,3"
    assert current_choice(Step.DIGITAL_INFRASTRUCTURE, scenario_b_answers) == "1,4"


def test_all_flags(scenario_a_answers):
    scenario_a_answers.digital_infrastructure = InfrastructureFlags(
        cloud=True, mfa=True, incident_process=True, supply_chain=True
    )
    assert current_choice(Step.DIGITAL_INFRASTRUCTURE, scenario_a_answers) == "1,2,3,4"


def test_every_option_is_listed():
    assert list(QUESTIONS[Step.ENTITY_SIZE]["options"]) == list(EntitySize)
    assert list(QUESTIONS[Step.SERVICE_SENSITIVITY]["options"]) == list(ServiceSensitivity)
    assert list(QUESTIONS[Step.GOVERNANCE_MATURITY]["options"]) == list(GovernanceMaturity)
    assert list(QUESTIONS[Step.DIGITAL_INFRASTRUCTURE]["flags"]) == list(InfrastructureFlags.model_fields)
