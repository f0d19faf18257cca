# tests/conftest.py

"""
Pytest fixtures shared by the calculator, state machine, session and CLI tests.

SCENARIO REFERENCE:
- scenario A: large / high / mfa + incident process / iso  -> 3+3+0-2 = 4 -> tier-2
- scenario B: small / low / cloud + supply chain / none    -> 1+1+3+2 = 7 -> tier-3
"""

import pytest

from core.state_machine import AssessmentStateMachine
from models.assessment import (
    AnswerRecord,
    EntitySize,
    GovernanceMaturity,
    InfrastructureFlags,
    ServiceSensitivity,
)
from services.session_service import SessionService


# =============================================================================
# ANSWER FIXTURES
# =============================================================================

@pytest.fixture
def scenario_a_answers():
    return AnswerRecord(
        entity_size=EntitySize.LARGE,
        service_sensitivity=ServiceSensitivity.HIGH,
        digital_infrastructure=InfrastructureFlags(
            cloud=False, mfa=True, incident_process=True, supply_chain=False
        ),
        governance_maturity=GovernanceMaturity.ISO,
    )


@pytest.fixture
def scenario_b_answers():
    return AnswerRecord(
        entity_size=EntitySize.SMALL,
        service_sensitivity=ServiceSensitivity.LOW,
        digital_infrastructure=InfrastructureFlags(
            cloud=True, mfa=False, incident_process=False, supply_chain=True
        ),
        governance_maturity=GovernanceMaturity.NONE,
    )


# =============================================================================
# SESSION FIXTURES
# =============================================================================

@pytest.fixture
def machine():
    """A fresh state machine on step 1."""
    return AssessmentStateMachine()


@pytest.fixture
def service():
    return SessionService()


@pytest.fixture
def report_dir(tmp_path):
    return tmp_path / "reports"
