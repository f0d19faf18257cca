from loguru import logger
from core.exceptions import IncompleteAnswersError
from core.tier_content import TIER_CONTENT
from models.assessment import (
    AnswerRecord, EntitySize, GovernanceMaturity, InfrastructureFlags,
    ScoreBreakdown, ServiceSensitivity, Tier, TierResult,
)

SIZE_WEIGHTS = {
    EntitySize.LARGE: 3,
    EntitySize.MEDIUM: 2,
    EntitySize.SMALL: 1,
}

SENSITIVITY_WEIGHTS = {
    ServiceSensitivity.HIGH: 3,
    ServiceSensitivity.MEDIUM: 2,
    ServiceSensitivity.LOW: 1,
}

# Higher maturity mitigates exposure
GOVERNANCE_MODIFIERS = {
    GovernanceMaturity.NONE: 2,
    GovernanceMaturity.BASIC: 1,
    GovernanceMaturity.STRUCTURED: -1,
    GovernanceMaturity.ISO: -2,
}

INFRA_CAP = 3
TIER_3_MIN = 6
TIER_2_MIN = 4


class TierEngine:
    def __init__(self, answers: AnswerRecord):
        self.answers = answers

    def calculate(self) -> TierResult:
        missing = self.answers.missing_fields()
        if missing:
            raise IncompleteAnswersError(missing)
        breakdown = self.breakdown()
        tier = self._tier(breakdown.total)
        logger.info(f"Tier calculated: {tier.value} (score {breakdown.total})")
        return TierResult(tier=tier, score=breakdown.total,
                          breakdown=breakdown, content=TIER_CONTENT[tier])

    def breakdown(self) -> ScoreBreakdown:
        infra_raw = self._infra_risk(self.answers.digital_infrastructure)
        return ScoreBreakdown(
            entity_size=SIZE_WEIGHTS.get(self.answers.entity_size, 1),
            service_sensitivity=SENSITIVITY_WEIGHTS.get(self.answers.service_sensitivity, 1),
            infrastructure_raw=infra_raw,
            infrastructure=min(infra_raw, INFRA_CAP),
            governance=GOVERNANCE_MODIFIERS.get(self.answers.governance_maturity, 0),
        )

    @staticmethod
    def _infra_risk(flags: InfrastructureFlags) -> int:
        risk = 0
        if flags.cloud: risk += 1
        if not flags.mfa: risk += 2
        if not flags.incident_process: risk += 2
        if flags.supply_chain: risk += 1
        return risk

    @staticmethod
    def _tier(score: int) -> Tier:
        if score >= TIER_3_MIN: return Tier.TIER_3
        elif score >= TIER_2_MIN: return Tier.TIER_2
        else: return Tier.TIER_1


def tier_for_score(score: int) -> Tier:
    return TierEngine._tier(score)


def score_answers(answers: AnswerRecord) -> ScoreBreakdown:
    return TierEngine(answers).breakdown()


def calculate_tier(answers: AnswerRecord) -> TierResult:
    return TierEngine(answers).calculate()
