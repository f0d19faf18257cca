from enum import Enum, IntEnum
from typing import Literal, Optional, Union
from uuid import uuid4
from pydantic import BaseModel, Field

class EntitySize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

class ServiceSensitivity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

class GovernanceMaturity(str, Enum):
    NONE = "none"
    BASIC = "basic"
    STRUCTURED = "structured"
    ISO = "iso"

class Tier(str, Enum):
    TIER_1 = "tier-1"
    TIER_2 = "tier-2"
    TIER_3 = "tier-3"

class Step(IntEnum):
    ENTITY_SIZE = 1
    SERVICE_SENSITIVITY = 2
    DIGITAL_INFRASTRUCTURE = 3
    GOVERNANCE_MATURITY = 4
    RESULTS = 5

class InfrastructureFlags(BaseModel):
    cloud: bool = False
    mfa: bool = False
    incident_process: bool = False
    supply_chain: bool = False

class AnswerRecord(BaseModel):
    entity_size: Optional[EntitySize] = None
    service_sensitivity: Optional[ServiceSensitivity] = None
    digital_infrastructure: InfrastructureFlags = Field(default_factory=InfrastructureFlags)
    governance_maturity: Optional[GovernanceMaturity] = None

    def missing_fields(self) -> list[str]:
        return [name for name in ("entity_size", "service_sensitivity", "governance_maturity")
                if getattr(self, name) is None]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()

class ScoreBreakdown(BaseModel):
    entity_size: int
    service_sensitivity: int
    infrastructure_raw: int
    infrastructure: int
    governance: int

    @property
    def total(self) -> int:
        return (self.entity_size + self.service_sensitivity
                + self.infrastructure + self.governance)

class TierContent(BaseModel):
    label: str
    title: str
    implications: str
    obligations: list[str] = Field(default_factory=list)
    timeline: str
    accountability: str
    positioning: str

class TierResult(BaseModel):
    tier: Tier
    score: int
    breakdown: ScoreBreakdown
    content: TierContent

    @property
    def label(self):
        return self.content.label

class SessionState(BaseModel):
    session_id: str = Field(default_factory=lambda: uuid4().hex)
    current_step: Step = Step.ENTITY_SIZE
    answers: AnswerRecord = Field(default_factory=AnswerRecord)
    result: Optional[TierResult] = None

class StepView(BaseModel):
    session_id: str
    current_step: Step
    answers: AnswerRecord = Field(default_factory=AnswerRecord)
    result: Optional[TierResult] = None

# Events delivered by the input collaborator
class SingleAnswerChosen(BaseModel):
    kind: Literal["single_answer"] = "single_answer"
    step: int
    value: str

class InfrastructureFlagsSubmitted(BaseModel):
    kind: Literal["infrastructure_flags"] = "infrastructure_flags"
    flags: InfrastructureFlags

class BackRequested(BaseModel):
    kind: Literal["back"] = "back"

class RestartRequested(BaseModel):
    kind: Literal["restart"] = "restart"

Event = Union[SingleAnswerChosen, InfrastructureFlagsSubmitted, BackRequested, RestartRequested]
