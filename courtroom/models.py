from sqlmodel import SQLModel, Field
from typing import Optional, List
from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from datetime import datetime
from enum import Enum
import uuid


def _utcnow() -> datetime:
    return datetime.utcnow()


def new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


# ---- Enumerations ----

class CaseType(str, Enum):
    CRIMINAL = "criminal"
    CIVIL = "civil"
    PROPERTY = "property"
    FAMILY = "family"
    CONSTITUTIONAL = "constitutional"
    CORPORATE = "corporate"
    OTHER = "other"

    @classmethod
    def parse(cls, value) -> "CaseType":
        """Exact, case-insensitive match on the tag; anything else is OTHER."""
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        for member in cls:
            if member.value == text:
                return member
        return cls.OTHER


class Role(str, Enum):
    PROSECUTION = "prosecution"
    DEFENSE = "defense"

    @property
    def opponent(self) -> "Role":
        return Role.DEFENSE if self is Role.PROSECUTION else Role.PROSECUTION

    @property
    def speaker(self) -> "Speaker":
        return Speaker(self.value)


class Speaker(str, Enum):
    PROSECUTION = "prosecution"
    DEFENSE = "defense"
    ARBITER = "arbiter"


class SessionState(str, Enum):
    OPENING = "opening"
    EXCHANGE = "exchange"
    FINAL_ARGUMENTS = "final_arguments"
    DELIBERATING = "deliberating"
    DELIVERED = "delivered"


class TurnKind(str, Enum):
    WELCOME = "welcome"
    ARGUMENT = "argument"
    REBUTTAL = "rebuttal"
    INTERVENTION = "intervention"
    CLARIFICATION = "clarification"
    FINAL_ARGUMENTS = "final_arguments"
    DELIBERATION = "deliberation"
    JUDGMENT = "judgment"


# ---- Engine models ----

class Citation(BaseModel):
    model_config = ConfigDict(frozen=True)

    law: str
    section: str
    description: str


class Attachment(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    media_type: str = "application/octet-stream"
    size: int = 0
    handle: Optional[str] = None


class Turn(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = PydanticField(default_factory=lambda: new_id("turn"))
    speaker: Speaker
    content: str
    kind: TurnKind = TurnKind.ARGUMENT
    created_at: datetime = PydanticField(default_factory=_utcnow)
    attachments: List[Attachment] = PydanticField(default_factory=list)
    citations: List[Citation] = PydanticField(default_factory=list)


class SentencingOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    legal_basis: str
    applicability: List[str] = PydanticField(default_factory=list)


class Judgment(BaseModel):
    model_config = ConfigDict(frozen=True)

    verdict: str
    reasoning: str
    sentencing: Optional[str] = None
    applicable_laws: List[Citation] = PydanticField(default_factory=list)
    aggravating_factors: List[str] = PydanticField(default_factory=list)
    mitigating_factors: List[str] = PydanticField(default_factory=list)
    procedural_violations: List[str] = PydanticField(default_factory=list)
    post_verdict_considerations: str = ""
    alternative_sentencing: List[SentencingOption] = PydanticField(default_factory=list)
    prosecution_probability: float = 0.5


class SessionSnapshot(BaseModel):
    id: str
    case_title: str
    case_type: CaseType
    human_role: Role
    state: SessionState
    turns: List[Turn]
    strength: dict
    judgment: Optional[Judgment] = None
    created_at: datetime


# ---- API payloads ----

class SessionCreate(BaseModel):
    case_title: str = "New Legal Case"
    case_type: Optional[str] = "criminal"
    human_role: Role = Role.PROSECUTION


class SessionSummary(BaseModel):
    id: str
    case_title: str
    case_type: CaseType
    human_role: Role
    state: SessionState
    turn_count: int


# ---- Transcript archive tables ----

class CaseRecord(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    session_id: str = Field(index=True)
    title: str
    case_type: str = "other"
    human_role: str = "prosecution"
    created_at: datetime = Field(default_factory=datetime.utcnow)


class TranscriptEntry(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    session_id: str = Field(index=True)
    position: int
    speaker: str
    kind: str
    content: str
    created_at: datetime = Field(default_factory=datetime.utcnow)


class JudgmentRecord(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    session_id: str = Field(index=True)
    verdict: str
    prosecution_probability: float
    reasoning: str
    sentencing: Optional[str] = None
