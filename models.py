"""
Data shapes shared by the engine and the UI.

- ConversationState: the fixed intake order, forward only.
- CandidateRecord: mutable accumulator filled one field per intake state.
- CandidateProfile: immutable snapshot built once every field is set.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union


class ConversationState(str, Enum):
    GREETING = "greeting"
    COLLECT_EMAIL = "email"
    COLLECT_PHONE = "phone"
    COLLECT_EXPERIENCE = "experience"
    COLLECT_POSITION = "position"
    COLLECT_LOCATION = "location"
    COLLECT_TECH_STACK = "tech_stack"
    ASKING_QUESTIONS = "technical_questions"
    COMPLETED = "completed"

    def next(self) -> "ConversationState":
        if self is ConversationState.COMPLETED:
            return self
        order = list(ConversationState)
        return order[order.index(self) + 1]


# Record field written by each collection state
STATE_FIELDS: Dict[ConversationState, str] = {
    ConversationState.GREETING: "full_name",
    ConversationState.COLLECT_EMAIL: "email",
    ConversationState.COLLECT_PHONE: "phone",
    ConversationState.COLLECT_EXPERIENCE: "experience_years",
    ConversationState.COLLECT_POSITION: "desired_position",
    ConversationState.COLLECT_LOCATION: "location",
    ConversationState.COLLECT_TECH_STACK: "tech_stack",
}

REQUIRED_FIELDS = list(STATE_FIELDS.values())


@dataclass(frozen=True)
class CandidateProfile:
    full_name: str
    email: str
    phone: str
    experience_years: str
    desired_position: str
    location: str
    tech_stack: Tuple[str, ...]


@dataclass
class CandidateRecord:
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    experience_years: Optional[str] = None
    desired_position: Optional[str] = None
    location: Optional[str] = None
    tech_stack: List[str] = field(default_factory=list)

    def missing_fields(self) -> List[str]:
        return [f for f in REQUIRED_FIELDS if not getattr(self, f)]

    def is_complete(self) -> bool:
        return not self.missing_fields()

    def build(self) -> CandidateProfile:
        missing = self.missing_fields()
        if missing:
            raise ValueError(f"Candidate record is incomplete, missing: {', '.join(missing)}")
        data = asdict(self)
        data["tech_stack"] = tuple(self.tech_stack)
        return CandidateProfile(**data)

    def as_dict(self) -> Dict[str, Union[str, List[str], None]]:
        return asdict(self)
