from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# -----------------------------
# ENUMS
# -----------------------------

class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        return None


# -----------------------------
# REQUEST
# -----------------------------

class GenerationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    topic: str = Field(..., min_length=1)
    requested_count: int = Field(..., ge=1)
    difficulty: Difficulty = Difficulty.MEDIUM

    @field_validator("topic")
    @classmethod
    def topic_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("topic must not be blank")
        return v

    @field_validator("difficulty", mode="before")
    @classmethod
    def coerce_difficulty(cls, v: Any):
        return Difficulty(v) if isinstance(v, str) else v


# -----------------------------
# SERVICE PAYLOAD
# -----------------------------

class QuestionDraft(BaseModel):
    """One generated question, in the service's wire shape."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text: str = Field(..., alias="questionText", min_length=1)
    options: List[str] = Field(..., min_length=2, max_length=5)
    correct_index: int = Field(..., alias="correctAnswer")

    @field_validator("options")
    @classmethod
    def options_not_blank(cls, v: List[str]) -> List[str]:
        if any(not option.strip() for option in v):
            raise ValueError("options must be non-empty strings")
        return v

    @model_validator(mode="after")
    def correct_index_in_range(self):
        if not 0 <= self.correct_index < len(self.options):
            raise ValueError(
                f"correctAnswer {self.correct_index} out of range for {len(self.options)} options"
            )
        return self

    @property
    def is_true_false(self) -> bool:
        return len(self.options) == 2

    @property
    def correct_answer(self) -> str:
        return self.options[self.correct_index]


class GenerationResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    description: str = ""
    difficulty: Optional[Difficulty] = None
    questions: List[QuestionDraft] = Field(default_factory=list)

    @field_validator("difficulty", mode="before")
    @classmethod
    def lenient_difficulty(cls, v: Any):
        # The service sometimes echoes the schema placeholder ("Easy | Medium | Hard")
        try:
            return Difficulty(v) if v is not None else None
        except ValueError:
            return None

    @property
    def count(self) -> int:
        return len(self.questions)

    def to_question_records(self) -> List[Dict[str, Any]]:
        """
        Map drafts to the record shape stored by the quiz-authoring surface.

        Returns:
            List of {question_text, options, correct_answer, order_index}
        """
        return [
            {
                "question_text": q.text,
                "options": list(q.options),
                "correct_answer": q.correct_answer,
                "order_index": idx,
            }
            for idx, q in enumerate(self.questions)
        ]


# -----------------------------
# PIPELINE VALUES
# -----------------------------

@dataclass(frozen=True)
class Partition:
    index: int   # 1-based
    total: int
    size: int


Role = Literal["system", "user", "assistant"]


class ConversationTurn(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


class Conversation(BaseModel):
    """Immutable, ordered list of turns sent to the completion service."""

    model_config = ConfigDict(frozen=True)

    turns: Tuple[ConversationTurn, ...] = ()

    @classmethod
    def start(cls, system: str, user: str) -> "Conversation":
        return cls(turns=(
            ConversationTurn(role="system", content=system),
            ConversationTurn(role="user", content=user),
        ))

    def with_turn(self, role: Role, content: str) -> "Conversation":
        return Conversation(turns=self.turns + (ConversationTurn(role=role, content=content),))

    def as_messages(self) -> List[Dict[str, str]]:
        return [{"role": t.role, "content": t.content} for t in self.turns]

    def __len__(self) -> int:
        return len(self.turns)


@dataclass(frozen=True)
class Completion:
    content: str              # raw text exactly as returned by the service
    result: GenerationResult
