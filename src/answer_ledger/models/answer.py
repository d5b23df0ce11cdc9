"""Answer document model — the current state of a key and its value history."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_serializer

from answer_ledger.models.base import DocumentBase, format_timestamp, new_id


class AnswerValue(BaseModel):
    value: str


class Answer(DocumentBase):
    """A keyed value whose ``values`` list only ever grows."""

    uid: str = Field(default_factory=new_id)
    key: str
    values: list[AnswerValue] = Field(default_factory=list)

    @classmethod
    def new(cls, key: str, value: str) -> Answer:
        """Build an active answer holding its first value."""
        return cls(key=key, values=[AnswerValue(value=value)])

    @property
    def current_value(self) -> str:
        return self.values[-1].value


class AnswerResponse(BaseModel):
    """Public projection of an answer showing only its current value."""

    uid: str
    key: str
    value: str
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at", when_used="json")
    def _serialize_timestamp(self, value: datetime) -> str:
        return format_timestamp(value)

    @classmethod
    def from_answer(cls, answer: Answer) -> AnswerResponse:
        return cls(
            uid=answer.uid,
            key=answer.key,
            value=answer.current_value,
            created_at=answer.created_at,
            updated_at=answer.updated_at,
        )


class CreateAnswerRequest(BaseModel):
    key: str = Field(min_length=1)
    value: str = Field(min_length=1)


class UpdateAnswerRequest(BaseModel):
    value: str = Field(min_length=1)
