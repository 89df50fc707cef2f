from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class Difficulty(str, Enum):
    HARD = "hard"
    MEDIUM = "medium"
    EASY = "easy"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Solving(BaseModel):
    language: str
    path: str
    comment: str | None = None
    declarations: dict[str, str] = Field(default_factory=dict)


class Problem(BaseModel):
    problem_id: str
    difficulty: Difficulty
    solvings: list[Solving] = Field(default_factory=list)

    @field_validator("problem_id")
    @classmethod
    def _non_empty_problem_id(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("problem_id must be non-empty")
        return v
