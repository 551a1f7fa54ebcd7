from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Difficulty = Literal["easy", "medium", "hard"]

DIFFICULTIES: tuple[str, ...] = ("easy", "medium", "hard")

# Один вариант решения: язык + подход + объяснение + исходник
class CodeSample(BaseModel):
    model_config = ConfigDict(frozen=True)

    language: str
    approach: str
    explanation: str
    code: str

# Вопрос из банка. Создается один раз при загрузке и больше не меняется
class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    question: str
    category: str
    difficulty: Difficulty
    type: str
    approach: str
    code_implementation: tuple[CodeSample, ...] = ()
    sample_answer: str | None = None
    tips: tuple[str, ...] = ()
    tags: tuple[str, ...] | None = None
    estimated_time: int | None = Field(default=None, description="Minutes")
    industry: tuple[str, ...] = ()
    # Статистика практики, в данных всегда 0
    practice_count: int = 0
    success_rate: float = 0

class PracticeLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    leetcode: str | None = None
    geeksforgeeks: str | None = None

# Банк одной темы: метка для UI + упорядоченные вопросы
@dataclass(frozen=True)
class CategoryBank:
    label: str
    questions: tuple[Question, ...]

class CatalogStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_questions: int
    questions_by_difficulty: dict[str, int]
    questions_by_category: dict[str, int]

class CategorySummary(BaseModel):
    label: str
    count: int

class PatternSummary(BaseModel):
    label: str
    tag: str
    count: int
