# tests/factories.py
from __future__ import annotations

from src.schemas import CategoryBank, CodeSample, Question


def make_question(
    qid: str,
    difficulty: str = "easy",
    tags: list[str] | None = None,
    question: str | None = None,
) -> Question:
    return Question(
        id=qid,
        question=question or f"Question {qid}",
        category="technical",
        difficulty=difficulty,
        type="technical",
        approach="Think first.",
        code_implementation=[
            CodeSample(language="python", approach="optimal", explanation="-", code="pass\n"),
        ],
        tags=tags,
    )


def make_bank(label: str, *questions: Question) -> CategoryBank:
    return CategoryBank(label=label, questions=tuple(questions))
