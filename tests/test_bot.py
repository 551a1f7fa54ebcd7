# tests/test_bot.py
from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from aiogram.filters import CommandObject

from src.bot import handlers
from src.bot.handlers import TAG_LIST_LIMIT, format_question, format_stats
from src.schemas import CatalogStats
from src.services.catalog import Catalog
from tests.factories import make_bank, make_question


def _message() -> MagicMock:
    message = MagicMock()
    message.answer = AsyncMock()
    message.from_user.full_name = "Ada"
    return message


def _command(name: str, args: str | None) -> CommandObject:
    return CommandObject(prefix="/", command=name, args=args)


def _answer_text(message: MagicMock) -> str:
    message.answer.assert_awaited_once()
    return message.answer.await_args.args[0]


def test_format_question() -> None:
    question = make_question("q-1", "hard", ["graph", "bfs"], question="Word Ladder - shortest path")
    text = format_question(question)

    assert text.startswith("Word Ladder - shortest path")
    assert "Сложность: сложный" in text
    assert "Теги: graph, bfs" in text
    assert text.endswith("ID: q-1")


def test_format_question_without_tags() -> None:
    text = format_question(make_question("q-2"))
    assert "Теги" not in text


def test_format_stats() -> None:
    stats = CatalogStats(
        total_questions=3,
        questions_by_difficulty={"easy": 1, "medium": 2, "hard": 0},
        questions_by_category={"Array": 3},
    )
    text = format_stats(stats)

    assert text.startswith("Всего вопросов: 3")
    assert "средний: 2" in text
    assert "Array: 3" in text


@pytest.mark.anyio
async def test_start_lists_commands() -> None:
    message = _message()
    await handlers.command_start_handler(message)

    text = _answer_text(message)
    assert "Ada" in text
    for command in ("/random", "/question", "/tag", "/stats"):
        assert command in text
    assert "/random - случайный вопрос" in text
    assert "\u2014" not in text


@pytest.mark.anyio
async def test_question_by_id_from_default_catalog() -> None:
    message = _message()
    await handlers.command_question_handler(message, _command("question", " enhanced-bit-1 "))

    text = _answer_text(message)
    assert text.startswith("Single Number")
    assert "https://leetcode.com/problems/single-number/" in text


@pytest.mark.anyio
async def test_question_unknown_id() -> None:
    message = _message()
    await handlers.command_question_handler(message, _command("question", "does-not-exist"))
    assert _answer_text(message) == "Вопрос не найден."


@pytest.mark.anyio
async def test_question_requires_argument() -> None:
    message = _message()
    await handlers.command_question_handler(message, _command("question", None))
    assert "/question" in _answer_text(message)


@pytest.mark.anyio
async def test_random_uses_catalog(monkeypatch: pytest.MonkeyPatch) -> None:
    only = make_question("only-one", question="Lonely question")
    catalog = Catalog([make_bank("Only", only)])
    monkeypatch.setattr(handlers, "get_catalog", lambda: catalog)

    message = _message()
    await handlers.command_random_handler(message)
    assert _answer_text(message).startswith("Lonely question")


@pytest.mark.anyio
async def test_random_on_empty_catalog(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(handlers, "get_catalog", lambda: Catalog([]))

    message = _message()
    await handlers.command_random_handler(message)
    assert _answer_text(message) == "Банк вопросов пуст."


@pytest.mark.anyio
async def test_tag_list_is_truncated(monkeypatch: pytest.MonkeyPatch) -> None:
    total = TAG_LIST_LIMIT + 3
    questions = [make_question(f"t-{i}", tags=["greedy"]) for i in range(total)]
    monkeypatch.setattr(handlers, "get_catalog", lambda: Catalog([make_bank("Greedy", *questions)]))

    message = _message()
    await handlers.command_tag_handler(message, _command("tag", "greedy"))

    lines = _answer_text(message).splitlines()
    assert len(lines) == TAG_LIST_LIMIT + 1
    assert lines[0] == "t-0: Question t-0"
    assert lines[-1] == "... и еще 3"


@pytest.mark.anyio
async def test_tag_without_matches() -> None:
    message = _message()
    await handlers.command_tag_handler(message, _command("tag", "no-such-tag"))
    assert "no-such-tag" in _answer_text(message)


@pytest.mark.anyio
async def test_stats_command(monkeypatch: pytest.MonkeyPatch) -> None:
    catalog = Catalog([make_bank("Array", make_question("a-1"), make_question("a-2", "hard"))])
    monkeypatch.setattr(handlers, "get_catalog", lambda: catalog)

    message = _message()
    await handlers.command_stats_handler(message)

    text = _answer_text(message)
    assert text.startswith("Всего вопросов: 2")
    assert "Array: 2" in text
