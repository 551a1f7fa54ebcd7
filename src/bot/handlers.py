from aiogram import Router
from aiogram.filters import Command, CommandObject
from aiogram.types import Message

from src.schemas import CatalogStats, Question
from src.services.catalog import get_catalog

# Роутер бота: тренировка по каталогу вопросов прямо в Telegram
router = Router()

DIFFICULTY_LABELS = {"easy": "легкий", "medium": "средний", "hard": "сложный"}

# Сколько вопросов показываем по тегу, чтобы не упереться в лимит сообщения
TAG_LIST_LIMIT = 10


def format_question(question: Question) -> str:
    """Текст карточки вопроса для Telegram."""
    lines = [
        question.question,
        "",
        f"Сложность: {DIFFICULTY_LABELS.get(question.difficulty, question.difficulty)}",
    ]
    if question.estimated_time:
        lines.append(f"Время: ~{question.estimated_time} мин")
    if question.tags:
        lines.append("Теги: " + ", ".join(question.tags))
    lines.append(f"ID: {question.id}")
    return "\n".join(lines)


def format_stats(stats: CatalogStats) -> str:
    lines = [f"Всего вопросов: {stats.total_questions}", ""]
    for difficulty, count in stats.questions_by_difficulty.items():
        lines.append(f"{DIFFICULTY_LABELS.get(difficulty, difficulty)}: {count}")
    lines.append("")
    for label, count in stats.questions_by_category.items():
        lines.append(f"{label}: {count}")
    return "\n".join(lines)


@router.message(Command("start"))
async def command_start_handler(message: Message) -> None:
    """Приветствие и список команд."""
    await message.answer(
        f"Привет, {message.from_user.full_name}! Я помогу подготовиться к алгоритмическому собеседованию.\n"
        "/random - случайный вопрос\n"
        "/question <id> - вопрос по ID\n"
        "/tag <тег> - вопросы по тегу (например, two-pointers)\n"
        "/stats - статистика банка"
    )


@router.message(Command("random"))
async def command_random_handler(message: Message) -> None:
    question = get_catalog().random_pick()
    if question is None:
        await message.answer("Банк вопросов пуст.")
        return
    await message.answer(format_question(question))


@router.message(Command("question"))
async def command_question_handler(message: Message, command: CommandObject) -> None:
    if not command.args:
        await message.answer("Укажи ID: /question enhanced-array-1")
        return

    question = get_catalog().find_by_id(command.args.strip())
    if question is None:
        await message.answer("Вопрос не найден.")
        return

    text = format_question(question)
    link = get_catalog().practice_links(question.id)
    if link and link.leetcode:
        text += f"\nПрактика: {link.leetcode}"
    await message.answer(text)


@router.message(Command("tag"))
async def command_tag_handler(message: Message, command: CommandObject) -> None:
    if not command.args:
        await message.answer("Укажи тег: /tag sliding-window")
        return

    tag = command.args.strip()
    questions = get_catalog().find_by_tag(tag)
    if not questions:
        await message.answer(f"По тегу «{tag}» ничего нет.")
        return

    lines = [f"{q.id}: {q.question.split(' - ')[0]}" for q in questions[:TAG_LIST_LIMIT]]
    if len(questions) > TAG_LIST_LIMIT:
        lines.append(f"... и еще {len(questions) - TAG_LIST_LIMIT}")
    await message.answer("\n".join(lines))


@router.message(Command("stats"))
async def command_stats_handler(message: Message) -> None:
    await message.answer(format_stats(get_catalog().stats))
