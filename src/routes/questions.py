# Каталог вопросов по HTTP, только чтение
from fastapi import APIRouter, Depends, HTTPException, status

from src.schemas import CatalogStats, CategorySummary, PatternSummary, PracticeLink, Question
from src.services.catalog import PATTERNS, Catalog, get_catalog

router = APIRouter(prefix="/api/questions", tags=["questions"])


@router.get("", response_model=list[Question])
def list_questions(
    tag: str | None = None,
    difficulty: str | None = None,
    category: str | None = None,
    pattern: str | None = None,
    catalog: Catalog = Depends(get_catalog),
):
    # Фильтры пересекаются, порядок как в плоском каталоге.
    # Неизвестное значение дает пустой список, а не ошибку
    questions = catalog.questions
    if tag is not None:
        questions = catalog.find_by_tag(tag)
    if difficulty is not None:
        questions = [q for q in questions if q.difficulty == difficulty]
    if category is not None:
        in_category = {q.id for q in catalog.find_by_category(category)}
        questions = [q for q in questions if q.id in in_category]
    if pattern is not None:
        in_pattern = {q.id for q in catalog.find_by_pattern(pattern)}
        questions = [q for q in questions if q.id in in_pattern]
    return list(questions)


@router.get("/random", response_model=Question)
def random_question(catalog: Catalog = Depends(get_catalog)):
    question = catalog.random_pick()
    if question is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Catalog is empty")
    return question


@router.get("/stats", response_model=CatalogStats)
def catalog_stats(catalog: Catalog = Depends(get_catalog)):
    return catalog.stats


@router.get("/categories", response_model=list[CategorySummary])
def list_categories(catalog: Catalog = Depends(get_catalog)):
    return [
        CategorySummary(label=label, count=len(questions))
        for label, questions in catalog.by_category.items()
    ]


@router.get("/patterns", response_model=list[PatternSummary])
def list_patterns(catalog: Catalog = Depends(get_catalog)):
    return [
        PatternSummary(label=label, tag=tag, count=len(catalog.find_by_pattern(label)))
        for label, tag in PATTERNS.items()
    ]


@router.get("/{question_id}", response_model=Question)
def get_question(question_id: str, catalog: Catalog = Depends(get_catalog)):
    question = catalog.find_by_id(question_id)
    if question is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Question not found")
    return question


@router.get("/{question_id}/links", response_model=PracticeLink)
def get_practice_links(question_id: str, catalog: Catalog = Depends(get_catalog)):
    link = catalog.practice_links(question_id)
    if link is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No practice links for this question")
    return link
