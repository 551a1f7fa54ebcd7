import logging
import random
from collections.abc import Callable, Iterable, Mapping
from functools import lru_cache

from src.bank import load_banks
from src.bank.links import PRACTICE_LINKS
from src.config import settings
from src.schemas import DIFFICULTIES, CatalogStats, CategoryBank, PracticeLink, Question

logger = logging.getLogger(__name__)

# --- ПАТТЕРНЫ ---
# Единственный источник правды: отображаемое имя -> тег в вопросах
PATTERNS: dict[str, str] = {
    "Two Pointers": "two-pointers",
    "Sliding Window": "sliding-window",
    "Binary Search": "binary-search",
    "Hash Table": "hash-table",
    "DFS": "dfs",
    "BFS": "bfs",
    "Dynamic Programming": "dynamic-programming",
    "Divide and Conquer": "divide-and-conquer",
    "Greedy": "greedy",
    "Backtracking": "backtracking",
}


class CatalogError(Exception):
    """Базовая ошибка сборки каталога."""


class DuplicateQuestionIdError(CatalogError):
    def __init__(self, question_id: str):
        super().__init__(f"Duplicate question id in catalog: {question_id!r}")
        self.question_id = question_id


class Catalog:
    """
    Плоский каталог вопросов + производные представления.

    Все вычисляется один раз в конструкторе, после этого объект только читается.
    random_index(n) должен вернуть целое из [0, n), в тестах подменяется.
    """

    def __init__(
        self,
        banks: Iterable[CategoryBank],
        *,
        links: Mapping[str, PracticeLink] | None = None,
        allow_duplicate_ids: bool = False,
        random_index: Callable[[int], int] = random.randrange,
    ):
        self.banks: tuple[CategoryBank, ...] = tuple(banks)
        self._links = dict(links or {})
        self._random_index = random_index

        # 1. Плоский список в порядке банков, без дедупликации
        self.questions: tuple[Question, ...] = tuple(
            q for bank in self.banks for q in bank.questions
        )

        # 2. Индекс по id: выигрывает первое вхождение
        self._by_id: dict[str, Question] = {}
        for q in self.questions:
            if q.id in self._by_id:
                if not allow_duplicate_ids:
                    raise DuplicateQuestionIdError(q.id)
                logger.warning(f"Duplicate question id {q.id!r}, keeping first occurrence")
                continue
            self._by_id[q.id] = q

        # 3. По категориям: просто переименование банков
        self.by_category: dict[str, tuple[Question, ...]] = {}
        for bank in self.banks:
            if bank.label in self.by_category:
                raise CatalogError(f"Duplicate category label: {bank.label!r}")
            self.by_category[bank.label] = bank.questions

        # 4. По сложности: стабильный фильтр
        self.by_difficulty: dict[str, tuple[Question, ...]] = {
            d: tuple(q for q in self.questions if q.difficulty == d) for d in DIFFICULTIES
        }

        # 5. По паттернам
        self.by_pattern: dict[str, tuple[Question, ...]] = {
            label: self.find_by_tag(tag) for label, tag in PATTERNS.items()
        }

        self.stats = CatalogStats(
            total_questions=len(self.questions),
            questions_by_difficulty={d: len(qs) for d, qs in self.by_difficulty.items()},
            questions_by_category={label: len(qs) for label, qs in self.by_category.items()},
        )

    def __len__(self) -> int:
        return len(self.questions)

    def find_by_tag(self, tag: str) -> tuple[Question, ...]:
        # Вопрос без тегов не матчится ни с чем
        return tuple(q for q in self.questions if q.tags and tag in q.tags)

    def find_by_difficulty(self, difficulty: str) -> tuple[Question, ...]:
        return tuple(q for q in self.questions if q.difficulty == difficulty)

    def find_by_id(self, question_id: str) -> Question | None:
        return self._by_id.get(question_id)

    def find_by_category(self, label: str) -> tuple[Question, ...]:
        return self.by_category.get(label, ())

    def find_by_pattern(self, label: str) -> tuple[Question, ...]:
        return self.by_pattern.get(label, ())

    def random_pick(self) -> Question | None:
        if not self.questions:
            return None
        return self.questions[self._random_index(len(self.questions))]

    def practice_links(self, question_id: str) -> PracticeLink | None:
        return self._links.get(question_id)


@lru_cache
def get_catalog() -> Catalog:
    """Каталог по умолчанию (все 12 банков). Собирается один раз на процесс."""
    catalog = Catalog(
        load_banks(),
        links={qid: PracticeLink(**link) for qid, link in PRACTICE_LINKS.items()},
        allow_duplicate_ids=settings.CATALOG_ALLOW_DUPLICATE_IDS,
    )
    logger.info(
        f"Catalog loaded: {catalog.stats.total_questions} questions, "
        f"by difficulty {catalog.stats.questions_by_difficulty}"
    )
    return catalog
