# tests/test_catalog.py
from __future__ import annotations

import pytest

from src.bank import BANK_SOURCES, load_banks
from src.schemas import PracticeLink
from src.services.catalog import (
    PATTERNS,
    Catalog,
    CatalogError,
    DuplicateQuestionIdError,
    get_catalog,
)
from tests.factories import make_bank, make_question


@pytest.fixture()
def small_catalog() -> Catalog:
    arrays = make_bank(
        "Array",
        make_question("a-1", "easy", ["two-pointers", "array"]),
        make_question("a-2", "hard", ["array", "sliding-window"]),
        make_question("a-3", "medium", None),
    )
    graphs = make_bank(
        "Graph",
        make_question("g-1", "medium", ["graph", "bfs"]),
        make_question("g-2", "easy", ["graph", "dfs"]),
        make_question("g-3", "hard", ["graph"]),
        make_question("g-4", "medium", ["graph", "greedy"]),
    )
    return Catalog([arrays, graphs])


def test_flat_catalog_concatenates_banks_in_order(small_catalog: Catalog) -> None:
    # Сценарий: банки на 3 и 4 вопроса -> 7 в плоском списке
    assert len(small_catalog) == 7
    assert [q.id for q in small_catalog.questions] == ["a-1", "a-2", "a-3", "g-1", "g-2", "g-3", "g-4"]


def test_default_catalog_length_is_sum_of_banks() -> None:
    catalog = get_catalog()
    assert len(catalog.questions) == sum(len(items) for _, items in BANK_SOURCES)
    assert catalog.stats.total_questions == len(catalog.questions)


def test_by_category_is_relabeling_of_banks(small_catalog: Catalog) -> None:
    assert list(small_catalog.by_category) == ["Array", "Graph"]
    assert small_catalog.by_category["Graph"] is small_catalog.banks[1].questions
    assert small_catalog.find_by_category("Nope") == ()


def test_find_by_difficulty_is_stable_filter(small_catalog: Catalog) -> None:
    easy = small_catalog.find_by_difficulty("easy")
    assert [q.id for q in easy] == ["a-1", "g-2"]
    assert small_catalog.by_difficulty["easy"] == easy

    flat_order = [q.id for q in small_catalog.questions if q.difficulty == "medium"]
    assert [q.id for q in small_catalog.find_by_difficulty("medium")] == flat_order


def test_find_by_difficulty_counts_hard() -> None:
    questions = (
        [make_question(f"h-{i}", "hard") for i in range(2)]
        + [make_question(f"m-{i}", "medium") for i in range(5)]
        + [make_question("e-0", "easy")]
    )
    catalog = Catalog([make_bank("Mixed", *questions)])
    assert len(catalog.find_by_difficulty("hard")) == 2


def test_find_by_difficulty_unknown_value_is_empty(small_catalog: Catalog) -> None:
    assert small_catalog.find_by_difficulty("EASY") == ()
    assert small_catalog.find_by_difficulty("impossible") == ()


def test_find_by_tag_matches_exactly(small_catalog: Catalog) -> None:
    by_two_pointers = small_catalog.find_by_tag("two-pointers")
    by_array = small_catalog.find_by_tag("array")
    assert [q.id for q in by_two_pointers] == ["a-1"]
    assert [q.id for q in by_array] == ["a-1", "a-2"]
    assert all(q.id != "a-1" for q in small_catalog.find_by_tag("graph"))
    assert small_catalog.find_by_tag("Array") == ()
    assert small_catalog.find_by_tag("no-such-tag") == ()


def test_question_without_tags_matches_nothing(small_catalog: Catalog) -> None:
    untagged = small_catalog.find_by_id("a-3")
    assert untagged is not None and untagged.tags is None
    for tag in ("array", "graph", ""):
        assert untagged not in small_catalog.find_by_tag(tag)


def test_every_tag_of_every_question_finds_it() -> None:
    catalog = get_catalog()
    for q in catalog.questions:
        for tag in q.tags or ():
            assert q in catalog.find_by_tag(tag)


def test_find_by_id(small_catalog: Catalog) -> None:
    found = small_catalog.find_by_id("g-3")
    assert found is not None and found.id == "g-3"
    assert small_catalog.find_by_id("does-not-exist") is None


def test_find_by_id_on_default_catalog() -> None:
    catalog = get_catalog()
    single = catalog.find_by_id("enhanced-bit-1")
    assert single is not None
    assert single.question.startswith("Single Number")
    assert single in catalog.find_by_category("Bit Manipulation")
    assert catalog.find_by_id("does-not-exist") is None

    for q in catalog.questions:
        assert catalog.find_by_id(q.id).id == q.id


def test_duplicate_ids_fail_fast() -> None:
    banks = [
        make_bank("One", make_question("dup")),
        make_bank("Two", make_question("dup", "hard")),
    ]
    with pytest.raises(DuplicateQuestionIdError) as exc_info:
        Catalog(banks)
    assert exc_info.value.question_id == "dup"


def test_duplicate_ids_first_wins_when_allowed() -> None:
    first = make_question("dup", "easy")
    second = make_question("dup", "hard")
    catalog = Catalog(
        [make_bank("One", first), make_bank("Two", second)],
        allow_duplicate_ids=True,
    )
    # Дубликат остается в плоском списке, но по id недостижим
    assert len(catalog) == 2
    assert catalog.find_by_id("dup") is first


def test_duplicate_category_label_rejected() -> None:
    with pytest.raises(CatalogError):
        Catalog([make_bank("Same", make_question("x")), make_bank("Same", make_question("y"))])


def test_patterns_use_constant_table(small_catalog: Catalog) -> None:
    assert list(small_catalog.by_pattern) == list(PATTERNS)
    assert [q.id for q in small_catalog.find_by_pattern("Two Pointers")] == ["a-1"]
    assert [q.id for q in small_catalog.find_by_pattern("Sliding Window")] == ["a-2"]
    assert [q.id for q in small_catalog.find_by_pattern("BFS")] == ["g-1"]
    assert small_catalog.find_by_pattern("Binary Search") == ()
    assert small_catalog.find_by_pattern("Unknown Pattern") == ()


def test_stats(small_catalog: Catalog) -> None:
    stats = small_catalog.stats
    assert stats.total_questions == 7
    assert stats.questions_by_difficulty == {"easy": 2, "medium": 3, "hard": 2}
    assert stats.questions_by_category == {"Array": 3, "Graph": 4}


def test_default_stats_are_consistent() -> None:
    stats = get_catalog().stats
    assert sum(stats.questions_by_difficulty.values()) == stats.total_questions
    assert sum(stats.questions_by_category.values()) == stats.total_questions
    assert len(stats.questions_by_category) == 12


def test_queries_are_idempotent(small_catalog: Catalog) -> None:
    assert small_catalog.find_by_tag("graph") == small_catalog.find_by_tag("graph")
    assert small_catalog.find_by_difficulty("hard") == small_catalog.find_by_difficulty("hard")
    assert small_catalog.find_by_id("a-2") == small_catalog.find_by_id("a-2")


def test_random_pick_uses_injected_index() -> None:
    questions = [make_question(f"q-{i}") for i in range(5)]
    calls = []

    def fake_index(n: int) -> int:
        calls.append(n)
        return 3

    catalog = Catalog([make_bank("Only", *questions)], random_index=fake_index)
    assert catalog.random_pick() is questions[3]
    assert calls == [5]


def test_random_pick_reaches_every_question() -> None:
    questions = [make_question(f"q-{i}") for i in range(4)]
    indexes = iter(range(4))
    catalog = Catalog([make_bank("Only", *questions)], random_index=lambda n: next(indexes))

    picked = [catalog.random_pick() for _ in range(4)]
    assert all(any(p is q for q in catalog.questions) for p in picked)
    assert {p.id for p in picked} == {q.id for q in questions}


def test_random_pick_default_source_stays_in_catalog() -> None:
    catalog = get_catalog()
    for _ in range(50):
        pick = catalog.random_pick()
        assert any(pick is q for q in catalog.questions)


def test_random_pick_on_empty_catalog_is_none() -> None:
    assert Catalog([]).random_pick() is None


def test_practice_links() -> None:
    link = PracticeLink(title="Single Number", leetcode="https://leetcode.com/problems/single-number/")
    catalog = Catalog([make_bank("Bits", make_question("b-1"))], links={"b-1": link})
    assert catalog.practice_links("b-1") == link
    assert catalog.practice_links("b-2") is None


def test_load_banks_validates_every_record() -> None:
    banks = load_banks()
    assert [b.label for b in banks] == [label for label, _ in BANK_SOURCES]
    for bank in banks:
        for q in bank.questions:
            assert q.difficulty in ("easy", "medium", "hard")
            assert q.code_implementation
            assert q.practice_count == 0 and q.success_rate == 0
