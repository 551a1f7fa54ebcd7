# tests/test_questions_api.py
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from src.main import app
from src.schemas import PracticeLink
from src.services.catalog import Catalog, get_catalog
from tests.factories import make_bank, make_question


@pytest.fixture()
def api(client: TestClient) -> TestClient:
    catalog = Catalog(
        [
            make_bank(
                "Array",
                make_question("a-1", "easy", ["array", "two-pointers"]),
                make_question("a-2", "hard", ["array", "sliding-window"]),
            ),
            make_bank(
                "Graph",
                make_question("g-1", "medium", ["graph", "bfs"]),
                make_question("g-2", "easy", None),
            ),
        ],
        links={"a-1": PracticeLink(title="Two Sum", leetcode="https://leetcode.com/problems/two-sum/")},
        random_index=lambda n: n - 1,
    )
    app.dependency_overrides[get_catalog] = lambda: catalog
    return client


def _ids(response) -> list[str]:
    return [q["id"] for q in response.json()]


def test_list_all_questions(api: TestClient) -> None:
    response = api.get("/api/questions")
    assert response.status_code == 200
    assert _ids(response) == ["a-1", "a-2", "g-1", "g-2"]


def test_filter_by_tag(api: TestClient) -> None:
    assert _ids(api.get("/api/questions", params={"tag": "array"})) == ["a-1", "a-2"]
    assert _ids(api.get("/api/questions", params={"tag": "graph"})) == ["g-1"]
    assert api.get("/api/questions", params={"tag": "missing"}).json() == []


def test_filter_by_difficulty(api: TestClient) -> None:
    assert _ids(api.get("/api/questions", params={"difficulty": "easy"})) == ["a-1", "g-2"]
    response = api.get("/api/questions", params={"difficulty": "legendary"})
    assert response.status_code == 200
    assert response.json() == []


def test_filters_combine(api: TestClient) -> None:
    response = api.get("/api/questions", params={"tag": "array", "difficulty": "hard"})
    assert _ids(response) == ["a-2"]

    response = api.get("/api/questions", params={"category": "Graph", "difficulty": "easy"})
    assert _ids(response) == ["g-2"]

    response = api.get("/api/questions", params={"pattern": "Two Pointers"})
    assert _ids(response) == ["a-1"]


def test_get_question_by_id(api: TestClient) -> None:
    response = api.get("/api/questions/g-1")
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == "g-1"
    assert body["difficulty"] == "medium"
    assert body["code_implementation"][0]["language"] == "python"


def test_get_question_missing(api: TestClient) -> None:
    response = api.get("/api/questions/does-not-exist")
    assert response.status_code == 404


def test_random_question_uses_catalog_source(api: TestClient) -> None:
    response = api.get("/api/questions/random")
    assert response.status_code == 200
    assert response.json()["id"] == "g-2"


def test_random_question_on_empty_catalog(client: TestClient) -> None:
    app.dependency_overrides[get_catalog] = lambda: Catalog([])
    assert client.get("/api/questions/random").status_code == 404


def test_stats(api: TestClient) -> None:
    assert api.get("/api/questions/stats").json() == {
        "total_questions": 4,
        "questions_by_difficulty": {"easy": 2, "medium": 1, "hard": 1},
        "questions_by_category": {"Array": 2, "Graph": 2},
    }


def test_categories(api: TestClient) -> None:
    assert api.get("/api/questions/categories").json() == [
        {"label": "Array", "count": 2},
        {"label": "Graph", "count": 2},
    ]


def test_patterns(api: TestClient) -> None:
    patterns = {p["label"]: p for p in api.get("/api/questions/patterns").json()}
    assert patterns["Two Pointers"] == {"label": "Two Pointers", "tag": "two-pointers", "count": 1}
    assert patterns["BFS"]["count"] == 1
    assert patterns["Greedy"]["count"] == 0


def test_practice_links(api: TestClient) -> None:
    response = api.get("/api/questions/a-1/links")
    assert response.status_code == 200
    assert response.json()["leetcode"] == "https://leetcode.com/problems/two-sum/"
    assert api.get("/api/questions/a-2/links").status_code == 404


def test_default_catalog_scenario(client: TestClient) -> None:
    response = client.get("/api/questions/enhanced-bit-1")
    assert response.status_code == 200
    assert response.json()["question"].startswith("Single Number")
    assert client.get("/api/questions/enhanced-bit-1/links").json()["title"] == "Single Number"
