from src.bank import (
    arrays,
    backtracking,
    bit_manipulation,
    dynamic_programming,
    graphs,
    heaps,
    linked_lists,
    matrix,
    search_sort,
    stack_queue,
    strings,
    trees,
)
from src.schemas import CategoryBank, Question

# Порядок конкатенации фиксирован: от него зависит порядок плоского каталога
BANK_SOURCES = (
    ("Array", arrays.QUESTIONS),
    ("String", strings.QUESTIONS),
    ("Linked List", linked_lists.QUESTIONS),
    ("Tree", trees.QUESTIONS),
    ("Dynamic Programming", dynamic_programming.QUESTIONS),
    ("Stack & Queue", stack_queue.QUESTIONS),
    ("Graph", graphs.QUESTIONS),
    ("Search & Sort", search_sort.QUESTIONS),
    ("Heap & Priority Queue", heaps.QUESTIONS),
    ("Backtracking", backtracking.QUESTIONS),
    ("Bit Manipulation", bit_manipulation.QUESTIONS),
    ("Matrix & 2D Array", matrix.QUESTIONS),
)

def load_banks() -> list[CategoryBank]:
    """Валидирует сырые словари банков в Question. Битые данные падают сразу (ValidationError)."""
    return [
        CategoryBank(label=label, questions=tuple(Question.model_validate(item) for item in items))
        for label, items in BANK_SOURCES
    ]
