from src.models.question import Question

__all__ = ["Question"]
