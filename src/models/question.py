from datetime import datetime
from sqlalchemy import DateTime, Integer, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func
from src.database import Base

class Question(Base):
    __tablename__ = "questions"

    # id из банка, например enhanced-array-1
    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    category: Mapped[str] = mapped_column(String, index=True) # Array, Graph, etc
    difficulty: Mapped[str] = mapped_column(String(16), index=True) # easy, medium, hard
    text: Mapped[str] = mapped_column(Text, nullable=False)
    approach: Mapped[str | None] = mapped_column(Text, nullable=True)
    tags: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    estimated_time: Mapped[int | None] = mapped_column(Integer, nullable=True)
    source: Mapped[str | None] = mapped_column(String, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Question(id={self.id}, category={self.category})>"
