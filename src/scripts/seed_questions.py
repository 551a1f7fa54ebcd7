import asyncio
from sqlalchemy import select
from src.database import AsyncSessionLocal, Base, engine
from src.models.question import Question
from src.services.catalog import Catalog, get_catalog

SOURCE = "DSA catalog"
BATCH_SIZE = 500

def build_rows(catalog: Catalog, skip_ids: set[str] | None = None) -> list[Question]:
    """Превращает вопросы каталога в строки таблицы, пропуская уже сохраненные id."""
    # Копия: множество вызывающего не трогаем
    skip_ids = set(skip_ids or ())
    rows = []
    for label, questions in catalog.by_category.items():
        for q in questions:
            if q.id in skip_ids:
                continue
            rows.append(Question(
                id=q.id,
                category=label,
                difficulty=q.difficulty,
                text=q.question,
                approach=q.approach,
                tags=list(q.tags) if q.tags else None,
                estimated_time=q.estimated_time,
                source=SOURCE,
            ))
            # Дубликаты id внутри каталога тоже не пишем повторно
            skip_ids.add(q.id)
    return rows

async def seed_questions():
    print("--- SEEDING QUESTIONS ---")

    # Таблица могла еще не появиться, если миграции не прогоняли
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    catalog = get_catalog()

    async with AsyncSessionLocal() as session:
        result = await session.execute(select(Question.id))
        existing = set(result.scalars().all())

        rows = build_rows(catalog, skip_ids=existing)
        if not rows:
            print(f"Nothing to do: all {len(catalog)} questions already in DB.")
            return

        for i in range(0, len(rows), BATCH_SIZE):
            batch = rows[i : i + BATCH_SIZE]
            session.add_all(batch)
            await session.commit()
            print(f"Saved batch {i} - {i + len(batch)}")

    per_category: dict[str, int] = {}
    for row in rows:
        per_category[row.category] = per_category.get(row.category, 0) + 1
    for label, count in per_category.items():
        print(f"-> {label}: {count}")
    print(f"DONE! Total questions imported: {len(rows)}")

async def main():
    try:
        await seed_questions()
    finally:
        await engine.dispose()

if __name__ == "__main__":
    asyncio.run(main())
