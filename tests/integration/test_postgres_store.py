"""
Integration tests for the PostgreSQL document store and the engine on top of it.
"""

import pytest

from mediahub.listing import ListingEngine
from mediahub.listing.filters import StructuralPredicate
from mediahub.listing.sorting import SortKey
from mediahub.listing.types import SortDirection

pytestmark = pytest.mark.integration


def oid(n: int) -> str:
    return f"{n:024x}"


ALICE = oid(0xA1)


async def seed(store):
    await store.insert("users", {"id": ALICE, "fullName": "Alice Doe", "username": "alice", "avatar": None})
    for n in range(1, 13):
        await store.insert("videos", {
            "id": oid(n),
            "owner": ALICE,
            "title": f"Video number {n}",
            "views": n * 10,
            "isPublished": True,
            "createdAt": f"2024-03-01T12:{n:02d}:00",
        })
    await store.insert("videos", {
        "id": oid(99), "owner": ALICE, "title": "Draft", "isPublished": False,
        "createdAt": "2024-03-01T13:00:00",
    })
    await store.insert("comments", {
        "id": oid(0x1001), "owner": ALICE, "video": oid(1), "content": "First!",
        "createdAt": "2024-03-01T12:30:00",
    })


@pytest.mark.asyncio
async def test_containment_filter(pg_store):
    await seed(pg_store)

    docs = await pg_store.find("videos", StructuralPredicate({"isPublished": True}))

    assert len(docs) == 12
    assert await pg_store.count("videos", StructuralPredicate({"isPublished": False})) == 1


@pytest.mark.asyncio
async def test_order_by_pushdown(pg_store):
    await seed(pg_store)

    docs = await pg_store.find(
        "videos",
        StructuralPredicate({"isPublished": True}),
        [SortKey("views", SortDirection.DESC), SortKey("id", SortDirection.ASC)],
    )

    assert [d["views"] for d in docs][:3] == [120, 110, 100]


@pytest.mark.asyncio
async def test_lookup(pg_store):
    await seed(pg_store)

    users = await pg_store.lookup([ALICE, oid(404)])

    assert set(users) == {ALICE}
    assert users[ALICE]["username"] == "alice"


@pytest.mark.asyncio
async def test_engine_over_postgres(pg_store):
    await seed(pg_store)
    engine = ListingEngine(pg_store, pg_store)

    page = await engine.list_videos(page=1, limit=10, query="number 12")

    assert page.items[0]["id"] == oid(12)
    assert page.total_docs == 12
    assert page.total_pages == 2
    assert page.items[0]["owner"]["displayName"] == "Alice Doe"

    comments = await engine.list_comments(oid(1))
    assert [c["content"] for c in comments.items] == ["First!"]
