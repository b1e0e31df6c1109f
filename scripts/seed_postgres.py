#!/usr/bin/env python3
"""
Load a JSON seed file (same format as MEMORY_SEED_FILE) into PostgreSQL.
Creates the schema first; existing documents with the same id are replaced.
Uses DATABASE_URL from .env.local / environment.
"""

import asyncio
import json
import sys
from pathlib import Path
from dotenv import load_dotenv

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
load_dotenv(project_root / ".env.local")

from mediahub.stores import PostgresDocumentStore
from mediahub.stores.postgres import COLLECTIONS


async def seed(seed_file: Path) -> None:
    """
    Insert every document of the seed file.

    Args:
        seed_file: JSON object mapping collection name -> list of documents
    """
    with open(seed_file, "r", encoding="utf-8") as f:
        data = json.load(f)

    unknown = set(data) - set(COLLECTIONS)
    if unknown:
        print(f"Unknown collections in seed file: {', '.join(sorted(unknown))}")
        sys.exit(1)

    store = PostgresDocumentStore()
    await store.connect()
    try:
        await store.init_schema()
        for collection, docs in data.items():
            for doc in docs:
                await store.insert(collection, doc)
            print(f"{collection}: {len(docs)} documents")
    finally:
        await store.disconnect()


def main():
    """Main entry point."""
    if len(sys.argv) < 2:
        print("Usage:")
        print("  python scripts/seed_postgres.py path/to/seed.json")
        sys.exit(1)

    asyncio.run(seed(Path(sys.argv[1])))


if __name__ == "__main__":
    main()
