import argparse
import json
import sys
from typing import Any, Callable, List, Optional

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from config import JournalConfig, load_config, load_workspace_env, resolve_workspace
from errors import PersistenceError
from models import JournalEntry, format_created_at, utc_now


def insert_entry(
    entry: JournalEntry,
    config: JournalConfig,
    client_factory: Optional[Callable[..., Any]] = None,
) -> Any:
    """Insert one entry into the configured collection and return its id.

    `to_document` builds a fresh dict, so the `_id` pymongo adds never reaches the entry.
    A malformed URI surfaces from MongoClient as ValueError, not PyMongoError.
    """
    client = None
    try:
        client = (client_factory or MongoClient)(config.mongo_uri)
        collection = client[config.mongo_db][config.mongo_collection]
        result = collection.insert_one(entry.to_document())
        return result.inserted_id
    except (PyMongoError, ValueError) as exc:
        raise PersistenceError(f"MongoDB insert failed: {exc}") from exc
    finally:
        if client is not None:
            client.close()


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Add a journal entry to MongoDB")
    parser.add_argument("--text", required=True)
    parser.add_argument("--media-url", required=True)
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--workspace", default=None)
    args = parser.parse_args(argv)

    workspace = resolve_workspace(args.workspace)
    load_workspace_env(workspace)
    config = load_config()

    entry = JournalEntry(
        text=args.text.strip(),
        media_url=args.media_url,
        created_at=format_created_at(utc_now()),
        width=args.width,
        height=args.height,
    )
    inserted_id = insert_entry(entry, config)
    print(json.dumps({"success": True, "data": {"id": str(inserted_id)}}, ensure_ascii=False))


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:
        print(json.dumps({"success": False, "error": str(exc)}))
        sys.exit(1)
