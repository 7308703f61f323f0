#!/usr/bin/env python3
"""
Media journal: write down what you are working on, attach a picture or clip.

Usage:
  python main.py
  python main.py --workspace ~/journal
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, List, Optional, TextIO

from termcolor import colored

from config import load_config, load_workspace_env, resolve_workspace
from errors import JournalError
from journal_tools._utils import log_line
from journal_tools.entry_write import insert_entry
from journal_tools.media_upload import media_type_for, upload_media
from models import JournalEntry, build_entry, format_created_at, utc_now
from prompt import ask_media_path, ask_text, clear_screen


def _success(text: str) -> None:
    print(colored(text, "green", attrs=["bold"]), flush=True)


def run(
    workspace: Path,
    started_at: datetime,
    stdin: Optional[TextIO] = None,
    client_factory: Optional[Callable[..., Any]] = None,
) -> JournalEntry:
    created_at = format_created_at(started_at)

    config = load_config()
    log_line(workspace, f"Configured: db={config.mongo_db} collection={config.mongo_collection}")

    clear_screen()
    text = ask_text(stdin)
    media_path = ask_media_path(stdin)

    log_line(workspace, f"Uploading {media_path} as {media_type_for(media_path)}")
    upload = upload_media(media_path, config)
    log_line(workspace, f"Uploaded: {upload.secure_url}")
    _success("Media uploaded successfully!")

    entry = build_entry(text, upload, created_at)
    inserted_id = insert_entry(entry, config, client_factory)
    log_line(workspace, f"Inserted entry {inserted_id}")
    _success("Added to DB successfully!")
    return entry


def main(argv: Optional[List[str]] = None) -> int:
    started_at = utc_now()

    parser = argparse.ArgumentParser(description="Add a journal entry with an image or video.")
    parser.add_argument("--workspace", default=None, help="Directory holding .env and data/logs")
    args = parser.parse_args(argv)

    workspace = resolve_workspace(args.workspace)
    load_workspace_env(workspace)
    log_line(workspace, "Run started")

    try:
        run(workspace, started_at)
    except JournalError as exc:
        print(colored(f"Error [{exc.stage}]: {exc}", "red", attrs=["bold"]), file=sys.stderr)
        log_line(workspace, f"Failed at {exc.stage}: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
