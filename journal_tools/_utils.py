from datetime import datetime, timezone
from pathlib import Path


def iso_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def log_dir(workspace: Path) -> Path:
    return workspace / "data" / "logs"


def log_line(workspace: Path, text: str) -> None:
    log_file = log_dir(workspace) / f"{datetime.now(timezone.utc).date().isoformat()}.log"
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        with log_file.open("a", encoding="utf-8") as f:
            f.write(f"[{iso_now()}] {text}\n")
    except OSError:
        pass  # An unwritable log never stops a run
