import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from errors import ConfigurationError


REQUIRED_KEYS = (
    "MONGO_URI",
    "MONGO_DB",
    "MONGO_COLLECTION",
    "CLOUDINARY_ID",
    "CLOUDINARY_API_KEY",
    "CLOUDINARY_PRESET",
)


@dataclass(frozen=True)
class JournalConfig:
    mongo_uri: str
    mongo_db: str
    mongo_collection: str
    cloudinary_id: str
    cloudinary_api_key: str
    cloudinary_preset: str


def resolve_workspace(workspace_arg: Optional[str] = None) -> Path:
    if workspace_arg:
        return Path(workspace_arg).expanduser().resolve()

    env = os.environ.get("MEDIA_JOURNAL_WORKSPACE")
    if env:
        return Path(env).expanduser().resolve()

    return Path.cwd().resolve()


def load_workspace_env(workspace_path: Path) -> None:
    env_path = workspace_path / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=True)


def load_config(environ: Optional[Mapping[str, str]] = None) -> JournalConfig:
    """Read the six required settings. The first absent or blank key aborts the run."""
    if environ is None:
        environ = os.environ

    values = {}
    for key in REQUIRED_KEYS:
        value = (environ.get(key) or "").strip()
        if not value:
            raise ConfigurationError(f"Missing required environment variable {key}")
        values[key] = value

    return JournalConfig(
        mongo_uri=values["MONGO_URI"],
        mongo_db=values["MONGO_DB"],
        mongo_collection=values["MONGO_COLLECTION"],
        cloudinary_id=values["CLOUDINARY_ID"],
        cloudinary_api_key=values["CLOUDINARY_API_KEY"],
        cloudinary_preset=values["CLOUDINARY_PRESET"],
    )
