"""Upload result and journal entry shapes, plus the step that joins them."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class UploadResult:
    secure_url: str
    width: Optional[int] = None
    height: Optional[int] = None


@dataclass(frozen=True)
class JournalEntry:
    text: str
    media_url: str
    created_at: str
    width: Optional[int] = None
    height: Optional[int] = None

    def to_document(self) -> Dict[str, Any]:
        """MongoDB document. Dimensions are only written when the upload reported them."""
        doc: Dict[str, Any] = {
            "text": self.text,
            "media_url": self.media_url,
        }
        if self.width is not None:
            doc["width"] = self.width
        if self.height is not None:
            doc["height"] = self.height
        doc["created_at"] = self.created_at
        return doc


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_created_at(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S.%f UTC")


def build_entry(text: str, upload: UploadResult, created_at: str) -> JournalEntry:
    return JournalEntry(
        text=text,
        media_url=upload.secure_url,
        created_at=created_at,
        width=upload.width,
        height=upload.height,
    )
