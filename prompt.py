"""Terminal prompts for the note and the media path."""

import sys
from typing import Optional, TextIO

from termcolor import colored

from errors import InputError


CLEAR_SCREEN = "\x1b[2J\x1b[1;1H"

TEXT_LABEL = "What are you currently working on?"
MEDIA_LABEL = "Upload media [path]"


def clear_screen() -> None:
    sys.stdout.write(CLEAR_SCREEN)
    sys.stdout.flush()


def clean_text(raw: str) -> str:
    return raw.strip()


def clean_media_path(raw: str) -> str:
    # Paths dragged into a terminal arrive shell-quoted: '/a/b c.jpg'
    return raw.strip().replace("'", "")


def _read_line(label: str, what: str, stream: Optional[TextIO]) -> str:
    print(colored(label, "blue", attrs=["bold"]), flush=True)
    stream = stream or sys.stdin
    try:
        line = stream.readline()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Invalid {what}: {exc}") from exc
    except KeyboardInterrupt as exc:
        raise InputError(f"Invalid {what}: interrupted") from exc

    if line == "":
        raise InputError(f"Invalid {what}: end of input")
    return line


def ask_text(stream: Optional[TextIO] = None) -> str:
    return clean_text(_read_line(TEXT_LABEL, "text", stream))


def ask_media_path(stream: Optional[TextIO] = None) -> str:
    return clean_media_path(_read_line(MEDIA_LABEL, "media path", stream))
