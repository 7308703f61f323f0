"""Failure types for a journal run. Every one of them ends the run."""


class JournalError(RuntimeError):
    stage = "run"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ConfigurationError(JournalError):
    stage = "config"


class InputError(JournalError):
    stage = "input"


class FileAccessError(JournalError):
    stage = "file"


class UploadTransportError(JournalError):
    stage = "upload"


class UploadResponseError(JournalError):
    stage = "upload"


class PersistenceError(JournalError):
    stage = "database"
