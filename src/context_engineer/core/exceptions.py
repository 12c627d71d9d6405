"""Exceptions raised by context-engineer."""


class ContextEngineerError(Exception):
    """Base class for run-level failures that abort the whole run."""


class FileReadError(ContextEngineerError):
    """A file could not be read as text."""

    def __init__(self, identifier: str, reason: str):
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Error reading file {identifier}: {reason}")


class EmptyRequestError(ContextEngineerError):
    """The request text was empty after trimming whitespace."""

    def __init__(self, message: str = "Request cannot be empty."):
        super().__init__(message)


class NoFilesError(ContextEngineerError):
    """No usable files were found or supplied."""


class ConfigFileError(ContextEngineerError):
    """The file list could not be loaded."""


class TokenizerError(ContextEngineerError):
    """The token encoder could not be initialised."""
