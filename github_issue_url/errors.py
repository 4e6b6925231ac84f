"""Exceptions raised while building issue URLs."""


class IssueUrlError(Exception):
    """Base class for every error raised by this package."""


class IssueValidationError(IssueUrlError, ValueError):
    """An issue could not be created from the provided repository details."""


class EmptyRepositoryOwnerError(IssueValidationError):
    def __init__(self) -> None:
        super().__init__("Repository owner name is not defined")


class EmptyRepositoryNameError(IssueValidationError):
    def __init__(self) -> None:
        super().__init__("Repository name is not defined")


class UrlEncodingError(IssueUrlError):
    """The issue fields could not be encoded into a URL."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to parse URL with provided params. {reason}")
