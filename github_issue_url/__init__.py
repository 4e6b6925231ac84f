"""GitHub prefilled issue URL builder."""

from .errors import (
    EmptyRepositoryNameError,
    EmptyRepositoryOwnerError,
    IssueUrlError,
    IssueValidationError,
    UrlEncodingError,
)
from .models import DEFAULT_BASE_URL, QUERY_FIELDS, Issue

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_BASE_URL",
    "QUERY_FIELDS",
    "Issue",
    "IssueUrlError",
    "IssueValidationError",
    "EmptyRepositoryNameError",
    "EmptyRepositoryOwnerError",
    "UrlEncodingError",
    "__version__",
]
