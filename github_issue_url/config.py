"""Configuration for issue URL defaults."""

import os
from typing import Optional

from .models import DEFAULT_BASE_URL


class IssueUrlConfig:
    """Configuration class read from environment variables."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        self.base_url: str = os.getenv("GITHUB_ISSUE_URL_BASE", DEFAULT_BASE_URL).rstrip(
            "/"
        )
        self.owner: Optional[str] = os.getenv("GITHUB_ISSUE_URL_OWNER") or None
        self.repository: Optional[str] = (
            os.getenv("GITHUB_ISSUE_URL_REPOSITORY") or None
        )

    def has_repository(self) -> bool:
        """Check if a default repository is configured."""
        return self.owner is not None and self.repository is not None

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError(
                "GITHUB_ISSUE_URL_BASE must start with http:// or https://, "
                f"got '{self.base_url}'"
            )
