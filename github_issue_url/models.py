"""Pydantic model for prefilled GitHub "New Issue" links.

GitHub reads these query parameters on the new issue page:
https://docs.github.com/en/issues/tracking-your-work-with-issues/creating-an-issue#creating-an-issue-from-a-url-query
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import (
    EmptyRepositoryNameError,
    EmptyRepositoryOwnerError,
    UrlEncodingError,
)
from .utils.encoding import encode_query, quote_path_segment

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://github.com"

# Emission order of the query parameters in the generated URL
QUERY_FIELDS = (
    "title",
    "body",
    "template",
    "labels",
    "assignee",
    "milestone",
    "projects",
)


def _check_repository(repository: str, owner: str) -> None:
    # The repository is checked first, so it is reported when both are empty
    if not repository or not repository.strip():
        raise EmptyRepositoryNameError()
    if not owner or not owner.strip():
        raise EmptyRepositoryOwnerError()


class Issue(BaseModel):
    """GitHub issue with every field the new issue page can prefill.

    Optional fields are unset (``None``) until assigned and unset fields are
    left out of the URL. Assigning a field again replaces its value.

    Example:
        >>> issue = Issue("github-issue-url", "EstebanBorai")
        >>> issue.title = "Null: The Billion Dollar Mistake"
        >>> issue.labels = ["bug", "production"]
        >>> issue.url()
        'https://github.com/EstebanBorai/github-issue-url/issues/new?title=Null%3A+The+Billion+Dollar+Mistake&labels=bug%2Cproduction'
    """

    model_config = ConfigDict(validate_assignment=True)

    repository: str = Field(..., frozen=True, description="Repository name")
    owner: str = Field(
        ..., frozen=True, description="User or organization owning the repository"
    )
    base_url: str = Field(
        DEFAULT_BASE_URL, description="Web root of the GitHub instance"
    )
    title: str | None = Field(None, description="Prefilled issue title")
    body: str | None = Field(None, description="Prefilled issue body content")
    template: str | None = Field(
        None,
        description=(
            "Issue template file name. A template stored in "
            ".github/ISSUE_TEMPLATE/bugs.md is selected with 'bugs.md'"
        ),
    )
    labels: str | None = Field(
        None, description="Labels separated by comma, e.g. 'bug,production'"
    )
    assignee: str | None = Field(None, description="Username of the assignee")
    milestone: str | None = Field(
        None, description="Milestone number, as in /<owner>/<repo>/milestone/<id>"
    )
    projects: str | None = Field(
        None, description="Project numbers separated by comma"
    )

    def __init__(self, repository: str, owner: str, **fields: Any) -> None:
        _check_repository(repository, owner)
        super().__init__(repository=repository, owner=owner, **fields)

    def model_copy(
        self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> "Issue":
        """Copy the issue, rejecting an empty owner or repository in ``update``."""
        copy = super().model_copy(update=update, deep=deep)
        _check_repository(copy.repository, copy.owner)
        return copy

    @classmethod
    def new(cls, repository: str, owner: str) -> "Issue":
        """Create an issue with no prefilled fields."""
        return cls(repository, owner)

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"Base URL must start with http:// or https://: {value}")
        return value.rstrip("/")

    @field_validator("labels", "projects", mode="before")
    @classmethod
    def _join_sequence(cls, value: Any) -> Any:
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            return ",".join(str(item) for item in value)
        return value

    @field_validator("milestone", "projects", mode="before")
    @classmethod
    def _number_to_text(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    def set_title(self, title: str | None) -> "Issue":
        """Set the prefilled issue title."""
        self.title = title
        return self

    def set_body(self, body: str | None) -> "Issue":
        """Set the prefilled issue body content."""
        self.body = body
        return self

    def set_template(self, template: str | None) -> "Issue":
        """Set the template name, 'bugs.md' for .github/ISSUE_TEMPLATE/bugs.md."""
        self.template = template
        return self

    def set_labels(self, labels: str | Sequence[str] | None) -> "Issue":
        """Set the labels, either pre-joined by commas or as a sequence.

        The issue author requires write access to the repository for GitHub
        to apply them.
        """
        self.labels = labels  # type: ignore[assignment]
        return self

    def set_assignee(self, assignee: str | None) -> "Issue":
        """Set the assignee username. Requires write access to the repository."""
        self.assignee = assignee
        return self

    def set_milestone(self, milestone: str | int | None) -> "Issue":
        """Set the milestone number. Requires write access to the repository."""
        self.milestone = milestone  # type: ignore[assignment]
        return self

    def set_projects(
        self, projects: str | int | Sequence[str | int] | None
    ) -> "Issue":
        """Set the project numbers. Requires write access to the repository."""
        self.projects = projects  # type: ignore[assignment]
        return self

    def query_params(self) -> list[tuple[str, str]]:
        """Return the set fields as ``(name, value)`` pairs in emission order."""
        params = []
        for name in QUERY_FIELDS:
            value = getattr(self, name)
            if value is not None:
                params.append((name, value))
        return params

    def url(self) -> str:
        """Build the prefilled "New Issue" URL.

        Returns:
            The encoded URL, without a query string when no field is set

        Raises:
            UrlEncodingError: If a value cannot be percent-encoded
        """
        params = self.query_params()
        try:
            base = (
                f"{self.base_url}/{quote_path_segment(self.owner)}/"
                f"{quote_path_segment(self.repository)}/issues/new"
            )
            query = encode_query(params)
        except UnicodeEncodeError as e:
            raise UrlEncodingError(str(e)) from e

        logger.debug(
            "Built issue URL for %s/%s with params: %s",
            self.owner,
            self.repository,
            ", ".join(name for name, _ in params) or "none",
        )
        return f"{base}?{query}" if query else base

    def __str__(self) -> str:
        return self.url()
