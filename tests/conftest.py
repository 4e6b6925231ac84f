"""Test configuration and fixtures."""

import pytest

SAMPLE_ISSUE_BODY = (
    "Null is a flag. It represents different situations depending on the "
    "context in which it is used and invoked. This yields the most serious "
    "error in software development: Coupling a hidden decision in the "
    "contract between an object and who uses it."
)

GITHUB_ISSUE_LINK = (
    "https://github.com/EstebanBorai/github-issue-url/issues/new"
    "?title=Null%3A+The+Billion+Dollar+Mistake"
    "&body=Null+is+a+flag.+It+represents+different+situations+depending+on+the+"
    "context+in+which+it+is+used+and+invoked.+This+yields+the+most+serious+"
    "error+in+software+development%3A+Coupling+a+hidden+decision+in+the+"
    "contract+between+an+object+and+who+uses+it."
    "&template=bug_report.md"
    "&labels=bug%2Cproduction%2Chigh-severity"
    "&assignee=EstebanBorai"
    "&milestone=1"
    "&projects=1"
)

CONFIG_ENV_VARS = (
    "GITHUB_ISSUE_URL_BASE",
    "GITHUB_ISSUE_URL_OWNER",
    "GITHUB_ISSUE_URL_REPOSITORY",
)


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep configuration variables from the host environment out of tests."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_body() -> str:
    return SAMPLE_ISSUE_BODY


@pytest.fixture
def expected_link() -> str:
    return GITHUB_ISSUE_LINK
