"""Jira issue key extraction from commit messages."""

import re
from collections.abc import Iterable

# Two or more uppercase letters, a hyphen, digits: ENG-123. Case-sensitive;
# "abc-1", "A-1" and "ABC123" never match.
ISSUE_KEY_PATTERN = re.compile(r"[A-Z]{2,}-[0-9]+")


def find_issue_keys(message: str) -> list[str]:
    """Return every non-overlapping key in a single message, in order, repeats included."""
    return ISSUE_KEY_PATTERN.findall(message)


def extract_issue_keys(messages: Iterable[str]) -> set[str]:
    """Return the distinct issue keys referenced across all commit messages."""
    keys: set[str] = set()
    for message in messages:
        keys.update(find_issue_keys(message))
    return keys
