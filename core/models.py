"""Core data models for modpick."""

from dataclasses import dataclass
from enum import Enum

from .version import Version


class Severity(Enum):
    """Display classification for a version change."""

    NONE = "none"
    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"
    PRERELEASE = "prerelease"
    CHANGED = "changed"


@dataclass(frozen=True)
class UpdateRecord:
    """A module with a newer version available."""

    name: str
    from_version: Version
    to_version: Version


@dataclass(frozen=True)
class ListingEntry:
    """A rendered option for the selection prompt."""

    label: str
    option_text: str
