"""Semantic version model."""

import functools
from dataclasses import dataclass, field

import semver

from .errors import InvalidVersionError

FIELDS = ("major", "minor", "patch", "prerelease", "build")


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """An immutable semantic version.

    Ordering follows semantic-versioning precedence. Build metadata is kept
    for display but ignored when comparing.
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = field(default=())
    build: str = ""

    def __post_init__(self):
        numbers = (self.major, self.minor, self.patch)
        if any(type(n) is not int or n < 0 for n in numbers):
            raise InvalidVersionError(".".join(str(n) for n in numbers))
        if not isinstance(self.prerelease, tuple) or not all(
            isinstance(p, str) and p for p in self.prerelease
        ):
            raise InvalidVersionError(f"prerelease {self.prerelease!r}")
        if not isinstance(self.build, str):
            raise InvalidVersionError(f"build {self.build!r}")

    def to_semver(self) -> semver.Version:
        return semver.Version(
            self.major,
            self.minor,
            self.patch,
            prerelease=".".join(self.prerelease) or None,
            build=self.build or None,
        )

    def compare(self, other: "Version") -> int:
        """Return -1, 0 or 1 as self sorts before, equal to or after other."""
        return self.to_semver().compare(other.to_semver())

    def __eq__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self):
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + self.build
        return text


def parse_version(text: str) -> Version:
    """Parse a version string into a Version.

    Accepts ``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]`` with an optional
    leading ``v`` as used by Go module versions. Missing minor or patch
    components default to zero.

    Args:
        text: The version string

    Returns:
        Parsed Version

    Raises:
        InvalidVersionError: If the text is not a valid version
    """
    candidate = text
    if candidate.startswith("v"):
        candidate = candidate[1:]

    try:
        parsed = semver.Version.parse(candidate, optional_minor_and_patch=True)
    except (ValueError, TypeError):
        raise InvalidVersionError(text) from None

    return Version(
        major=parsed.major,
        minor=parsed.minor,
        patch=parsed.patch,
        prerelease=tuple(parsed.prerelease.split(".")) if parsed.prerelease else (),
        build=parsed.build or "",
    )


def diff_fields(old: Version, new: Version) -> set[str]:
    """Return the names of the fields that differ between two versions."""
    return {name for name in FIELDS if getattr(old, name) != getattr(new, name)}
