"""Styled rendering of module names and version deltas."""

from rich.text import Text

from .models import Severity, UpdateRecord
from .version import Version, diff_fields

STYLES = {
    Severity.NONE: "white",
    Severity.PATCH: "green",
    Severity.MINOR: "yellow",
    Severity.MAJOR: "magenta",
    Severity.PRERELEASE: "red",
    Severity.CHANGED: "green",
}

FROM_STYLE = "blue"


def pad_right(text: str, length: int) -> str:
    """Pad text with spaces up to length; longer text is left as is."""
    if len(text) >= length:
        return text
    return text + " " * (length - len(text))


def styled(text: str, severity: Severity) -> Text:
    return Text(text, style=STYLES[severity])


def classify(record: UpdateRecord) -> Severity:
    """Classify a record for name styling.

    The checks run in sequence and the last matching one wins, so a
    prerelease change outranks a patch change, which outranks a minor one.
    Major changes alone leave the name neutral.
    """
    changed = diff_fields(record.from_version, record.to_version)
    severity = Severity.NONE
    if "minor" in changed:
        severity = Severity.MINOR
    if "patch" in changed:
        severity = Severity.PATCH
    if "prerelease" in changed:
        severity = Severity.PRERELEASE
    return severity


def render_name(record: UpdateRecord, width: int) -> Text:
    return styled(pad_right(record.name, width), classify(record))


def render_from(version: Version, width: int) -> Text:
    return Text(pad_right(str(version), width), style=FROM_STYLE)


def render_to(record: UpdateRecord) -> Text:
    """Render the target version, highlighting what changed.

    Once a field differs every following numeric field and the prerelease
    are highlighted too. Build metadata is always highlighted.
    """
    changed = STYLES[Severity.CHANGED]
    old = record.from_version
    new = record.to_version
    text = Text()
    same = True

    if old.major == new.major:
        text.append(f"{new.major}.")
    else:
        text.append(f"{new.major}.", style=changed)
        same = False

    if old.minor == new.minor and same:
        text.append(f"{new.minor}.")
    else:
        text.append(f"{new.minor}.", style=changed)
        same = False

    if old.patch == new.patch and same:
        text.append(str(new.patch))
    else:
        text.append(str(new.patch), style=changed)
        same = False

    if new.prerelease:
        prerelease = ".".join(new.prerelease)
        text.append("-")
        if old.prerelease == new.prerelease and same:
            text.append(prerelease)
        else:
            text.append(prerelease, style=changed)

    if new.build:
        text.append(f"+{new.build}", style=changed)

    return text
