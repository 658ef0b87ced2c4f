"""Exception types raised across the modpick pipeline."""


class ModpickError(Exception):
    """Base exception for modpick errors."""


class DiscoveryError(ModpickError):
    """Listing updates failed; fatal for the whole run."""


class InvalidVersionError(DiscoveryError):
    """A version string is not valid semantic-version syntax."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid semantic version: {text!r}")


class ParseError(DiscoveryError):
    """A listing line does not match the expected pattern."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Couldn't parse module {line}")


class UpgradeError(ModpickError):
    """Upgrading a single module failed.

    Attributes:
        name: Module path that failed to upgrade
        output: Combined stdout/stderr of the upgrade command
    """

    def __init__(self, name: str, output: str):
        self.name = name
        self.output = output
        super().__init__(f"Error while updating {name}: {output}")


class SelectionCancelled(ModpickError):
    """The operator interrupted the selection prompt."""
