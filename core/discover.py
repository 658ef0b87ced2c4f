"""Discovery of available module updates."""

import re

from rich.console import Console

from .errors import ParseError
from .models import UpdateRecord
from .version import parse_version

# Sentinel emitted by the listing template for modules without an update.
NO_UPDATE = "''"

UPDATE_LINE = re.compile(r"'(?P<name>.+): (?P<current>.+) -> (?P<latest>.+)'")


class ListingParser:
    """Parser for the line-oriented update listing."""

    def __init__(self, console: Console | None = None, verbose: bool = False):
        self.console = console
        self.verbose = verbose

    def _should_skip_line(self, line: str) -> bool:
        return not line or line == NO_UPDATE

    def _parse_line(self, line: str) -> UpdateRecord:
        matched = UPDATE_LINE.search(line)
        if not matched:
            raise ParseError(line)

        name = matched.group("name")
        current = matched.group("current")
        latest = matched.group("latest")
        if self.verbose and self.console:
            self.console.print(
                f"Found module {name}, from {current} to {latest}", markup=False
            )

        return UpdateRecord(
            name=name,
            from_version=parse_version(current),
            to_version=parse_version(latest),
        )

    def parse(self, output: str) -> list[UpdateRecord]:
        """Parse the full listing output.

        A single malformed line aborts the whole parse.
        """
        records: list[UpdateRecord] = []
        for line in output.splitlines():
            if self._should_skip_line(line):
                continue
            records.append(self._parse_line(line))
        return records


def discover(gomod, console: Console | None = None, verbose: bool = False) -> list[UpdateRecord]:
    """List modules with available updates.

    Args:
        gomod: Object providing ``list_updates() -> str``
        console: Console for progress output
        verbose: Print each module as it is found

    Returns:
        Update records in listing order

    Raises:
        DiscoveryError: If listing fails, a line is malformed or a version is invalid
    """
    if console:
        console.print("Discovering modules...")
    output = gomod.list_updates()
    return ListingParser(console=console, verbose=verbose).parse(output)
