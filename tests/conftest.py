"""Pytest configuration and fixtures."""


import io

import pytest
from rich.console import Console

from core.errors import UpgradeError
from core.models import UpdateRecord
from core.version import parse_version


class FakeGoModules:
    """Stand-in for GoModules that records upgrade calls."""

    def __init__(self, listing: str = "", failing: set[str] | None = None):
        self.listing = listing
        self.failing = failing or set()
        self.upgraded: list[str] = []

    def list_updates(self) -> str:
        return self.listing

    def upgrade(self, name: str) -> str:
        self.upgraded.append(name)
        if name in self.failing:
            raise UpgradeError(name, f"go: {name}: unknown revision")
        return ""


def make_record(name: str, current: str, latest: str) -> UpdateRecord:
    return UpdateRecord(name=name, from_version=parse_version(current), to_version=parse_version(latest))


@pytest.fixture
def sample_listing():
    """Sample `go list -u -m` output for testing."""
    return (
        "''\n"
        "'github.com/spf13/cobra: v1.7.0 -> v1.8.0'\n"
        "''\n"
        "'golang.org/x/sync: v0.3.0 -> v0.3.1'\n"
        "'github.com/stretchr/testify: v1.8.4 -> v1.9.0-rc.1'\n"
    )


@pytest.fixture
def sample_records():
    """Update records matching sample_listing."""
    return [
        make_record("github.com/spf13/cobra", "v1.7.0", "v1.8.0"),
        make_record("golang.org/x/sync", "v0.3.0", "v0.3.1"),
        make_record("github.com/stretchr/testify", "v1.8.4", "v1.9.0-rc.1"),
    ]


@pytest.fixture
def console():
    """Colourless console with a wide, fixed width."""
    return Console(file=io.StringIO(), width=200, no_color=True, force_terminal=False, record=True)


@pytest.fixture
def ansi_console():
    """Console that always emits standard ANSI colours."""
    return Console(file=io.StringIO(), width=200, force_terminal=True, color_system="standard")


@pytest.fixture
def record_factory():
    """Build an UpdateRecord from raw version strings."""
    return make_record


@pytest.fixture
def gomod_factory():
    """Build a FakeGoModules runner."""
    return FakeGoModules
