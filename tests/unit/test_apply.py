"""Tests for applying chosen updates."""

import subprocess
from unittest.mock import patch

from core.apply import apply_updates
from core.errors import UpgradeError
from core.gomod import GoModules


class TestApplyUpdates:
    """Test the apply driver."""

    def test_upgrades_each_record_in_order(self, sample_records, gomod_factory, console):
        """Should run one upgrade per record, in order."""
        gomod = gomod_factory()

        failures = apply_updates(sample_records, gomod, console)

        assert gomod.upgraded == [r.name for r in sample_records]
        assert failures == []
        output = console.export_text()
        assert "Updating github.com/spf13/cobra to version 1.8.0..." in output
        assert "Updating golang.org/x/sync to version 0.3.1..." in output

    def test_failure_does_not_stop_remaining(self, sample_records, gomod_factory, console):
        """Should still attempt later upgrades after one fails."""
        gomod = gomod_factory(failing={"golang.org/x/sync"})

        failures = apply_updates(sample_records, gomod, console)

        assert gomod.upgraded == [r.name for r in sample_records]
        assert len(failures) == 1
        assert failures[0].name == "golang.org/x/sync"
        output = console.export_text()
        assert "Error while updating golang.org/x/sync: go: golang.org/x/sync: unknown revision" in output

    def test_empty_selection(self, gomod_factory, console):
        """Should do nothing for an empty selection."""
        gomod = gomod_factory()

        assert apply_updates([], gomod, console) == []
        assert gomod.upgraded == []

    def test_only_upgrade_errors_are_contained(self, sample_records, console):
        """Should report each failing record separately."""

        class AlwaysFails:
            def upgrade(self, name):
                raise UpgradeError(name, "network unreachable")

        failures = apply_updates(sample_records, AlwaysFails(), console)

        assert [f.name for f in failures] == [r.name for r in sample_records]

    def test_os_error_does_not_stop_remaining(self, sample_records, console):
        """Should keep going when running go itself fails for one record."""
        attempted = []

        def run(command, **kwargs):
            attempted.append(command[-1])
            if len(attempted) == 2:
                raise PermissionError(13, "Permission denied", "go")
            return subprocess.CompletedProcess(args=command, returncode=0, stdout="")

        with patch("core.gomod.subprocess.run", side_effect=run):
            failures = apply_updates(sample_records, GoModules(), console)

        assert attempted == [r.name for r in sample_records]
        assert [f.name for f in failures] == ["golang.org/x/sync"]
        assert "Permission denied" in console.export_text()
