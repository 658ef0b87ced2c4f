"""Go toolchain commands used to list and apply module updates."""

import subprocess
from pathlib import Path

from .errors import DiscoveryError, UpgradeError

# Emits one quoted line per direct dependency: 'path: current -> update',
# or '' for modules without an update.
LIST_TEMPLATE = (
    "'{{if (and (not (or .Main .Indirect)) .Update)}}"
    "{{.Path}}: {{.Version}} -> {{.Update.Version}}{{end}}'"
)


class GoModules:
    """Runs ``go`` subcommands against a module directory."""

    def __init__(self, executable: str = "go", cwd: str | Path | None = None):
        """Initialize the command runner.

        Args:
            executable: Name or path of the go binary
            cwd: Module directory; defaults to the current directory
        """
        self.executable = executable
        self.cwd = cwd

    def list_updates(self) -> str:
        """Return the raw update listing for all direct dependencies.

        Raises:
            DiscoveryError: If the listing command cannot run or fails
        """
        command = [
            self.executable,
            "list",
            "-u",
            "-mod=mod",
            "-f",
            LIST_TEMPLATE,
            "-m",
            "all",
        ]
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                cwd=self.cwd,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            detail = e.stderr.strip() if e.stderr else f"exit code {e.returncode}"
            raise DiscoveryError(f"Listing modules failed: {detail}") from e
        except OSError as e:
            raise DiscoveryError(f"Couldn't run {self.executable}: {e}") from None

        return result.stdout

    def upgrade(self, name: str) -> str:
        """Fetch the latest version of a module.

        Args:
            name: Module path

        Returns:
            Combined output of the command

        Raises:
            UpgradeError: If the command cannot run or fails
        """
        try:
            result = subprocess.run(
                [self.executable, "get", name],
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                cwd=self.cwd,
                check=False,
            )
        except OSError as e:
            raise UpgradeError(name, f"Couldn't run {self.executable}: {e}") from None

        if result.returncode != 0:
            raise UpgradeError(name, result.stdout)

        return result.stdout
