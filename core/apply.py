"""Applying the chosen module updates."""

from rich.console import Console
from rich.text import Text

from .errors import UpgradeError
from .models import UpdateRecord
from .render import render_name, render_to


def apply_updates(records: list[UpdateRecord], gomod, console: Console) -> list[UpgradeError]:
    """Upgrade each record in turn.

    A failing upgrade is reported and the remaining records are still
    processed.

    Args:
        records: Records to upgrade, in order
        gomod: Object providing ``upgrade(name)``
        console: Console for progress and error output

    Returns:
        The errors of the upgrades that failed
    """
    failures = []
    for record in records:
        console.print(
            Text.assemble(
                "Updating ",
                render_name(record, len(record.name)),
                " to version ",
                render_to(record),
                "...",
            )
        )
        try:
            gomod.upgrade(record.name)
        except UpgradeError as e:
            console.print(str(e), style="red", markup=False)
            failures.append(e)
    return failures
