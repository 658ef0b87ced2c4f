"""CLI application for modpick."""

import typer
from rich.console import Console

from core.apply import apply_updates
from core.choose import choose
from core.discover import discover
from core.errors import SelectionCancelled
from core.gomod import GoModules

console = Console()

app = typer.Typer(
    name="modpick",
    help="modpick - Interactively choose and apply Go module updates",
    add_completion=False,
)


@app.command()
def upgrade(
    page_size: int = typer.Option(10, "--page-size", "-p", min=1, help="Specify page size"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose mode"),
) -> None:
    """modpick - Discover Go module updates, pick some and upgrade them."""

    gomod = GoModules()

    try:
        records = discover(gomod, console=console, verbose=verbose)

        if not records:
            console.print("All modules are up to date")
            raise typer.Exit(0)

        chosen = choose(records, page_size, console)
        apply_updates(chosen, gomod, console)

    except typer.Exit:
        raise
    except SelectionCancelled:
        console.print("Bye")
        raise typer.Exit(0)
    except Exception as e:
        console.print(f"Error: {e}", style="red", markup=False)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
