from __future__ import annotations
import typer
from rich import print
from rich.console import Console
from typing import Optional
from horizoncalc.config.settings import load_settings
from horizoncalc.models.heights import HeightInput, UnitMode
from horizoncalc.processing import compute_horizon
from horizoncalc.io.report import print_report
from horizoncalc.utils.logging import setup_logging
from horizoncalc.validation import HeightError

__version__ = "0.1.0"

app = typer.Typer(help="Line-of-sight horizon distance calculator")

def version_callback(value: bool):
    if value:
        print(f"[bold cyan]horizoncalc v{__version__}[/bold cyan]")
        raise typer.Exit()

@app.command(
    # Negative heights must reach validation instead of being parsed as options.
    context_settings={"help_option_names": ["-h", "--help"], "ignore_unknown_options": True}
)
def horizon(
    observer: float = typer.Argument(..., help="Height of the observer"),
    subject: Optional[float] = typer.Argument(None, help='Height of the subject. Default: 0 ("the horizon")', show_default=False),
    metric: bool = typer.Option(False, "--metric", "-m", help="Calculate using heights in meters instead of feet"),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Verbosity level: 0=Standard, 1=Info, 2=Debug"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
):
    """
    Calculate the ground distance and slant range to the horizon (or to a subject).

    Heights are taken in feet unless --metric is given, since the common case is an
    aircraft at a given altitude. Results are always shown in meters, miles and kilometers.
    """
    settings = load_settings()
    console = Console()
    err_console = Console(stderr=True)
    log = setup_logging(verbose=verbose, console=err_console)

    heights = HeightInput(
        observer_height=observer,
        subject_height=subject,
        unit_mode=UnitMode.from_flag(metric),
    )
    log.info(f"Observer {observer}, subject {subject if subject is not None else 'horizon'} ({heights.unit_mode.value})")

    try:
        result = compute_horizon(heights, settings.constants)
    except HeightError as e:
        log.debug(f"Rejected {e.field} height {e.value}")
        err_console.print(f"[red]{e}[/red]", highlight=False, soft_wrap=True)
        raise typer.Exit(code=1)

    print_report(result, console)

__all__ = ["app", "horizon", "__version__"]
