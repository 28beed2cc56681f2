import logging
from typing import Optional
from rich.console import Console
from rich.logging import RichHandler

def setup_logging(verbose: int = 0, console: Optional[Console] = None):
    # Console handler levels:
    # 0 (Standard): WARNING
    # 1 (-v): INFO
    # 2 (-vv): DEBUG
    if verbose == 0:
        console_level = logging.WARNING
    elif verbose == 1:
        console_level = logging.INFO
    else:
        console_level = logging.DEBUG

    if console is None:
        console = Console(stderr=True)
    rich_handler = RichHandler(console=console, level=console_level, show_path=False)

    logging.basicConfig(
        level=logging.NOTSET, # Let handlers filter
        format="%(message)s",
        handlers=[rich_handler],
        force=True # Ensure we override any existing config
    )
    return logging.getLogger("horizoncalc")

__all__ = ["setup_logging"]
