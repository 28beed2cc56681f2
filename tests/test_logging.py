import io
import logging
from rich.console import Console
from rich.logging import RichHandler
from horizoncalc.utils.logging import setup_logging

def test_setup_logging_defaults():
    logger = setup_logging()
    assert logger.name == "horizoncalc"
    root_logger = logging.getLogger()
    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0], RichHandler)
    assert root_logger.handlers[0].level == logging.WARNING

def test_setup_logging_levels():
    setup_logging(verbose=1)
    rich_handlers = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
    assert rich_handlers[0].level == logging.INFO

    setup_logging(verbose=3)
    rich_handlers = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
    assert len(rich_handlers) == 1
    assert rich_handlers[0].level == logging.DEBUG

def test_setup_logging_console():
    buf = io.StringIO()
    setup_logging(verbose=2, console=Console(file=buf, width=200))
    logging.getLogger("horizoncalc.processing").debug("central angle computed")
    assert "central angle computed" in buf.getvalue()

def test_setup_logging_quiet_console():
    buf = io.StringIO()
    setup_logging(verbose=0, console=Console(file=buf, width=200))
    logging.getLogger("horizoncalc.processing").info("not shown")
    assert buf.getvalue() == ""

def test_setup_logging_adds_no_file_handler(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    setup_logging(verbose=2, console=Console(file=io.StringIO()))
    logging.getLogger("horizoncalc").debug("stays on the console")
    assert not any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)
    assert list(tmp_path.iterdir()) == []
