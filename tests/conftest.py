import logging
from collections import Counter
from pathlib import PurePosixPath

import pytest
import structlog
from rich.console import Console
from rich.table import Table

OUTCOMES = ("passed", "failed", "skipped")


def _registered_markers(config) -> list[str]:
    # "unit_select: select codec tests" -> "unit_select"
    return [line.split(":", 1)[0].strip() for line in config.getini("markers")]


def _module_of(nodeid: str) -> str:
    return PurePosixPath(nodeid.split("::", 1)[0]).stem


@pytest.fixture
def isolated_root_logger():
    """Root logger whose handlers and structlog setup are restored afterwards."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    structlog.reset_defaults()


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    """Outcome counts per package marker and test module."""
    markers = _registered_markers(config)
    counts: Counter = Counter()

    for outcome in OUTCOMES:
        for report in terminalreporter.stats.get(outcome, []):
            if report.when != "call" and not (report.when == "setup" and report.skipped):
                continue
            module = _module_of(report.nodeid)
            for marker in markers:
                if marker in report.keywords:
                    counts[(marker, module, outcome)] += 1

    rows = sorted({(marker, module) for marker, module, _ in counts})
    if not rows:
        return

    table = Table(title="Codec test outcomes", header_style="bold cyan")
    table.add_column("Package")
    table.add_column("Module")
    for outcome in OUTCOMES:
        table.add_column(outcome.capitalize(), justify="right")
    for marker, module in rows:
        table.add_row(
            marker.removeprefix("unit_"),
            module,
            *(str(counts[(marker, module, outcome)]) for outcome in OUTCOMES),
        )

    Console().print(table)
