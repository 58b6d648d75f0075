import logging
import sys

import pytest

from baseball_stats.cli._logging import configure_logging
from baseball_stats.domain.player import Club
from baseball_stats.services.club_report import try_average


@pytest.fixture(autouse=True)
def _quiet_root() -> None:
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.WARNING)


class TestConfigureLogging:
    @pytest.mark.parametrize(("verbose", "level"), [(False, logging.INFO), (True, logging.DEBUG)])
    def test_root_level(self, verbose: bool, level: int) -> None:
        configure_logging(verbose=verbose)
        assert logging.getLogger().level == level

    def test_single_stderr_handler(self) -> None:
        configure_logging()
        configure_logging()
        (handler,) = logging.getLogger().handlers
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr

    def test_report_failures_hidden_by_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging()
        try_average(Club(name="Expansion"), "Expansion")
        assert "Expansion" not in capsys.readouterr().err

    def test_report_failures_shown_when_verbose(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True)
        try_average(Club(name="Expansion"), "Expansion")
        err = capsys.readouterr().err
        assert "DEBUG" in err
        assert "baseball_stats.services.club_report: No batting average for Expansion" in err
