import logging

import pytest

from baseball_stats.domain.errors import StatError
from baseball_stats.domain.player import Club, Player
from baseball_stats.domain.result import Err, Ok
from baseball_stats.services.club_report import build_club_report, try_average


class TestTryAverage:
    def test_ok(self) -> None:
        assert try_average(Player(name="a", hits=1000, at_bats=2000), "a") == Ok(0.5)

    def test_err_carries_subject(self) -> None:
        result = try_average(Player(name="a", hits=0, at_bats=0), "a")
        assert isinstance(result, Err)
        assert result.error == StatError(message="at least one at-bat required", subject="a")

    def test_logs_failure_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="baseball_stats.services.club_report"):
            try_average(Club(name="Expansion"), "Expansion")
        assert "Expansion" in caplog.text

    def test_other_errors_propagate(self) -> None:
        class Broken:
            def batting_average(self) -> float:
                raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            try_average(Broken(), "broken")


class TestBuildClubReport:
    def test_rows_in_roster_order(self) -> None:
        club = Club(
            name="Bulls",
            players=(
                Player(name="b", hits=1000, at_bats=2000),
                Player(name="p", is_pitcher=True, era=3.12),
                Player(name="a", hits=3000, at_bats=5000),
            ),
        )
        report = build_club_report(club)
        assert report.club_name == "Bulls"
        assert [r.name for r in report.rows] == ["b", "p", "a"]
        assert report.rows[0].average == Ok(0.5)
        assert report.rows[2].average == Ok(0.6)
        assert isinstance(report.rows[1].average, Err)
        assert report.rows[1].is_pitcher is True
        assert report.total == Ok(4000 / 7000)

    def test_empty_club_total_is_err(self) -> None:
        report = build_club_report(Club(name="Expansion"))
        assert report.rows == []
        assert isinstance(report.total, Err)
        assert report.total.error.subject == "Expansion"
