"""Tests for the command line entry point."""

import logging
import re

import pytest

import main
from cvspin.utils.correlation import get_correlation_vector
from cvspin.utils.sources import fixed_clock, fixed_entropy


@pytest.fixture
def logging_calls(monkeypatch):
    """Record setup_logging calls instead of reconfiguring the root logger."""
    calls = []
    monkeypatch.setattr(main, "setup_logging", lambda **kwargs: calls.append(kwargs))
    return calls


@pytest.fixture
def application(test_config):
    """Application with a frozen clock and replayed entropy."""
    return main.Application(
        config=test_config,
        clock=fixed_clock(5 << 24),
        entropy_source=fixed_entropy(b"\x01\x02\x03\x04"),
    )


class TestApplication:
    """Test Application."""

    def test_spin_base_vector(self, application, logging_calls, capsys):
        """Test spinning a vector given on the command line."""
        exit_code = application.run(["abc.1"])

        assert exit_code == 0
        assert capsys.readouterr().out == "abc.1.328706.0\n"
        assert logging_calls == [{"level": "INFO", "format_type": "text"}]
        assert get_correlation_vector() == "abc.1"

    def test_spin_with_options(self, application, logging_calls, capsys):
        """Test parameter flags and repeated spins."""
        exit_code = application.run(
            ["abc.1", "--periodicity", "long", "--entropy", "4", "--count", "2"]
        )

        assert exit_code == 0
        assert capsys.readouterr().out.splitlines() == [
            "abc.1.5.16909060.0",
            "abc.1.5.16909060.0",
        ]

    def test_validation_failure(self, application, logging_calls, capsys):
        """Test that --validate rejects an invalid base vector."""
        exit_code = application.run(["abc.1", "--validate"])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert "Invalid base value abc" in captured.err

    def test_generated_base_vector(self, application, logging_calls, capsys):
        """Test spinning a freshly generated vector."""
        exit_code = application.run(["--validate"])

        assert exit_code == 0
        assert re.fullmatch(
            r"[A-Za-z0-9+/]{16}\.0\.328706\.0\n", capsys.readouterr().out
        )

    def test_invalid_entropy_flag(self, application, logging_calls):
        """Test that argparse rejects entropy outside 0..4."""
        with pytest.raises(SystemExit):
            application.run(["abc.1", "--entropy", "5"])

    def test_main(self, logging_calls, capsys):
        """Test the main entry point with the system clock."""
        assert main.main(["abc.1", "--periodicity", "none", "--entropy", "0"]) == 0
        assert capsys.readouterr().out == "abc.1.0.0\n"

    def test_startup_logs_environment(self, test_config, logging_calls, caplog):
        """Test that the startup line reports the configured environment."""
        caplog.set_level(logging.INFO)
        test_config.environment = "staging"

        main.Application(config=test_config).run(["abc.1"])

        record = next(r for r in caplog.records if r.getMessage().startswith("Starting"))
        assert "(env: staging)" in record.getMessage()
        assert record.environment == "staging"
        assert record.name == "main.Application"

    def test_failure_is_logged(self, application, logging_calls, caplog):
        """Test that a rejected base vector is logged as an error."""
        caplog.set_level(logging.INFO)

        assert application.run(["abc.1", "--validate"]) == 1

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.getMessage().startswith("Failed to spin correlation vector")
        assert record.base_vector == "abc.1"

    @pytest.mark.parametrize("count", ["0", "-3", "many"])
    def test_invalid_count_flag(self, application, logging_calls, capsys, count):
        """Test that --count must be a positive integer."""
        with pytest.raises(SystemExit) as exc_info:
            application.run(["abc.1", "--count", count])

        captured = capsys.readouterr()
        assert exc_info.value.code == 2
        assert captured.out == ""
        assert "--count" in captured.err
