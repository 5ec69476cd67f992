from __future__ import annotations

from loguru import logger

from command_runner import DefaultCommandRunner
from command_runner.logging import setup_logging


class TestSetupLogging:
    def test_enables_library_logs(self, capsys):
        try:
            setup_logging("DEBUG")
            DefaultCommandRunner().run(["/bin/sh", "-c", "true"], "/")
        finally:
            logger.remove()
            logger.disable("command_runner")

        err = capsys.readouterr().err
        assert "Running `/bin/sh -c true` in `/`" in err
        assert "Completed `/bin/sh` with exit code 0" in err

    def test_respects_level(self, capsys):
        try:
            setup_logging("INFO")
            DefaultCommandRunner().run(["/bin/sh", "-c", "true"], "/")
        finally:
            logger.remove()
            logger.disable("command_runner")

        err = capsys.readouterr().err
        assert "Running" in err
        assert "Completed" not in err
