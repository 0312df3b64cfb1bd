from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import json

import pytest

from pysatl_distview.logging import configure_logging, get_logger


class TestConfigureLogging:
    def test_json_output(self, capsys):
        configure_logging(log_level="DEBUG", log_format="json", show_timestamps=False)

        get_logger("json_output").info("bins_chosen", bins=12)

        record = json.loads(capsys.readouterr().err.strip())
        assert record == {"event": "bins_chosen", "bins": 12, "level": "info"}

    def test_timestamps(self, capsys):
        configure_logging(log_format="json")

        get_logger("timestamps").warning("sample_small")

        record = json.loads(capsys.readouterr().err.strip())
        assert record["timestamp"].endswith("Z")

    def test_level_filtering(self, capsys):
        configure_logging(log_level="info", log_format="json", show_timestamps=False)
        logger = get_logger("level_filtering")

        logger.debug("hidden")
        logger.info("shown")

        lines = capsys.readouterr().err.strip().splitlines()
        assert [json.loads(line)["event"] for line in lines] == ["shown"]

    def test_console_output(self, capsys):
        configure_logging(log_format="console", color=False, show_timestamps=False)

        get_logger("console_output").info("histogram_built", bins=7)

        err = capsys.readouterr().err
        assert "histogram_built" in err
        assert "bins=7" in err

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging(log_level="LOUD")

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unknown log format"):
            configure_logging(log_format="xml")
