"""
Tests for OpenTelemetry-compliant log formatters.

Tests for JsonFormatter and HumanFormatter.
"""

import json
import logging

import pytest


def _record(level=logging.INFO, name="membytes.test", msg="Test message", **extra):
    record = logging.LogRecord(
        name=name,
        level=level,
        pathname="/src/membytes/view/pinning.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def test_otel_structure(self):
        """Output is one JSON object following the OpenTelemetry data model."""
        from membytes._logging import JsonFormatter

        parsed = json.loads(JsonFormatter().format(_record()))

        assert set(parsed) == {"timestamp", "severityText", "body", "attributes", "resource"}
        assert parsed["body"] == "Test message"
        assert parsed["severityText"] == "INFO"
        assert parsed["resource"]["service.name"] == "membytes"

    def test_timestamp_format(self):
        """Timestamp is RFC3339 UTC with a nanosecond field."""
        from membytes._logging import JsonFormatter

        timestamp = json.loads(JsonFormatter().format(_record()))["timestamp"]

        assert timestamp.endswith("Z")
        assert len(timestamp.split(".")[1]) == 10  # 9 digits + "Z"

    @pytest.mark.parametrize(
        "level,severity",
        [
            (logging.DEBUG, "DEBUG"),
            (logging.WARNING, "WARN"),
            (logging.ERROR, "ERROR"),
            (logging.CRITICAL, "FATAL"),
        ],
    )
    def test_severity_mapping(self, level, severity):
        """Python levels map to OpenTelemetry severity text."""
        from membytes._logging import JsonFormatter

        parsed = json.loads(JsonFormatter().format(_record(level=level)))

        assert parsed["severityText"] == severity

    def test_extra_attributes(self):
        """Extra record attributes are copied into attributes."""
        from membytes._logging import JsonFormatter

        parsed = json.loads(JsonFormatter().format(_record(scope="pin", address=4096, length=4)))

        assert parsed["attributes"]["scope"] == "pin"
        assert parsed["attributes"]["address"] == 4096
        assert parsed["attributes"]["length"] == 4

    def test_scope_inferred_from_logger_name(self):
        """Without an explicit scope, it is inferred from the logger name."""
        from membytes._logging import JsonFormatter

        parsed = json.loads(JsonFormatter().format(_record(name="membytes.view.pinning")))

        assert parsed["attributes"]["scope"] == "pin"

    def test_code_location_on_debug(self):
        """DEBUG records include a package-relative code location."""
        from membytes._logging import JsonFormatter

        attrs = json.loads(JsonFormatter().format(_record(level=logging.DEBUG)))["attributes"]

        assert attrs["code.filepath"] == "view/pinning.py"
        assert attrs["code.lineno"] == 42

    def test_no_code_location_on_info(self):
        """INFO records omit the code location."""
        from membytes._logging import JsonFormatter

        attrs = json.loads(JsonFormatter().format(_record()))["attributes"]

        assert "code.filepath" not in attrs


class TestHumanFormatter:
    """Tests for HumanFormatter."""

    def test_plain_line(self):
        """Without colours the line is time, level, scope and message."""
        from membytes._logging import HumanFormatter

        line = HumanFormatter(use_colors=False).format(_record(scope="view"))

        assert line.endswith("INFO  [view] Test message")

    def test_address_shown_inline(self):
        """An address attribute is shown in hex after the message."""
        from membytes._logging import HumanFormatter

        line = HumanFormatter(use_colors=False).format(_record(scope="pin", address=255))

        assert "Test message (0xff)" in line

    def test_code_location_on_error(self):
        """ERROR lines end with the code location."""
        from membytes._logging import HumanFormatter

        line = HumanFormatter(use_colors=False).format(_record(level=logging.ERROR))

        assert line.endswith("[view/pinning.py:42]")

    def test_colors(self):
        """With colours enabled, ANSI escapes are present."""
        from membytes._logging import HumanFormatter

        line = HumanFormatter(use_colors=True).format(_record(level=logging.ERROR))

        assert "\x1b[31m" in line
        assert "\x1b[0m" in line
