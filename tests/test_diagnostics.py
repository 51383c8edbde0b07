from __future__ import annotations

import logging

from pioneer_pings.diagnostics import LoggingDiagnosticSink


def test_logging_sink_levels(caplog) -> None:
    sink = LoggingDiagnosticSink(logging.getLogger("pioneer_pings.test"))

    with caplog.at_level(logging.DEBUG, logger="pioneer_pings.test"):
        sink.emit("ping_submitted", {"payload": {}})
        sink.emit("ping_submission_failed", {"error": "boom"})

    levels = [(record.getMessage(), record.levelno) for record in caplog.records]
    assert levels == [("ping_submitted", logging.DEBUG), ("ping_submission_failed", logging.ERROR)]
    assert caplog.records[1].diagnostic == {"error": "boom"}
