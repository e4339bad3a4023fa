"""Tests for shared models, the console and the structured logger."""
import json

from shared.console import PlaygroundConsole
from shared.logger import PlaygroundLogger
from shared.models import Finding, ScanResult, Severity


class TestFinding:

    def test_evidence_dict_is_serialised(self):
        finding = Finding(
            severity=Severity.LOW, title="t", description="d", evidence={"k": 1}
        )
        assert json.loads(finding.evidence) == {"k": 1}

    def test_unknown_fields_ignored(self):
        finding = Finding(severity="HIGH", title="t", description="d", confidence=0.9)
        assert finding.severity is Severity.HIGH
        assert not hasattr(finding, "confidence")


class TestScanResult:

    def test_finalize_builds_summary_from_counts(self):
        result = ScanResult(tool_name="playground.test", target="x")
        result.add_finding(Finding(severity=Severity.LOW, title="a", description="a"))
        result.add_finding(Finding(severity=Severity.HIGH, title="b", description="b"))
        result.finalize()
        assert result.summary == "Analysis complete. Findings: 2 (HIGH: 1, LOW: 1)"
        assert result.highest_severity is Severity.HIGH
        assert result.duration_seconds >= 0

    def test_empty_result(self):
        result = ScanResult(tool_name="playground.test", target="x")
        assert result.highest_severity is None
        assert result.duration_seconds is None
        assert result.finalize("done").summary == "done"


class TestPlaygroundLogger:

    def test_json_file_output(self, tmp_path):
        log_file = tmp_path / "logs" / "playground.log"
        log = PlaygroundLogger(
            "test_json", log_file=log_file, json_logs=True, console_output=False
        )
        with log.operation("password_analysis"):
            log.info("Analysing", length=12)
        log.warning("outside")
        for handler in log.underlying.handlers:
            handler.flush()

        lines = [json.loads(line) for line in log_file.read_text().splitlines()]
        assert lines[0]["message"] == "Analysing"
        assert lines[0]["operation"] == "password_analysis"
        assert lines[0]["tool_name"] == "test_json"
        assert lines[0]["extra"] == {"length": 12}
        assert lines[1]["level"] == "WARNING"
        assert "operation" not in lines[1]

    def test_reinstantiation_does_not_stack_handlers(self):
        PlaygroundLogger("test_stack", console_output=True)
        log = PlaygroundLogger("test_stack", console_output=True)
        assert len(log.underlying.handlers) == 1
        assert log.underlying.name == "playground.test_stack"

    def test_exception_includes_traceback(self, tmp_path):
        log_file = tmp_path / "err.log"
        log = PlaygroundLogger(
            "test_exc", log_file=log_file, json_logs=True, console_output=False
        )
        try:
            raise ValueError("bad input")
        except ValueError:
            log.exception("failed")
        for handler in log.underlying.handlers:
            handler.flush()

        entry = json.loads(log_file.read_text().splitlines()[0])
        assert entry["level"] == "ERROR"
        assert "ValueError: bad input" in entry["exc_info"]


class TestPlaygroundConsole:

    def test_findings_table_is_recorded(self):
        console = PlaygroundConsole(record=True)
        console.findings_table([
            Finding(title="Weak", description="short", severity=Severity.LOW),
        ])
        console.warning("careful")
        text = console.rich.export_text()
        assert "Findings" in text
        assert "Weak" in text
        assert "LOW" in text
        assert "WARNING: careful" in text

    def test_quiet_console_renders_nothing(self):
        console = PlaygroundConsole(quiet=True, record=True)
        console.error("hidden")
        assert console.rich.export_text() == ""
