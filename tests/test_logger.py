"""
Tests for logger functionality.
"""

import pytest
from employees.logger import StructuredLogger, get_logger, reset_logger


class TestStructuredLogger:
    """Test structured logging functionality."""

    def test_logger_creation(self, tmp_path):
        """Logger should be created with default settings."""
        logger = StructuredLogger(
            name="test",
            level="INFO",
            log_dir=tmp_path,
            enable_console=False,
        )

        assert logger.logger.name == "test"
        assert logger.metrics["failures"]["get"] == 0
        assert logger.metrics["operations"]["get"] == 0

    def test_log_methods(self, tmp_path):
        """All log level methods should work."""
        logger = StructuredLogger(
            name="test",
            log_dir=tmp_path,
            enable_console=False,
        )

        logger.debug("Debug message")
        logger.info("Info message")
        logger.warning("Warning message")
        logger.error("Error message")
        logger.critical("Critical message")

    def test_log_with_context(self, tmp_path):
        """Context kwargs are appended as JSON."""
        logger = StructuredLogger(
            name="test",
            log_dir=tmp_path,
            enable_console=False,
        )

        logger.info("Employee created", employee_id=5)

        log_content = next(tmp_path.glob("*.log")).read_text()
        assert 'Employee created | Context: {"employee_id": 5}' in log_content

    def test_metrics_tracking(self):
        """Metrics should be tracked correctly."""
        logger = StructuredLogger(name="test", enable_console=False, enable_file=False)

        logger.record_operation("get")
        logger.record_operation("get")
        logger.record_operation("delete")
        logger.record_not_found("get")
        logger.record_failure("create", "IntegrityError")

        metrics = logger.get_metrics()

        assert metrics["operations"]["get"] == 2
        assert metrics["operations"]["delete"] == 1
        assert metrics["total_operations"] == 3
        assert metrics["not_found"]["get"] == 1
        assert metrics["failures"]["create"] == 1
        assert metrics["failures"]["get"] == 0
        assert metrics["total_failures"] == 1
        assert metrics["errors_by_type"]["IntegrityError"] == 1

    def test_get_metrics_returns_snapshot(self):
        """Mutating the returned metrics does not change the logger's counts."""
        logger = StructuredLogger(name="test", enable_console=False, enable_file=False)

        snapshot = logger.get_metrics()
        snapshot["operations"]["get"] = 100

        assert logger.metrics["operations"]["get"] == 0

    def test_failures_counted_per_operation(self):
        """Failures are attributed to the operation that raised them."""
        logger = StructuredLogger(name="test", enable_console=False, enable_file=False)

        logger.record_failure("delete", "OperationalError")
        logger.record_failure("delete", "OperationalError")
        logger.record_failure("update", "IntegrityError")

        metrics = logger.get_metrics()

        assert metrics["failures"] == {"get": 0, "create": 0, "update": 1, "delete": 2}
        assert metrics["errors_by_type"] == {"OperationalError": 2, "IntegrityError": 1}

    def test_metrics_summary(self, tmp_path):
        """The summary lists calls, not-found and failures per operation."""
        logger = StructuredLogger(name="test", log_dir=tmp_path, enable_console=False)
        logger.record_operation("update")
        logger.record_not_found("update")
        logger.record_failure("update", "OperationalError")

        logger.log_metrics_summary()

        log_content = next(tmp_path.glob("*.log")).read_text()
        assert "Operations: 1" in log_content
        assert "update: 1 (1 not found, 1 failed)" in log_content
        assert "OperationalError: 1" in log_content

    def test_log_file_creation(self, tmp_path):
        """Log file should be created in specified directory."""
        logger = StructuredLogger(
            name="test",
            log_dir=tmp_path,
            enable_console=False,
        )

        logger.info("Test message")

        log_files = list(tmp_path.glob("*.log"))
        assert len(log_files) == 1
        assert log_files[0].name.startswith("employees_")
        assert "Test message" in log_files[0].read_text()


class TestGlobalLogger:
    """Test global logger singleton."""

    def test_get_logger_singleton(self, tmp_path):
        """get_logger should return same instance."""
        reset_logger()

        logger1 = get_logger(log_dir=tmp_path, enable_console=False)
        logger2 = get_logger()

        assert logger1 is logger2

    def test_reset_logger(self, tmp_path):
        """reset_logger should create new instance."""
        reset_logger()

        logger1 = get_logger(log_dir=tmp_path, enable_console=False)
        logger1.record_operation("create")

        reset_logger()

        logger2 = get_logger(log_dir=tmp_path, enable_console=False)

        assert logger2.metrics["operations"]["create"] == 0

    def test_no_file_without_log_dir(self, tmp_path, monkeypatch):
        """Without EMPLOYEES_LOG_DIR the global logger writes no files."""
        monkeypatch.delenv("EMPLOYEES_LOG_DIR", raising=False)
        monkeypatch.chdir(tmp_path)
        reset_logger()

        get_logger(enable_console=False).info("hello")

        assert not (tmp_path / "logs").exists()
        assert list(tmp_path.rglob("*.log")) == []

    def test_settings_from_environment(self, tmp_path, monkeypatch):
        """EMPLOYEES_LOG_LEVEL and EMPLOYEES_LOG_DIR configure the global logger."""
        monkeypatch.setenv("EMPLOYEES_LOG_DIR", str(tmp_path / "logs"))
        monkeypatch.setenv("EMPLOYEES_LOG_LEVEL", "debug")
        reset_logger()

        logger = get_logger(enable_console=False)
        logger.debug("verbose")

        assert logger.logger.level == 10
        log_files = list((tmp_path / "logs").glob("*.log"))
        assert len(log_files) == 1
        assert "verbose" in log_files[0].read_text()

    def test_unknown_level_falls_back_to_info(self, monkeypatch):
        """An unrecognised EMPLOYEES_LOG_LEVEL does not break logging."""
        monkeypatch.setenv("EMPLOYEES_LOG_LEVEL", "verbose")
        monkeypatch.delenv("EMPLOYEES_LOG_DIR", raising=False)
        reset_logger()

        logger = get_logger(enable_console=False)
        logger.info("still works")

        assert logger.logger.level == 20
