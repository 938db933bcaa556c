"""
Tests for the NoteLens logger helpers.
"""

import logging

from notelens.core.utils.logger import (
    log_analysis_complete,
    log_configuration_change,
    log_error,
    log_index_rebuild,
    log_warning,
    setup_logging,
)


class TestSetupLogging:
    def test_configures_notelens_logger(self, tmp_path):
        log_file = tmp_path / "notelens.log"
        logger = setup_logging("DEBUG", log_file=str(log_file))
        assert logger.name == "notelens"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        assert logger.propagate is False

    def test_reconfigure_replaces_handlers(self):
        setup_logging("INFO")
        logger = setup_logging("WARNING")
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        assert setup_logging("LOUD").level == logging.INFO


class TestLogHelpers:
    def test_module_prefix(self, suppress_logging):
        log_warning("search", "index is stale", "notes=3")
        suppress_logging.warning.assert_called_once_with(
            "[SEARCH] index is stale | Context: notes=3"
        )

    def test_error_with_exception(self, suppress_logging):
        error = ValueError("bad")
        log_error("config", "load failed", exception=error)
        suppress_logging.error.assert_called_once_with("[CONFIG] load failed", exc_info=error)

    def test_analysis_complete_duration(self, suppress_logging):
        log_analysis_complete("summary", 0.5)
        suppress_logging.debug.assert_called_once_with("Completed summary analysis (took 0.500s)")

    def test_index_rebuild(self, suppress_logging):
        log_index_rebuild(3, 40, 0.01)
        message = suppress_logging.info.call_args[0][0]
        assert "3 notes" in message and "40 tokens" in message

    def test_configuration_change(self, suppress_logging):
        log_configuration_change("analysis.summary.target_sentences", 2, 4)
        suppress_logging.info.assert_called_once_with(
            "Configuration changed: analysis.summary.target_sentences = 2 -> 4"
        )
