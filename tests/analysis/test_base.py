"""
Tests for the AnalysisModule base class.
"""

from unittest.mock import patch

import pytest

from notelens.core.analysis.base import AnalysisModule


class EchoModule(AnalysisModule):
    """Echoes its input."""

    name = "echo"

    def analyze(self, text, **kwargs):
        if text == "fail":
            raise RuntimeError("forced failure")
        return {"text": text, **self.options(**kwargs)}

    def empty_result(self):
        return {}


class TestAnalysisModule:
    def test_config_must_be_dict(self):
        with pytest.raises(TypeError, match="config must be None or a dict"):
            EchoModule(["not", "a", "dict"])

    def test_default_config(self):
        module = EchoModule()
        assert module.config == {}
        assert module.module_name == "echo"

    def test_options_merge_ignores_none(self):
        module = EchoModule({"a": 1, "b": 2})
        assert module.options(b=3, c=None) == {"a": 1, "b": 3}

    def test_run_logs_start_and_complete(self):
        with patch("notelens.core.analysis.base.log_analysis_start") as mock_start, patch(
            "notelens.core.analysis.base.log_analysis_complete"
        ) as mock_complete:
            result = EchoModule().run("hello")
        assert result == {"text": "hello"}
        mock_start.assert_called_once_with("echo", 5)
        mock_complete.assert_called_once()

    def test_run_treats_none_as_empty(self):
        assert EchoModule().run(None) == {"text": ""}

    def test_run_degrades_on_error(self):
        with patch("notelens.core.analysis.base.log_analysis_error") as mock_error:
            assert EchoModule().run("fail") == {}
        mock_error.assert_called_once()
        assert mock_error.call_args[0][0] == "echo"

    def test_module_info(self):
        info = EchoModule({"x": 1}).get_module_info()
        assert info["name"] == "echo"
        assert info["description"] == "Echoes its input."
        assert info["config"] == {"x": 1}

    def test_abstract(self):
        with pytest.raises(TypeError):
            AnalysisModule()
