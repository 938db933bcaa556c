"""
Tests for the analysis module registry.
"""

from unittest.mock import patch

import pytest

from notelens.core.analysis.registry import (
    ModuleRegistry,
    create_module,
    get_available_modules,
    get_default_modules,
    get_module_info,
    run_modules,
)
from notelens.core.analysis.summary import SummaryAnalysis
from notelens.core.utils.config import NoteLensConfig, set_config

ALL_MODULES = ["summary", "sentiment", "fillers", "wordcloud", "tags", "vocabulary"]


class TestModuleRegistry:
    def test_available_modules(self):
        assert get_available_modules() == ALL_MODULES

    def test_default_modules_follow_config(self):
        assert get_default_modules() == ALL_MODULES
        config = NoteLensConfig()
        config.analysis.default_modules = ["tags", "bogus", "summary"]
        set_config(config)
        assert get_default_modules() == ["tags", "summary"]

    def test_module_info(self):
        info = get_module_info("summary")
        assert info.class_name == "SummaryAnalysis"
        assert info.category == "medium"
        assert get_module_info("nope") is None

    def test_module_class_loaded_lazily(self):
        registry = ModuleRegistry()
        assert registry.get_module_class("summary") is SummaryAnalysis

    def test_unknown_module_class(self):
        with pytest.raises(ValueError, match="Unknown module: nope"):
            ModuleRegistry().get_module_class("nope")

    def test_create_module_with_config(self):
        module = create_module("summary", {"target_sentences": 1})
        assert isinstance(module, SummaryAnalysis)
        assert module.config == {"target_sentences": 1}

    @pytest.mark.parametrize("name", ALL_MODULES)
    def test_every_module_instantiates(self, name):
        module = create_module(name)
        assert module.module_name == name


class TestRunModules:
    def test_selected_modules(self, sample_transcript):
        results = run_modules(sample_transcript, ["summary", "tags"])
        assert list(results) == ["summary", "tags"]
        assert len(results["summary"]["sentences"]) == 2
        assert isinstance(results["tags"], list)

    def test_default_modules(self, sample_transcript):
        assert list(run_modules(sample_transcript)) == ALL_MODULES

    def test_per_module_options(self, sample_transcript):
        results = run_modules(
            sample_transcript, ["summary"], {"summary": {"target_sentences": 3}}
        )
        assert len(results["summary"]["sentences"]) == 3

    def test_unknown_module_skipped(self, sample_transcript):
        with patch("notelens.core.analysis.registry.log_warning") as mock_warning:
            results = run_modules(sample_transcript, ["bogus", "tags"])
        assert list(results) == ["tags"]
        mock_warning.assert_called_once()

    def test_empty_text(self):
        results = run_modules("", ["summary", "sentiment", "tags"])
        assert results["summary"]["summary"] == "No content to summarize."
        assert results["sentiment"]["sentiment"] == "Neutral"
        assert results["tags"] == []

    @pytest.mark.parametrize("name", ALL_MODULES)
    def test_repeated_runs_give_identical_results(self, name, filler_transcript):
        first = run_modules(filler_transcript, [name])
        second = run_modules(filler_transcript, [name])
        assert first == second
