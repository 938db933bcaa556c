"""
Module registry for NoteLens text analyzers.

Single source of truth for the per-transcript analysis modules: their
metadata and a lazy loader for each ``AnalysisModule`` class.
"""

from __future__ import annotations

import importlib
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from notelens.core.analysis.base import AnalysisModule
from notelens.core.utils.config import get_config
from notelens.core.utils.logger import log_warning


@dataclass
class ModuleInfo:
    """Information about an analysis module."""

    name: str
    description: str
    import_path: str
    class_name: str
    category: str = "light"  # light, medium (quadratic in sentences)


class ModuleRegistry:
    """
    Central registry for all per-transcript analysis modules.

    Module classes are imported on first use.
    """

    def __init__(self) -> None:
        self._modules: dict[str, ModuleInfo] = {}
        self._setup_modules()

    def _setup_modules(self) -> None:
        module_definitions = {
            "summary": {
                "description": "Extractive summary (frequency, significance, centrality)",
                "import_path": "notelens.core.analysis.summary",
                "class_name": "SummaryAnalysis",
                "category": "medium",
            },
            "sentiment": {
                "description": "Lexicon sentiment with intensifiers and negation",
                "import_path": "notelens.core.analysis.sentiment",
                "class_name": "SentimentAnalyzer",
            },
            "fillers": {
                "description": "Filler-word detection, removal and highlighting",
                "import_path": "notelens.core.analysis.fillers",
                "class_name": "FillerWordDetector",
            },
            "wordcloud": {
                "description": "Keyword frequencies scaled for a word cloud",
                "import_path": "notelens.core.analysis.wordclouds",
                "class_name": "WordCloudAnalysis",
            },
            "tags": {
                "description": "Automatic tags: topics, entities, proper nouns, dates",
                "import_path": "notelens.core.analysis.tag_extraction",
                "class_name": "TagExtractor",
            },
            "vocabulary": {
                "description": "Vocabulary richness, readability and word usage",
                "import_path": "notelens.core.analysis.vocabulary",
                "class_name": "VocabularyAnalyzer",
            },
        }
        for name, definition in module_definitions.items():
            self._modules[name] = ModuleInfo(name=name, **definition)

    def get_available_modules(self) -> list[str]:
        return list(self._modules)

    def get_default_modules(self) -> list[str]:
        """Configured default modules that exist in the registry."""
        return [m for m in get_config().analysis.default_modules if m in self._modules]

    def get_module_info(self, module_name: str) -> ModuleInfo | None:
        return self._modules.get(module_name)

    def get_module_class(self, module_name: str) -> type[AnalysisModule]:
        """
        Import and return the AnalysisModule class for a module.

        Raises:
            ValueError: If the module name is unknown
        """
        info = self._modules.get(module_name)
        if info is None:
            raise ValueError(
                f"Unknown module: {module_name}. "
                f"Available: {', '.join(self._modules)}"
            )
        module = importlib.import_module(info.import_path)
        return getattr(module, info.class_name)

    def create_module(
        self, module_name: str, config: dict[str, Any] | None = None
    ) -> AnalysisModule:
        return self.get_module_class(module_name)(config)


_module_registry = ModuleRegistry()


def get_available_modules() -> list[str]:
    """Get list of available analysis modules."""
    return _module_registry.get_available_modules()


def get_default_modules() -> list[str]:
    """Get list of modules run when none are requested."""
    return _module_registry.get_default_modules()


def get_module_info(module_name: str) -> ModuleInfo | None:
    """Get information about a specific analysis module."""
    return _module_registry.get_module_info(module_name)


def create_module(module_name: str, config: dict[str, Any] | None = None) -> AnalysisModule:
    """Instantiate an analysis module by name."""
    return _module_registry.create_module(module_name, config)


def _to_payload(result: Any) -> Any:
    if hasattr(result, "to_dict"):
        return result.to_dict()
    return result


def run_modules(
    text: str,
    modules: Iterable[str] | None = None,
    options: dict[str, dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """
    Run several analyzers over one transcript.

    Args:
        text: Transcript text
        modules: Module names (default: configured default modules)
        options: Per-module keyword overrides, e.g. ``{"summary": {"target_sentences": 3}}``

    Returns:
        Mapping of module name to its JSON-serializable result. Unknown module
        names are skipped with a warning.

    Raises:
        Nothing; a failing analyzer contributes its empty result.
    """
    names = list(modules) if modules is not None else get_default_modules()
    options = options or {}
    results: dict[str, Any] = {}
    for name in names:
        if get_module_info(name) is None:
            log_warning("REGISTRY", f"Skipping unknown module: {name}")
            continue
        module = create_module(name, options.get(name))
        results[name] = _to_payload(module.run(text))
    return results
