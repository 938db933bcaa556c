"""Summary analysis package."""

from __future__ import annotations

from typing import Any

from notelens.core.analysis.base import AnalysisModule
from notelens.core.analysis.summary.core import (
    SIGNIFICANCE_KEYWORDS,
    SUMMARY_STOP_WORDS,
    ComprehensiveSummary,
    ReadabilityMetrics,
    SummaryInfo,
    empty_summary,
    extract_keywords,
    extract_main_topics,
    generate_comprehensive_summary,
    generate_multi_length_summaries,
    generate_summary,
    get_readability_metrics,
    get_summary_diagnostics,
)


class SummaryAnalysis(AnalysisModule):
    """Extractive summary: top sentences by frequency, significance and centrality."""

    name = "summary"

    def analyze(self, text: str, **kwargs: Any) -> SummaryInfo:
        return generate_summary(text, **self.options(**kwargs))

    def empty_result(self) -> SummaryInfo:
        return empty_summary()


__all__ = [
    "SIGNIFICANCE_KEYWORDS",
    "SUMMARY_STOP_WORDS",
    "ComprehensiveSummary",
    "ReadabilityMetrics",
    "SummaryAnalysis",
    "SummaryInfo",
    "empty_summary",
    "extract_keywords",
    "extract_main_topics",
    "generate_comprehensive_summary",
    "generate_multi_length_summaries",
    "generate_summary",
    "get_readability_metrics",
    "get_summary_diagnostics",
]
