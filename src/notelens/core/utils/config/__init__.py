from .analysis import (
    AnalysisConfig,
    FillerConfig,
    SearchConfig,
    SentimentConfig,
    SummaryConfig,
    TaggingConfig,
    VocabularyConfig,
    WordCloudConfig,
)
from .system import LoggingConfig
from .main import NoteLensConfig
from .base import (
    DEFAULT_LANGUAGE,
    FILLER_CATEGORIES,
    NO_NOTES_CONTENT,
    NO_SENTIMENT_CONTENT,
    NO_SUMMARY_CONTENT,
    WORDCLOUD_COLORS,
)

_global_config: NoteLensConfig | None = None


def get_config() -> NoteLensConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = NoteLensConfig()
    return _global_config


def set_config(config: NoteLensConfig) -> None:
    """Set the global configuration instance."""
    global _global_config
    _global_config = config


def load_config(config_file: str) -> NoteLensConfig:
    """Load configuration from file and set as global config."""
    config = NoteLensConfig(config_file)
    set_config(config)
    return config


def reset_config() -> None:
    """Drop the global configuration so the next get_config() rebuilds it."""
    global _global_config
    _global_config = None


__all__ = [
    "AnalysisConfig",
    "FillerConfig",
    "LoggingConfig",
    "NoteLensConfig",
    "SearchConfig",
    "SentimentConfig",
    "SummaryConfig",
    "TaggingConfig",
    "VocabularyConfig",
    "WordCloudConfig",
    "DEFAULT_LANGUAGE",
    "FILLER_CATEGORIES",
    "NO_NOTES_CONTENT",
    "NO_SENTIMENT_CONTENT",
    "NO_SUMMARY_CONTENT",
    "WORDCLOUD_COLORS",
    "get_config",
    "set_config",
    "load_config",
    "reset_config",
]
