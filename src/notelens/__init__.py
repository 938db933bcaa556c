"""
NoteLens - on-device text analytics for voice-note transcripts.

Summaries, sentiment, filler words, word clouds, semantic search, automatic
tags, smart folders and vocabulary statistics, all computed locally from
plain text.
"""

__version__ = "0.1.0"
