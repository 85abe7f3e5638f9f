"""Chat log to YTT/SRV3 and ASS subtitles, with INI config and preview layout."""

__version__ = "0.1.0"