"""Bitcask-inspired log-structured key-value store: single-file log, compacting segmented store and a demo command."""

__version__ = "0.1.0"
__all__ = ["kvstore", "store", "cli"]