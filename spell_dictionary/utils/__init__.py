"""Logging, configuration, metrics and word-list persistence helpers."""
