"""Logging package."""

from src.audit.logger import IssueLogger, configure_logging, get_logger

__all__ = ["IssueLogger", "configure_logging", "get_logger"]
