"""Fluent Bit resource models and rendering of their configuration text."""

__version__ = "0.1.0"

__all__ = ["config", "meta", "plugin", "sections", "workloads"]