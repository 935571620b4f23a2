"""Observability: LangSmith tracing (optional, env-controlled)."""

from campaign_console.observability.langsmith import (
    flush,
    traceable,
)

__all__ = ["traceable", "flush"]
