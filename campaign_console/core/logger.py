"""Structured logging: console plus a JSONL event file."""

import json
import logging
import os
import sys
import threading
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any

from campaign_console.core.config import config


def _format_duration(seconds: float) -> str:
    if seconds < 0:
        return "0s"
    if seconds >= 60:
        m = int(seconds // 60)
        s = seconds % 60
        if s < 0.05:
            return f"{m}m"
        return f"{m}m {s:.0f}s" if s >= 1 else f"{m}m {s:.1f}s"
    if seconds >= 0.05:
        return f"{seconds:.1f}s"
    if seconds > 0:
        return "<0.1s"
    return "0s"


def _short_reason(reason: str | None, max_len: int = 80) -> str:
    """One-line short reason for console (failed branch)."""
    if not reason or not reason.strip():
        return ""
    s = reason.strip().replace("\n", " ").strip()
    return s[:max_len] + "..." if len(s) > max_len else s


def _use_color() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    try:
        return sys.stdout.isatty()
    except Exception:
        return False


def _c(role: str) -> str:
    if not _use_color():
        return ""
    # 38;5;N = foreground 256-color
    codes = {
        "query": "\033[38;5;81m",
        "ok": "\033[38;5;78m",
        "fail": "\033[38;5;203m",
        "duration": "\033[38;5;221m",
    }
    return codes.get(role, "")


def _reset() -> str:
    if not _use_color():
        return ""
    return "\033[0m"


@dataclass
class LogEvent:
    event_type: str
    timestamp: str
    data: dict[str, Any]

    def to_dict(self) -> dict:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=str)


class ConsoleLogger:
    def __init__(self):
        config.logs_dir.mkdir(parents=True, exist_ok=True)
        self.log_file = config.logs_dir / "console.log"
        self._file_lock = threading.Lock()
        self._log_file_handle = open(self.log_file, "a", encoding="utf-8")
        self._setup_console_logger()

    def _setup_console_logger(self):
        self.console = logging.getLogger("campaign_console")
        self.console.setLevel(logging.DEBUG)
        formatter = logging.Formatter("%(asctime)s │ %(message)s", datefmt="%H:%M:%S")
        if not self.console.handlers:
            handler = logging.StreamHandler()
            handler.setLevel(logging.INFO)
            handler.setFormatter(formatter)
            self.console.addHandler(handler)

    def log_event(self, event: LogEvent) -> None:
        with self._file_lock:
            self._log_file_handle.write(event.to_json() + "\n")
            self._log_file_handle.flush()

    def _timestamp(self) -> str:
        return datetime.now().isoformat()

    def search_started(self, query: str) -> None:
        self.log_event(
            LogEvent(
                event_type="SEARCH_STARTED",
                timestamp=self._timestamp(),
                data={"query": query[:200]},
            )
        )
        self.console.debug(f"Search {_c('query')}{query[:80]!r}{_reset()}")

    def search_branch_failed(self, category: str, reason: str) -> None:
        self.log_event(
            LogEvent(
                event_type="SEARCH_BRANCH_FAILED",
                timestamp=self._timestamp(),
                data={"category": category, "reason": reason[:500]},
            )
        )
        self.console.warning(
            f"⚠️ {_c('fail')}[{category}]{_reset()} lookup failed, showing no results: "
            f"{_short_reason(reason)}"
        )

    def search_finished(self, query: str, counts: dict[str, int], duration_seconds: float) -> None:
        self.log_event(
            LogEvent(
                event_type="SEARCH_FINISHED",
                timestamp=self._timestamp(),
                data={
                    "query": query[:200],
                    "counts": counts,
                    "duration_seconds": round(duration_seconds, 3),
                },
            )
        )
        summary = ", ".join(f"{k}={v}" for k, v in counts.items())
        dur = f"{_c('duration')}{_format_duration(duration_seconds)}{_reset()}"
        self.console.info(f"{_c('ok')}✓ Search{_reset()} {query[:80]!r}  {summary}  in {dur}")

    def warning(self, message: str) -> None:
        self.log_event(
            LogEvent(
                event_type="WARNING",
                timestamp=self._timestamp(),
                data={"message": message[:500]},
            )
        )
        self.console.warning(f"⚠️ {message}")


logger = ConsoleLogger()
