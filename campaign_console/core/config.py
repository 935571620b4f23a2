"""Configuration from environment variables (.env)."""

import os
from pathlib import Path
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass
class Config:
    project_root: Path
    logs_dir: Path
    backend_url: str
    backend_api_key: str
    backend_timeout_seconds: float
    search_category_limit: int  # Per-category cap for global search
    search_debounce_seconds: float

    @classmethod
    def load(cls) -> "Config":
        project_root = Path(__file__).parent.parent.parent
        return cls(
            project_root=project_root,
            logs_dir=Path(os.getenv("LOGS_DIR", str(project_root / "logs"))),
            backend_url=os.getenv("BACKEND_URL", "").strip().rstrip("/"),
            backend_api_key=os.getenv("BACKEND_API_KEY", "").strip(),
            backend_timeout_seconds=float(os.getenv("BACKEND_TIMEOUT_SECONDS", "10")),
            search_category_limit=int(os.getenv("SEARCH_CATEGORY_LIMIT", "5")),
            search_debounce_seconds=float(os.getenv("SEARCH_DEBOUNCE_SECONDS", "0.3")),
        )

    def validate(self) -> list[str]:
        errors = []
        if not self.backend_url:
            errors.append("BACKEND_URL is not set")
        if not self.backend_api_key:
            errors.append("BACKEND_API_KEY is not set")
        if self.search_category_limit < 1:
            errors.append(f"SEARCH_CATEGORY_LIMIT must be positive, got {self.search_category_limit}")
        return errors


config = Config.load()
