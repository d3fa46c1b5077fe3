from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path


def _base_root() -> Path:
    env_root = os.getenv("REPORTS_ROOT")
    if env_root:
        return Path(env_root).expanduser().resolve()
    return Path(__file__).resolve().parents[2] / "reports"


def ensure_reports_root() -> Path:
    """Ensure the report output folder exists and return it."""

    root = _base_root()
    root.mkdir(parents=True, exist_ok=True)
    return root


def report_path(name: str, suffix: str) -> Path:
    """Build a timestamped output path for a generated report."""

    stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%f")
    safe_name = Path(name).name
    return ensure_reports_root() / f"{safe_name}-{stamp}.{suffix}"
