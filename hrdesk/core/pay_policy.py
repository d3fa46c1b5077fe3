from __future__ import annotations

import logging
import os
from decimal import Decimal
from pathlib import Path

import yaml

from hrdesk.domain import DEFAULT_PAY_POLICY, PayPolicy

CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"

logger = logging.getLogger(__name__)


def _policy_path() -> Path:
    env_path = os.getenv("HRDESK_PAY_POLICY")
    if env_path:
        return Path(env_path).expanduser().resolve()
    return CONFIG_DIR / "pay_policy.yaml"


def load_pay_policy(path: Path | None = None) -> PayPolicy:
    """Read pay constants from YAML, falling back to the built-in defaults."""

    path = path or _policy_path()
    if not path.exists():
        logger.warning("pay policy file %s not found, using defaults", path)
        return DEFAULT_PAY_POLICY
    with path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}

    return PayPolicy(
        overtime_multiplier=Decimal(str(data.get("overtime_multiplier", DEFAULT_PAY_POLICY.overtime_multiplier))),
        weeks_per_year=int(data.get("weeks_per_year", DEFAULT_PAY_POLICY.weeks_per_year)),
        hours_per_week=int(data.get("hours_per_week", DEFAULT_PAY_POLICY.hours_per_week)),
        part_time_hours_per_month=int(
            data.get("part_time_hours_per_month", DEFAULT_PAY_POLICY.part_time_hours_per_month)
        ),
    )


def load_sample_roles(path: Path | None = None) -> list[dict]:
    path = path or CONFIG_DIR / "sample_roles.yaml"
    if not path.exists():
        return []
    with path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    return list(data.get("roles", []))
