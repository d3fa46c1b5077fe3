from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd


def write_records(path: Path, rows: Iterable[dict], columns: list[str]) -> Path:
    """Write rows to ``path`` as CSV or XLSX depending on its suffix."""

    df = pd.DataFrame(list(rows), columns=columns)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix == ".xlsx":
        df.to_excel(path, index=False, engine="openpyxl")
    else:
        df.to_csv(path, index=False)
    return path
