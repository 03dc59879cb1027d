"""Runtime settings read from the environment.

    RECON_DATA_DIR     directory holding the JSON data files
    RECON_CASH_MODES   comma-separated payment modes for the cash book
    RECON_BANK_MODES   comma-separated payment modes for the bank book
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from recon.domain.service.book_builder import BANK_MODES, CASH_MODES

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    cash_modes: frozenset[str] = CASH_MODES
    bank_modes: frozenset[str] = BANK_MODES


def _modes(raw: str | None, default: frozenset[str]) -> frozenset[str]:
    if not raw:
        return default
    modes = frozenset(m.strip().lower() for m in raw.split(",") if m.strip())
    return modes or default


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    data_dir = env.get("RECON_DATA_DIR")
    return Settings(
        data_dir=Path(data_dir).expanduser() if data_dir else DEFAULT_DATA_DIR,
        cash_modes=_modes(env.get("RECON_CASH_MODES"), CASH_MODES),
        bank_modes=_modes(env.get("RECON_BANK_MODES"), BANK_MODES),
    )
