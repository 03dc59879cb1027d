from pathlib import Path

from recon.domain.service.book_builder import BANK_MODES, CASH_MODES
from recon.infrastructure.settings import DEFAULT_DATA_DIR, load_settings


def test_defaults():
    settings = load_settings({})
    assert settings.data_dir == DEFAULT_DATA_DIR
    assert settings.cash_modes == CASH_MODES
    assert settings.bank_modes == BANK_MODES


def test_environment_overrides():
    settings = load_settings({
        "RECON_DATA_DIR": "/srv/recon",
        "RECON_CASH_MODES": "Cash, Petty Cash",
        "RECON_BANK_MODES": " , ",
    })
    assert settings.data_dir == Path("/srv/recon")
    assert settings.cash_modes == frozenset({"cash", "petty cash"})
    assert settings.bank_modes == BANK_MODES
