from __future__ import annotations

import os
from pathlib import Path

import pytest

from core.config import AppSettings
from core.logging import configure_logging


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    # AppSettings lee REQCLI_* y un .env en el cwd; los tests no deben heredarlos.
    for key in list(os.environ):
        if key.upper().startswith("REQCLI_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    # Reabre el handler sobre el stderr actual (CliRunner reemplaza el stream).
    configure_logging(AppSettings())
