from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote imoveis_api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture()
def sample_property() -> dict:
    return {
        "title": "A",
        "address": "X",
        "bedrooms": 2,
        "bathrooms": 1,
        "suites": 0,
        "built_area": 50,
        "total_area": 60,
        "price": 100000,
        "condition": "new",
        "description": "d",
        "cover_image_url": "u",
        "photos_google_drive_link": "l",
    }
