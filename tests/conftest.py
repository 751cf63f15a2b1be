"""Configuração do pytest para o conector Braintree."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import BraintreeSettings  # noqa: E402


@pytest.fixture
def settings() -> BraintreeSettings:
    """Settings determinísticas (independentes do ambiente)."""
    return BraintreeSettings(environment="sandbox", strip_nil_elements=True)
