from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP = str(Path(__file__).resolve().parents[1] / "app.py")


@pytest.fixture
def app(monkeypatch):
    monkeypatch.delenv("EMI_DEFAULT_TAX_SLAB", raising=False)
    at = AppTest.from_file(APP, default_timeout=30)
    return at.run()


def test_page_renders_default_loan(app):
    assert not app.exception
    assert app.metric[0].value == "₹43,391"


def test_range_help_only_on_amount_inputs(app):
    assert not app.number_input(key="rate").help
    assert app.number_input(key="loan").help.startswith("Range")


def test_start_year_appears_once_prepaying(app):
    assert len(app.selectbox) == 1

    app.number_input(key="monthly").set_value(5_000).run()

    assert len(app.selectbox) == 2
    assert app.success


def test_tax_caption_shows_yearly_ceiling(app):
    assert any("₹1,05,000" in c.value for c in app.caption)
