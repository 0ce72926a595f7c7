"""
Smoke tests for the Streamlit studio page.
"""

import pytest
from streamlit.testing.v1 import AppTest

from prompt_store import open_store


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("PROMPT_STORE_PATH", str(tmp_path / "prompts.json"))
    at = AppTest.from_file("../app.py", default_timeout=30)
    return at.run()


class TestStudioPage:
    """End-to-end runs of the Streamlit page against a temporary library."""

    def test_empty_form_shows_hint(self, app):
        assert not app.exception
        assert len(app.code) == 0
        assert "Enter a product name" in app.info[0].value

    def test_template_fills_preview(self, app):
        app.selectbox(key="template_name").set_value("Rolex Submariner")
        app.button(key="apply_template").click().run()

        assert app.text_input(key="product_name").value == "Rolex Submariner"
        preview = app.code[0].value
        assert preview.startswith('Create a cinematic product showcase video for "Rolex Submariner".')
        assert 'TAGLINE INTEGRATION: "A crown for every achievement"' in preview

    def test_save_then_delete(self, app, tmp_path):
        app.text_input(key="product_name").input("Desk Lamp")
        app.text_area(key="features_text").input("Warm glow\nDimmable")
        app.run()
        shown = app.code[0].value

        app.button(key="save_prompt").click().run()

        saved = open_store(tmp_path / "prompts.json").list()
        assert [r.title for r in saved] == ["Desk Lamp"]
        assert saved[0].prompt == shown
        assert saved[0].metadata.features == ("Warm glow", "Dimmable")

        app.button(key=f"delete_{saved[0].id}").click().run()

        assert open_store(tmp_path / "prompts.json").list() == []
