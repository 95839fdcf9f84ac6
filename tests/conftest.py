import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from block_composer.config import reset_settings

_ENV_VARS = (
    "BLOCK_COMPOSER_ALLOW_SCRIPTS",
    "BLOCK_COMPOSER_HIDDEN_POLICY",
    "BLOCK_COMPOSER_SCROLL_OFFSET",
    "BLOCK_COMPOSER_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Settings recalculés depuis un environnement vierge pour chaque test."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    yield
    reset_settings()


class FakeRuntime:
    """ClickRuntime en mémoire : enregistre les appels, positions d'éléments fixes."""

    def __init__(self, elements=None, scroll_y=0.0, fail_script=False):
        self.scroll_y = scroll_y
        self.elements = elements or {}
        self.fail_script = fail_script
        self.calls = []

    def navigate(self, href, new_tab=False):
        self.calls.append(("navigate", href, new_tab))

    def element_top(self, element_id):
        return self.elements.get(element_id)

    def scroll_to(self, top, smooth=True):
        self.calls.append(("scroll_to", top, smooth))

    def modal(self, modal_id, action):
        self.calls.append(("modal", modal_id, action))

    def run_script(self, body):
        self.calls.append(("run_script", body))
        if self.fail_script:
            raise RuntimeError("boom")


@pytest.fixture
def make_runtime():
    return FakeRuntime
