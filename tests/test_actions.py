"""
Tests comportement au clic
  handle_click(link, runtime, settings) → ClickOutcome
  onclick_script(link, settings)        → str | None
"""
from block_composer.config import Settings
from block_composer.links import (
    ExternalLink, ModalLink, NoLink, ScriptLink, ScrollLink,
    ClickRuntime, handle_click, onclick_script,
)


# ── scroll ────────────────────────────────────────────────────────────────

def test_runtime_fake_satisfies_protocol(make_runtime):
    assert isinstance(make_runtime(), ClickRuntime)


def test_scroll_default_offset(make_runtime):
    rt = make_runtime(elements={"pricing": 500}, scroll_y=100)
    out = handle_click(ScrollLink(anchor_id="pricing"), rt)
    assert rt.calls == [("scroll_to", 520, True)]
    assert out.prevented_default is True
    assert out.href == "#pricing"
    assert out.error is None


def test_scroll_explicit_offset_and_instant(make_runtime):
    rt = make_runtime(elements={"pricing": 500})
    handle_click(ScrollLink(anchor_id="#pricing", scroll_offset_px=0, smooth_scroll=False), rt)
    assert rt.calls == [("scroll_to", 500, False)]


def test_scroll_offset_from_settings(make_runtime):
    rt = make_runtime(elements={"top": 300})
    handle_click(ScrollLink(anchor_id="top"), rt, Settings(default_scroll_offset=20))
    assert rt.calls == [("scroll_to", 280, True)]


def test_scroll_missing_anchor_is_noop(make_runtime):
    rt = make_runtime()
    out = handle_click(ScrollLink(anchor_id="x"), rt)
    assert rt.calls == []
    assert out.error == "anchor not found: x"


# ── modal / navigation ───────────────────────────────────────────────────

def test_modal_calls_runtime(make_runtime):
    rt = make_runtime()
    out = handle_click(ModalLink(modal_id="signup", action="toggle"), rt)
    assert rt.calls == [("modal", "signup", "toggle")]
    assert out.prevented_default is True


def test_modal_without_id(make_runtime):
    rt = make_runtime()
    out = handle_click(ModalLink(), rt)
    assert rt.calls == []
    assert out.error == "modal id missing"


def test_external_navigates_in_new_tab(make_runtime):
    rt = make_runtime()
    out = handle_click(ExternalLink(url="https://x.com", new_tab=True), rt)
    assert rt.calls == [("navigate", "https://x.com", True)]
    assert out.href == "https://x.com"
    assert out.prevented_default is False


def test_email_navigates_same_tab(make_runtime):
    rt = make_runtime()
    handle_click({"kind": "email", "email": "a@b.co"}, rt)
    assert rt.calls == [("navigate", "mailto:a@b.co", False)]


def test_none_does_nothing(make_runtime):
    rt = make_runtime()
    out = handle_click(NoLink(), rt)
    assert rt.calls == []
    assert out.kind == "none"


# ── script ───────────────────────────────────────────────────────────────

def test_script_disabled_by_default(make_runtime):
    rt = make_runtime()
    out = handle_click(ScriptLink(script_body="alert(1)"), rt)
    assert rt.calls == []
    assert out.error == "script links are disabled"


def test_script_enabled_runs_body(make_runtime):
    rt = make_runtime()
    out = handle_click(ScriptLink(script_body="alert(1)"), rt, Settings(allow_scripts=True))
    assert rt.calls == [("run_script", "alert(1)")]
    assert out.error is None


def test_script_enabled_from_env(make_runtime, monkeypatch):
    from block_composer.config import reset_settings
    monkeypatch.setenv("BLOCK_COMPOSER_ALLOW_SCRIPTS", "true")
    reset_settings()
    rt = make_runtime()
    handle_click(ScriptLink(script_body="go()"), rt)
    assert rt.calls == [("run_script", "go()")]


def test_script_failure_is_contained(make_runtime):
    rt = make_runtime(fail_script=True)
    out = handle_click(ScriptLink(script_body="boom()"), rt, Settings(allow_scripts=True))
    assert out.error == "boom"
    assert out.prevented_default is True


# ── onclick_script ───────────────────────────────────────────────────────

def test_onclick_scroll():
    js = onclick_script(ScrollLink(anchor_id="pricing"))
    assert 'document.getElementById("pricing")' in js
    assert "-80," in js
    assert "behavior:'smooth'" in js


def test_onclick_modal_dispatches_event():
    js = onclick_script(ModalLink(modal_id="signup"))
    assert "block-composer:modal" in js
    assert '"id": "signup"' in js


def test_onclick_script_gated():
    link = ScriptLink(script_body="track()")
    assert onclick_script(link) == "event.preventDefault();"
    assert "try{track()}" in onclick_script(link, Settings(allow_scripts=True))


def test_onclick_plain_navigation_has_no_handler():
    assert onclick_script(ExternalLink(url="https://x.com")) is None
    assert onclick_script(None) is None
