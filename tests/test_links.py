"""Tests liens — validation de saisie, génération du href, attributs <a>."""
import pytest

from block_composer.links import (
    LINK_KINDS, PLACEHOLDER_HREF,
    EmailLink, ExternalLink, InternalLink, ModalLink, NoLink, ScrollLink, SmsLink,
    describe, link_attributes, parse_link, resolve_href, validate,
)


# ── validate ─────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("kind", [k for k in LINK_KINDS if k != "none"])
def test_validate_empty_is_invalid_for_every_kind(kind):
    result = validate("", kind)
    assert result.valid is False
    assert result.message == "value is required"


@pytest.mark.parametrize("raw", ["", "anything", "not a url"])
def test_validate_none_always_valid(raw):
    assert validate(raw, "none").valid is True


@pytest.mark.parametrize("raw", ["https://example.com", "http://x.io/path?q=1"])
def test_validate_external_accepts_http_urls(raw):
    assert validate(raw, "external").valid is True


def test_validate_external_rejects_relative():
    result = validate("example.com", "external")
    assert result.valid is False
    assert result.message == "Invalid URL format"


def test_validate_external_rejects_other_schemes():
    result = validate("ftp://x", "external")
    assert result.valid is False
    assert result.message == "URL must start with http:// or https://"


def test_validate_external_rejects_missing_host():
    assert validate("http://", "external").valid is False


def test_validate_email():
    assert validate("a@b.co", "email").valid is True
    assert validate("a@b", "email").valid is False
    assert validate("a b@c.com", "email").valid is False
    assert validate("", "email").valid is False


def test_validate_email_rejects_trailing_newline():
    assert validate("a@b.co\n", "email").valid is False
    assert validate("a@b.co\nx@y.co", "email").valid is False


@pytest.mark.parametrize("kind", ["phone", "sms"])
def test_validate_phone_and_sms(kind):
    assert validate("+1 (555) 123-4567", kind).valid is True
    assert validate("call me", kind).valid is False


def test_validate_anchor_requires_hash():
    assert validate("#pricing", "anchor").valid is True
    assert validate("pricing", "anchor").message == "Anchor must start with #"


@pytest.mark.parametrize("kind", ["download", "modal", "script", "internal", "social"])
def test_validate_free_text_kinds(kind):
    assert validate("whatever you like", kind).valid is True


# ── parse_link ───────────────────────────────────────────────────────────────

def test_parse_link_camel_case():
    link = parse_link({"kind": "scroll", "anchorId": "pricing", "scrollOffsetPx": 40})
    assert isinstance(link, ScrollLink)
    assert link.anchor_id == "pricing"
    assert link.scroll_offset_px == 40
    assert link.smooth_scroll is True


def test_parse_link_snake_case():
    link = parse_link({"kind": "external", "url": "https://x.com", "new_tab": True})
    assert isinstance(link, ExternalLink)
    assert link.new_tab is True


def test_parse_link_none_ignores_other_fields():
    link = parse_link({"kind": "none", "url": "https://x.com"})
    assert isinstance(link, NoLink)


# ── resolve_href ─────────────────────────────────────────────────────────────

def test_resolve_email_with_subject():
    link = EmailLink(email="x@y.com", subject="Hi There")
    assert resolve_href(link) == "mailto:x@y.com?subject=Hi%20There"


def test_resolve_email_subject_and_body():
    link = EmailLink(email="x@y.com", subject="Hi", body="a&b c")
    assert resolve_href(link) == "mailto:x@y.com?subject=Hi&body=a%26b%20c"


def test_resolve_scroll():
    assert resolve_href(parse_link({"kind": "scroll", "anchorId": "pricing"})) == "#pricing"


def test_resolve_anchor_tolerates_leading_hash():
    assert resolve_href({"kind": "anchor", "anchorId": "#top"}) == "#top"


def test_resolve_none_is_placeholder():
    assert resolve_href(NoLink()) == PLACEHOLDER_HREF
    assert resolve_href({"kind": "none", "url": "https://x.com"}) == PLACEHOLDER_HREF


def test_resolve_internal():
    assert resolve_href(InternalLink(page_slug="about", url="/ignored")) == "/about"
    assert resolve_href(InternalLink(url="/contact")) == "/contact"
    assert resolve_href(InternalLink()) == PLACEHOLDER_HREF


def test_resolve_phone_strips_whitespace():
    assert resolve_href({"kind": "phone", "phone": "+1 555 123 4567"}) == "tel:+15551234567"


def test_resolve_sms_with_body():
    link = SmsLink(phone="+1 555 1234", body="Hello there")
    assert resolve_href(link) == "sms:+15551234?body=Hello%20there"


def test_resolve_social_keeps_raw_profile():
    link = {"kind": "social", "platformId": "twitter", "profileUrlOrHandle": "https://twitter.com/acme"}
    assert resolve_href(link) == "https://twitter.com/acme"


def test_resolve_modal_and_script_have_no_target():
    assert resolve_href(ModalLink(modal_id="signup")) is None
    assert resolve_href({"kind": "script", "scriptBody": "alert(1)"}) is None


@pytest.mark.parametrize("kind", LINK_KINDS)
def test_resolve_never_raises_on_bare_descriptor(kind):
    href = resolve_href({"kind": kind})
    if kind in ("modal", "script"):
        assert href is None
    else:
        assert href == PLACEHOLDER_HREF


@pytest.mark.parametrize("garbage", [None, {}, {"kind": "bogus"}, "string", 42, {"kind": "email", "email": 3.5j}])
def test_resolve_never_raises_on_garbage(garbage):
    assert resolve_href(garbage) == PLACEHOLDER_HREF


# ── link_attributes / describe ───────────────────────────────────────────────

def test_attributes_external_new_tab_implies_nofollow():
    attrs = link_attributes(ExternalLink(url="https://x.com", new_tab=True))
    assert attrs["href"] == "https://x.com"
    assert attrs["target"] == "_blank"
    assert attrs["rel"] == "nofollow noopener"


def test_attributes_external_nofollow_suppressed():
    attrs = link_attributes(ExternalLink(url="https://x.com", no_follow=False))
    assert attrs["rel"] == "noopener"
    assert "target" not in attrs


def test_attributes_social_nofollow():
    attrs = link_attributes({"kind": "social", "platformId": "x", "profileUrlOrHandle": "@acme"})
    assert attrs["rel"] == "nofollow noopener"


def test_attributes_download_and_tracking():
    attrs = link_attributes({
        "kind": "download", "downloadUrl": "/files/guide.pdf",
        "downloadFilename": "guide.pdf", "trackClick": True, "trackLabel": "guide",
    })
    assert attrs["href"] == "/files/guide.pdf"
    assert attrs["download"] == "guide.pdf"
    assert attrs["data-track-label"] == "guide"


def test_attributes_modal_uses_placeholder():
    assert link_attributes(ModalLink(modal_id="m"))["href"] == PLACEHOLDER_HREF


def test_describe():
    assert describe(EmailLink(email="x@y.com")) == ("Email", "mailto:x@y.com")
    assert describe(ModalLink(modal_id="signup", action="toggle")) == ("Modal", "toggle #signup")
    label, _ = describe({"kind": "social", "platformId": "linkedin", "profileUrlOrHandle": "x"})
    assert label == "Social (LinkedIn)"
