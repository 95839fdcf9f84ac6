"""
Résolution des liens : validation de saisie + génération du href.

validate()      — appelée à chaque frappe, ne lève jamais
resolve_href()  — fonction pure du descripteur, placeholder "#" si incomplet
"""
import re
from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote, urlsplit

from pydantic import BaseModel, ValidationError

from .models import (
    LINK_KIND_CONFIGS, LinkBase, LinkDescriptor, get_social_platform, parse_link,
)

PLACEHOLDER_HREF = "#"

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_PHONE_RE = re.compile(r"^[\d\s\-+()]+$")
_WHITESPACE_RE = re.compile(r"\s")

# encodeURIComponent laisse ces caractères intacts
_URI_COMPONENT_SAFE = "-_.!~*'()"


class ValidationResult(BaseModel):
    valid: bool
    message: Optional[str] = None


_OK = ValidationResult(valid=True)


def validate(raw: Optional[str], kind: str) -> ValidationResult:
    """Valide la saisie du champ principal d'un lien de type `kind`."""
    if kind == "none":
        return _OK
    value = raw or ""
    if not value:
        return ValidationResult(valid=False, message="value is required")

    if kind == "external":
        try:
            parts = urlsplit(value)
        except ValueError:
            return ValidationResult(valid=False, message="Invalid URL format")
        if not parts.scheme or not parts.netloc:
            return ValidationResult(valid=False, message="Invalid URL format")
        if not value.startswith(("http://", "https://")):
            return ValidationResult(valid=False, message="URL must start with http:// or https://")
        return _OK

    if kind == "email":
        if not _EMAIL_RE.fullmatch(value):
            return ValidationResult(valid=False, message="Invalid email address")
        return _OK

    if kind in ("phone", "sms"):
        if not _PHONE_RE.fullmatch(value):
            return ValidationResult(valid=False, message="Invalid phone number")
        return _OK

    if kind == "anchor":
        if not value.startswith("#"):
            return ValidationResult(valid=False, message="Anchor must start with #")
        return _OK

    return _OK


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def _coerce(link: Any) -> Optional[LinkBase]:
    """Accepte un descripteur, un dict brut ou None ; None si inexploitable."""
    if link is None or isinstance(link, LinkBase):
        return link
    try:
        return parse_link(link)
    except ValidationError:
        return None


def resolve_href(link: Any) -> Optional[str]:
    """
    Href final d'un lien.

    Retourne None pour `modal` et `script` : ces liens ne naviguent pas,
    l'appelant déclenche l'action runtime correspondante (voir actions.py).
    """
    desc = _coerce(link)
    if desc is None:
        return PLACEHOLDER_HREF

    kind = desc.kind
    if kind == "internal":
        if desc.page_slug:
            return f"/{desc.page_slug}"
        return desc.url or PLACEHOLDER_HREF
    if kind == "external":
        return desc.url or PLACEHOLDER_HREF
    if kind in ("anchor", "scroll"):
        # Tolère un anchor_id saisi avec son "#"
        anchor = desc.anchor_id.lstrip("#")
        return f"#{anchor}" if anchor else PLACEHOLDER_HREF
    if kind == "email":
        if not desc.email:
            return PLACEHOLDER_HREF
        params = []
        if desc.subject:
            params.append(f"subject={encode_uri_component(desc.subject)}")
        if desc.body:
            params.append(f"body={encode_uri_component(desc.body)}")
        query = f"?{'&'.join(params)}" if params else ""
        return f"mailto:{desc.email}{query}"
    if kind == "phone":
        phone = _WHITESPACE_RE.sub("", desc.phone)
        return f"tel:{phone}" if phone else PLACEHOLDER_HREF
    if kind == "sms":
        phone = _WHITESPACE_RE.sub("", desc.phone)
        if not phone:
            return PLACEHOLDER_HREF
        body = f"?body={encode_uri_component(desc.body)}" if desc.body else ""
        return f"sms:{phone}{body}"
    if kind == "download":
        return desc.download_url or PLACEHOLDER_HREF
    if kind == "social":
        return desc.profile_url_or_handle or PLACEHOLDER_HREF
    if kind in ("modal", "script"):
        return None
    return PLACEHOLDER_HREF


def is_active(link: Any) -> bool:
    """True si le bloc porte un lien autre que `none`."""
    desc = _coerce(link)
    return desc is not None and desc.kind != "none"


def link_attributes(link: Any) -> Dict[str, Any]:
    """
    Attributs <a> pour la navigation standard.

    rel : nofollow si demandé, implicite pour external (sauf no_follow=False)
    et social ; noopener dès qu'on sort du site.
    """
    desc = _coerce(link)
    href = resolve_href(desc)
    attrs: Dict[str, Any] = {"href": href if href is not None else PLACEHOLDER_HREF}
    if desc is None or desc.kind == "none":
        return attrs

    if desc.kind == "external":
        if desc.new_tab:
            attrs["target"] = "_blank"
        attrs["rel"] = "noopener" if desc.no_follow is False else "nofollow noopener"
    elif desc.kind == "social":
        attrs["rel"] = "nofollow noopener"
    elif desc.kind == "download":
        attrs["download"] = desc.download_filename or True

    if desc.track_click:
        attrs["data-track-label"] = desc.track_label or desc.kind
    return attrs


def describe(link: Any) -> Tuple[str, str]:
    """(libellé du type, valeur) — pour l'indicateur de lien et le link manager."""
    desc = _coerce(link)
    if desc is None:
        return LINK_KIND_CONFIGS["none"].label, PLACEHOLDER_HREF
    label = LINK_KIND_CONFIGS[desc.kind].label
    if desc.kind == "modal":
        return label, f"{desc.action} #{desc.modal_id}" if desc.modal_id else desc.action
    if desc.kind == "script":
        return label, "script"
    if desc.kind == "social":
        platform = get_social_platform(desc.platform_id)
        if platform is not None:
            label = f"{label} ({platform.name})"
    return label, resolve_href(desc)
