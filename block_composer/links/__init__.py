"""Liens — modèle (union discriminée), résolution, comportement au clic."""
from .models import (
    LinkKind, LINK_KINDS, LinkBase, LinkDescriptor,
    NoLink, InternalLink, ExternalLink, AnchorLink, ScrollLink, EmailLink,
    PhoneLink, SmsLink, DownloadLink, ModalLink, SocialLink, ScriptLink,
    LINK_KIND_CONFIGS, SOCIAL_PLATFORMS, get_social_platform, parse_link,
)
from .resolver import (
    PLACEHOLDER_HREF, ValidationResult,
    validate, resolve_href, link_attributes, describe, is_active,
)
from .actions import ClickRuntime, ClickOutcome, handle_click, onclick_script

__all__ = [
    # Modèle
    "LinkKind", "LINK_KINDS", "LinkBase", "LinkDescriptor",
    "NoLink", "InternalLink", "ExternalLink", "AnchorLink", "ScrollLink", "EmailLink",
    "PhoneLink", "SmsLink", "DownloadLink", "ModalLink", "SocialLink", "ScriptLink",
    "LINK_KIND_CONFIGS", "SOCIAL_PLATFORMS", "get_social_platform", "parse_link",
    # Résolution
    "PLACEHOLDER_HREF", "ValidationResult",
    "validate", "resolve_href", "link_attributes", "describe", "is_active",
    # Runtime
    "ClickRuntime", "ClickOutcome", "handle_click", "onclick_script",
]
