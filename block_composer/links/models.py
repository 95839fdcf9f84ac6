"""
Modèle de lien — union discriminée par `kind`.

Un modèle par intention de lien : les champs d'une variante n'existent que sur
cette variante. Les champs "requis" valent "" par défaut pour qu'un lien à
moitié saisi reste parsable ; l'exigence est portée par validate() et par le
fallback placeholder de resolve_href(), jamais par une exception.
"""
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

LinkKind = Literal[
    "none", "internal", "external", "anchor", "scroll", "email",
    "phone", "sms", "download", "modal", "social", "script",
]

LINK_KINDS: tuple = LinkKind.__args__


class LinkBase(BaseModel):
    """Champs transverses, présents sur toutes les variantes."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    track_click: bool = False
    track_label: Optional[str] = None
    cursor_style: Literal["pointer", "default"] = "pointer"
    hover_effect: Literal["underline", "highlight", "scale", "none"] = "underline"


class NoLink(LinkBase):
    kind: Literal["none"] = "none"


class InternalLink(LinkBase):
    kind: Literal["internal"] = "internal"
    url: str = ""
    page_slug: str = ""
    page_id: Optional[str] = None
    page_title: Optional[str] = None


class ExternalLink(LinkBase):
    kind: Literal["external"] = "external"
    url: str = ""
    new_tab: bool = False
    # None → nofollow implicite ; False → explicitement supprimé
    no_follow: Optional[bool] = None


class AnchorLink(LinkBase):
    kind: Literal["anchor"] = "anchor"
    anchor_id: str = ""


class ScrollLink(LinkBase):
    kind: Literal["scroll"] = "scroll"
    anchor_id: str = ""
    smooth_scroll: bool = True
    # None → offset par défaut des settings (80px)
    scroll_offset_px: Optional[int] = None


class EmailLink(LinkBase):
    kind: Literal["email"] = "email"
    email: str = ""
    subject: Optional[str] = None
    body: Optional[str] = None


class PhoneLink(LinkBase):
    kind: Literal["phone"] = "phone"
    phone: str = ""


class SmsLink(LinkBase):
    kind: Literal["sms"] = "sms"
    phone: str = ""
    body: Optional[str] = None


class DownloadLink(LinkBase):
    kind: Literal["download"] = "download"
    download_url: str = ""
    download_filename: Optional[str] = None


class ModalLink(LinkBase):
    kind: Literal["modal"] = "modal"
    modal_id: str = ""
    action: Literal["open", "close", "toggle"] = "open"


class SocialLink(LinkBase):
    kind: Literal["social"] = "social"
    platform_id: str = ""
    profile_url_or_handle: str = ""


class ScriptLink(LinkBase):
    kind: Literal["script"] = "script"
    script_body: str = ""


# Union discriminée par kind, utilisable comme champ Pydantic
LinkDescriptor = Annotated[
    Union[
        NoLink,
        InternalLink,
        ExternalLink,
        AnchorLink,
        ScrollLink,
        EmailLink,
        PhoneLink,
        SmsLink,
        DownloadLink,
        ModalLink,
        SocialLink,
        ScriptLink,
    ],
    Field(discriminator="kind"),
]

_LINK_ADAPTER = TypeAdapter(LinkDescriptor)


def parse_link(data: Any) -> LinkDescriptor:
    """Instancie la bonne variante depuis un dict (clés camelCase ou snake_case)."""
    if isinstance(data, LinkBase):
        return data
    return _LINK_ADAPTER.validate_python(data)


# ── Catalogue des types de liens ────────────────────────────────────────────

class LinkKindConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: str
    label: str
    icon: str
    description: str
    color: str


LINK_KIND_CONFIGS: Dict[str, LinkKindConfig] = {
    cfg.kind: cfg for cfg in [
        LinkKindConfig(kind="none",     label="No Link",  icon="x",              description="Remove link",     color="gray"),
        LinkKindConfig(kind="internal", label="Page",     icon="home",           description="Internal page",   color="blue"),
        LinkKindConfig(kind="external", label="External", icon="external-link",  description="External URL",    color="green"),
        LinkKindConfig(kind="anchor",   label="Anchor",   icon="hash",           description="Section on page", color="purple"),
        LinkKindConfig(kind="scroll",   label="Scroll To", icon="arrow-down",    description="Smooth scroll",   color="cyan"),
        LinkKindConfig(kind="email",    label="Email",    icon="mail",           description="Send email",      color="yellow"),
        LinkKindConfig(kind="phone",    label="Phone",    icon="phone",          description="Call number",     color="orange"),
        LinkKindConfig(kind="sms",      label="SMS",      icon="message-square", description="Send text",       color="pink"),
        LinkKindConfig(kind="download", label="Download", icon="download",       description="Download file",   color="emerald"),
        LinkKindConfig(kind="modal",    label="Modal",    icon="maximize-2",     description="Open popup",      color="indigo"),
        LinkKindConfig(kind="social",   label="Social",   icon="share-2",        description="Social link",     color="rose"),
        LinkKindConfig(kind="script",   label="Custom",   icon="code",           description="Custom script",   color="amber"),
    ]
}


class SocialPlatform(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    url_prefix: str


SOCIAL_PLATFORMS: List[SocialPlatform] = [
    SocialPlatform(id="facebook",  name="Facebook",  url_prefix="https://facebook.com/"),
    SocialPlatform(id="twitter",   name="Twitter/X", url_prefix="https://twitter.com/"),
    SocialPlatform(id="instagram", name="Instagram", url_prefix="https://instagram.com/"),
    SocialPlatform(id="linkedin",  name="LinkedIn",  url_prefix="https://linkedin.com/in/"),
    SocialPlatform(id="youtube",   name="YouTube",   url_prefix="https://youtube.com/"),
    SocialPlatform(id="tiktok",    name="TikTok",    url_prefix="https://tiktok.com/@"),
    SocialPlatform(id="whatsapp",  name="WhatsApp",  url_prefix="https://wa.me/"),
    SocialPlatform(id="telegram",  name="Telegram",  url_prefix="https://t.me/"),
]


def get_social_platform(platform_id: str) -> Optional[SocialPlatform]:
    return next((p for p in SOCIAL_PLATFORMS if p.id == platform_id), None)
