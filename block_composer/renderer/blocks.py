"""
Renderers par type de bloc — (props, theme) → HTML.

Un renderer ne lit que ses props. Une prop absente ou mal formée donne un
placeholder pour ce champ, jamais une exception : les helpers _s/_items/_sub
absorbent les formes inattendues.

Les variantes éditables (hero, testimonial, features, cta, gallery, video,
audio, card) rendent le même HTML avec des champs contenteditable.
"""
import html
import math
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List

from ..theme import Theme

RENDERERS: Dict[str, Callable[[Dict[str, Any], Theme], str]] = {}
EDITABLE_RENDERERS: Dict[str, Callable[[Dict[str, Any], Theme], str]] = {}


def renderer(block_type: str):
    def register(fn):
        RENDERERS[block_type] = fn
        return fn
    return register


def editable_renderer(block_type: str):
    def register(fn):
        EDITABLE_RENDERERS[block_type] = fn
        return fn
    return register


# ── Helpers ─────────────────────────────────────────────────────────────────

def _esc(value: Any) -> str:
    return html.escape(str(value)) if value is not None else ""


def _s(data: Any, key: str, default: str = "") -> str:
    """Valeur scalaire échappée ; default si absente ou non scalaire."""
    value = data.get(key, default) if isinstance(data, dict) else default
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        value = default
    return _esc(value)


def _items(data: Any, key: str) -> List[dict]:
    value = data.get(key) if isinstance(data, dict) else None
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _strings(data: Any, key: str) -> List[str]:
    value = data.get(key) if isinstance(data, dict) else None
    if not isinstance(value, list):
        return []
    return [_esc(v) for v in value if isinstance(v, (str, int, float))]


def _sub(data: Any, key: str) -> dict:
    value = data.get(key) if isinstance(data, dict) else None
    return value if isinstance(value, dict) else {}


def _num(value: Any, default: float = 0.0) -> float:
    if isinstance(value, bool):
        return default
    try:
        out = float(value)
    except (TypeError, ValueError):
        return default
    return out if math.isfinite(out) else default


def _int(value: Any, default: int = 0, lo: int = 1, hi: int = 6) -> int:
    return max(lo, min(hi, int(_num(value, default))))


def _flag(data: Any, key: str, default: bool = False) -> bool:
    value = data.get(key, default) if isinstance(data, dict) else default
    return value if isinstance(value, bool) else default


def _missing(field: str) -> str:
    return f'<span class="field-missing" data-field="{_esc(field)}">{_esc(field)} ?</span>'


def _img(src: str, alt: str = "", cls: str = "") -> str:
    if not src:
        return f'<div class="img-placeholder {cls}"></div>'
    return f'<img src="{src}" alt="{alt}" class="{cls}" loading="lazy">'


def _price(value: Any, currency: str = "$") -> str:
    if isinstance(value, str):
        return _esc(value)
    return f"{_esc(currency)}{_num(value):.2f}"


def _stars(rating: Any) -> str:
    full = int(round(max(0.0, min(5.0, _num(rating)))))
    return f'<span class="stars" aria-label="{full}/5">{"★" * full}{"☆" * (5 - full)}</span>'


def _ed(editable: bool, field: str) -> str:
    return f' contenteditable="true" data-field="{field}"' if editable else ""


def _btn(text: str, href: str, theme: Theme, variant: str = "solid") -> str:
    if not text:
        return ""
    style = (f"background:{theme.primary_color};color:#fff" if variant == "solid"
             else f"border:2px solid {theme.primary_color};color:{theme.primary_color}")
    return f'<a href="{href or "#"}" class="btn btn--{_esc(variant)}" style="{style}">{text}</a>'


def _parse_date(value: Any):
    if not isinstance(value, str) or not value:
        return None
    try:
        stamp = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    return stamp if stamp.tzinfo else stamp.replace(tzinfo=timezone.utc)


def _remaining(target) -> Dict[str, int]:
    seconds = max(0, int((target - datetime.now(timezone.utc)).total_seconds())) if target else 0
    return {
        "days": seconds // 86400,
        "hours": seconds % 86400 // 3600,
        "minutes": seconds % 3600 // 60,
        "seconds": seconds % 60,
    }


# ── Médias ──────────────────────────────────────────────────────────────────

def _audio(p: dict, theme: Theme, editable: bool = False) -> str:
    src = _s(p, "audioUrl")
    player = (f'<audio controls src="{src}" class="audio__player"></audio>'
              if src else '<div class="audio__empty">No audio file</div>')
    return f"""<div class="audio">
  {_img(_s(p, "albumArt"), _s(p, "title"), "audio__art")}
  <div class="audio__meta">
    <h3 class="audio__title"{_ed(editable, "title")}>{_s(p, "title") or _missing("title")}</h3>
    <p class="audio__artist" style="color:{theme.accent_color}"{_ed(editable, "artist")}>{_s(p, "artist")}</p>
  </div>
  {player}
</div>"""


def _video(p: dict, theme: Theme, editable: bool = False) -> str:
    src = _s(p, "videoUrl")
    if src:
        media = f'<video controls src="{src}" poster="{_s(p, "posterUrl")}" class="video__player"></video>'
    else:
        media = f'<div class="video__poster">{_img(_s(p, "posterUrl"), _s(p, "title"))}</div>'
    return f"""<div class="video">
  {media}
  <h3 class="video__title"{_ed(editable, "title")}>{_s(p, "title")}</h3>
</div>"""


def _gallery(p: dict, theme: Theme, editable: bool = False) -> str:
    columns = _int(p.get("columns"), 3)
    figures = "".join(
        f'<figure class="gallery__item">{_img(_s(img, "src"), _s(img, "caption"))}'
        f'<figcaption{_ed(editable, f"images.{i}.caption")}>{_s(img, "caption")}</figcaption></figure>'
        for i, img in enumerate(_items(p, "images"))
    )
    return (f'<div class="gallery gallery--{_s(p, "layout", "grid")}" '
            f'style="grid-template-columns:repeat({columns},1fr)">{figures or _missing("images")}</div>')


@renderer("audio")
def render_audio(props, theme):
    return _audio(props, theme)


@editable_renderer("audio")
def render_audio_editable(props, theme):
    return _audio(props, theme, editable=True)


@renderer("video")
def render_video(props, theme):
    return _video(props, theme)


@editable_renderer("video")
def render_video_editable(props, theme):
    return _video(props, theme, editable=True)


@renderer("gallery")
def render_gallery(props, theme):
    return _gallery(props, theme)


@editable_renderer("gallery")
def render_gallery_editable(props, theme):
    return _gallery(props, theme, editable=True)


# ── Contenu ─────────────────────────────────────────────────────────────────

@renderer("button")
def render_button(p, theme):
    icon = _s(p, "icon")
    text = _s(p, "text") or _missing("text")
    label = f"{icon} {text}" if icon and _s(p, "iconPosition", "left") == "left" else (
        f"{text} {icon}" if icon else text)
    return (f'<div class="button-block button-block--{_s(p, "size", "medium")}">'
            f'{_btn(label, _s(p, "url", "#"), theme, _s(p, "style", "solid"))}</div>')


def _hero(p: dict, theme: Theme, editable: bool = False) -> str:
    bg = _s(p, "backgroundImage")
    overlay = max(0.0, min(1.0, _num(p.get("overlay"), 0.5)))
    bg_style = f"background-image:url('{bg}')" if bg else f"background:{theme.primary_color}"
    return f"""<section class="hero hero--{_s(p, "alignment", "center")}" style="{bg_style}">
  <div class="hero__overlay" style="opacity:{overlay}"></div>
  <div class="hero__content">
    <h1 class="hero__title"{_ed(editable, "title")}>{_s(p, "title") or _missing("title")}</h1>
    <p class="hero__subtitle"{_ed(editable, "subtitle")}>{_s(p, "subtitle")}</p>
    {_btn(_s(p, "ctaText"), _s(p, "ctaUrl", "#"), theme)}
  </div>
</section>"""


@renderer("hero")
def render_hero(props, theme):
    return _hero(props, theme)


@editable_renderer("hero")
def render_hero_editable(props, theme):
    return _hero(props, theme, editable=True)


def _card(p: dict, theme: Theme, editable: bool = False) -> str:
    return f"""<div class="card card--{_s(p, "variant", "default")}">
  {_img(_s(p, "image"), _s(p, "title"), "card__image")}
  <div class="card__body">
    <h3 class="card__title"{_ed(editable, "title")}>{_s(p, "title") or _missing("title")}</h3>
    <p class="card__description"{_ed(editable, "description")}>{_s(p, "description")}</p>
    {_btn(_s(p, "buttonText"), _s(p, "buttonUrl", "#"), theme, "outline")}
  </div>
</div>"""


@renderer("card")
def render_card(props, theme):
    return _card(props, theme)


@editable_renderer("card")
def render_card_editable(props, theme):
    return _card(props, theme, editable=True)


def _testimonial(p: dict, theme: Theme, editable: bool = False) -> str:
    return f"""<blockquote class="testimonial">
  {_stars(p.get("rating", 5))}
  <p class="testimonial__quote"{_ed(editable, "quote")}>{_s(p, "quote") or _missing("quote")}</p>
  <footer class="testimonial__author">
    {_img(_s(p, "avatar"), _s(p, "author"), "testimonial__avatar")}
    <cite{_ed(editable, "author")}>{_s(p, "author")}</cite>
    <span class="testimonial__role"{_ed(editable, "role")}>{_s(p, "role")}</span>
  </footer>
</blockquote>"""


@renderer("testimonial")
def render_testimonial(props, theme):
    return _testimonial(props, theme)


@editable_renderer("testimonial")
def render_testimonial_editable(props, theme):
    return _testimonial(props, theme, editable=True)


def _cta(p: dict, theme: Theme, editable: bool = False) -> str:
    color = _s(p, "backgroundColor") or theme.primary_color
    if _s(p, "backgroundType", "gradient") == "gradient":
        bg = f"background:linear-gradient(135deg, {color}, {theme.secondary_color})"
    else:
        bg = f"background:{color}"
    heading = _s(p, "heading") or _s(p, "title") or _missing("heading")
    return f"""<section class="cta" style="{bg}">
  <h2 class="cta__heading"{_ed(editable, "heading")}>{heading}</h2>
  <p class="cta__description"{_ed(editable, "description")}>{_s(p, "description")}</p>
  <a href="{_s(p, "buttonUrl", "#")}" class="btn btn--light">{_s(p, "buttonText")}</a>
</section>"""


@renderer("cta")
def render_cta(props, theme):
    return _cta(props, theme)


@editable_renderer("cta")
def render_cta_editable(props, theme):
    return _cta(props, theme, editable=True)


def _features(p: dict, theme: Theme, editable: bool = False) -> str:
    columns = _int(p.get("columns"), 3)
    title = _s(p, "title")
    items = "".join(
        f"""<div class="features__item">
  <div class="features__icon">{_s(f, "icon")}</div>
  <h3{_ed(editable, f"features.{i}.title")}>{_s(f, "title")}</h3>
  <p{_ed(editable, f"features.{i}.description")}>{_s(f, "description")}</p>
</div>"""
        for i, f in enumerate(_items(p, "features"))
    )
    heading = f'<h2 class="features__title"{_ed(editable, "title")}>{title}</h2>' if title else ""
    return (f'<section class="features">{heading}<div class="features__grid" '
            f'style="grid-template-columns:repeat({columns},1fr)">{items or _missing("features")}</div></section>')


@renderer("features")
def render_features(props, theme):
    return _features(props, theme)


@editable_renderer("features")
def render_features_editable(props, theme):
    return _features(props, theme, editable=True)


@renderer("divider")
def render_divider(p, theme):
    spacing = int(_num(p.get("spacing"), 40))
    color = _s(p, "color") or "var(--color-border)"
    style = _s(p, "style", "solid")
    if style == "line":
        style = "solid"
    return (f'<hr class="divider" style="border:0;border-top:1px {style} {color};'
            f'margin:{spacing}px 0">')


@renderer("pricing")
def render_pricing(p, theme):
    plans = []
    for plan in _items(p, "plans"):
        highlighted = _flag(plan, "highlighted") or _flag(plan, "popular")
        features = "".join(f"<li>{f}</li>" for f in _strings(plan, "features"))
        plans.append(f"""<div class="pricing__plan{" pricing__plan--highlighted" if highlighted else ""}">
  <h3>{_s(plan, "name")}</h3>
  <div class="pricing__price">{_price(plan.get("price", ""))}<span>{_s(plan, "period")}</span></div>
  <ul>{features}</ul>
  {_btn(_s(plan, "buttonText"), "#", theme, "solid" if highlighted else "outline")}
</div>""")
    return f'<section class="pricing">{"".join(plans) or _missing("plans")}</section>'


@renderer("stats")
def render_stats(p, theme):
    items = "".join(
        f'<div class="stats__item"><span class="stats__icon">{_s(s, "icon")}</span>'
        f'<strong style="color:{theme.primary_color}">{_s(s, "value")}</strong>'
        f'<span>{_s(s, "label")}</span></div>'
        for s in _items(p, "stats")
    )
    return f'<section class="stats stats--{_s(p, "style", "cards")}">{items or _missing("stats")}</section>'


@renderer("timeline")
def render_timeline(p, theme):
    items = "".join(
        f'<li class="timeline__item"><time>{_s(i, "date")}</time>'
        f'<h4>{_s(i, "title")}</h4><p>{_s(i, "description")}</p></li>'
        for i in _items(p, "items")
    )
    return f'<ol class="timeline timeline--{_s(p, "style", "alternating")}">{items or _missing("items")}</ol>'


@renderer("accordion")
def render_accordion(p, theme):
    name = "" if _flag(p, "allowMultiple") else ' name="accordion"'
    title = _s(p, "title")
    items = "".join(
        f'<details class="accordion__item"{name}><summary>{_s(i, "question")}</summary>'
        f'<p>{_s(i, "answer")}</p></details>'
        for i in _items(p, "items")
    )
    heading = f"<h2>{title}</h2>" if title else ""
    return f'<section class="accordion">{heading}{items or _missing("items")}</section>'


@renderer("tabs")
def render_tabs(p, theme):
    tabs = _items(p, "tabs")
    if not tabs:
        return f'<div class="tabs">{_missing("tabs")}</div>'
    nav = "".join(
        f'<button class="tabs__tab{" tabs__tab--active" if i == 0 else ""}" data-tab="{i}">{_s(t, "label")}</button>'
        for i, t in enumerate(tabs)
    )
    panels = "".join(
        f'<div class="tabs__panel" data-tab="{i}"{"" if i == 0 else " hidden"}>{_s(t, "content")}</div>'
        for i, t in enumerate(tabs)
    )
    return f'<div class="tabs tabs--{_s(p, "style", "pills")}"><nav>{nav}</nav>{panels}</div>'


@renderer("imageText")
def render_image_text(p, theme):
    position = _s(p, "imagePosition", "left")
    text = _s(p, "description") or _s(p, "text")
    return f"""<section class="image-text image-text--{position} image-text--{_s(p, "style", "rounded")}">
  {_img(_s(p, "image") or _s(p, "imageUrl"), _s(p, "title"), "image-text__image")}
  <div class="image-text__body">
    <h2>{_s(p, "title") or _missing("title")}</h2>
    <p>{text}</p>
    {_btn(_s(p, "buttonText"), _s(p, "buttonUrl", "#"), theme)}
  </div>
</section>"""


@renderer("logoCloud")
def render_logo_cloud(p, theme):
    logos = "".join(_img(_s(logo, "url"), _s(logo, "name"), "logo-cloud__logo") for logo in _items(p, "logos"))
    return (f'<section class="logo-cloud logo-cloud--{_s(p, "style", "grayscale")}">'
            f'<h3>{_s(p, "title")}</h3><div class="logo-cloud__row">{logos}</div></section>')


@renderer("newsletter")
def render_newsletter(p, theme):
    return f"""<section class="newsletter newsletter--{_s(p, "style", "inline")}">
  <h3>{_s(p, "title")}</h3>
  <p>{_s(p, "description")}</p>
  <form class="newsletter__form" onsubmit="event.preventDefault();">
    <input type="email" placeholder="{_s(p, "placeholder", "Enter your email")}" required>
    <button type="submit" style="background:{theme.primary_color}">{_s(p, "buttonText", "Subscribe")}</button>
  </form>
</section>"""


@renderer("socialProof")
def render_social_proof(p, theme):
    avatars = "".join(_img(a, "", "social-proof__avatar") for a in _strings(p, "avatars"))
    reviews = int(_num(p.get("reviewCount")))
    return f"""<div class="social-proof social-proof--{_s(p, "type", "reviews")}">
  <div class="social-proof__avatars">{avatars}</div>
  {_stars(p.get("rating"))} <strong>{_num(p.get("rating")):.1f}</strong>
  <span>({reviews:,} reviews)</span>
  <p>{_s(p, "text")}</p>
</div>"""


@renderer("countdown")
def render_countdown(p, theme):
    target = _parse_date(p.get("targetDate"))
    left = _remaining(target)
    labels = _flag(p, "showLabels", True)
    units = "".join(
        f'<div class="countdown__unit"><span class="countdown__value">{value:02d}</span>'
        f'{f"<span class=countdown__label>{name}</span>" if labels else ""}</div>'
        for name, value in left.items()
    )
    stamp = _esc(target.isoformat()) if target else ""
    return (f'<section class="countdown countdown--{_s(p, "style", "cards")}" data-target="{stamp}">'
            f'<h3>{_s(p, "title")}</h3><div class="countdown__units">{units}</div></section>')


# ── Structure ───────────────────────────────────────────────────────────────

@renderer("row")
def render_row(p, theme):
    # Blocs imbriqués : rendus par le dispatcher dans le contexte du parent
    # (import local, cycle de modules)
    from .dispatcher import render_nested
    from ..blocks.models import Block

    cols = []
    for ci, col in enumerate(_items(p, "columns")):
        width = _sub(col, "width")
        classes = " ".join(
            f"col-{vp}-{_int(width.get(vp), 12, 1, 12)}" for vp in ("desktop", "tablet", "mobile")
        )
        col_id = col.get("id") if isinstance(col.get("id"), str) and col.get("id") else f"col-{ci + 1}"
        children = []
        for i, child in enumerate(_items(col, "blocks")):
            # id stable d'un rendu à l'autre si l'enfant n'en a pas
            data = child if child.get("id") else {**child, "id": f"{col_id}-block-{i + 1}"}
            try:
                children.append(Block.model_validate(data))
            except ValueError:
                children.append(None)
        nested = "".join(n.html for n in render_nested([c for c in children if c is not None], theme))
        if any(c is None for c in children):
            nested += _missing("blocks")
        cols.append(f'<div class="row__col {classes}" data-col="{_s(col, "id")}">{nested}</div>')
    gap = int(_num(p.get("gap"), 24))
    return (f'<div class="row row--v-{_s(p, "verticalAlign", "top")} row--h-{_s(p, "horizontalAlign", "left")}" '
            f'style="gap:{gap}px">{"".join(cols) or _missing("columns")}</div>')


def _nav_href(item: dict) -> str:
    link = _sub(item, "link")
    return _s(link, "url") or _s(link, "pageSlug") or "#"


@renderer("header")
def render_header(p, theme):
    logo = _sub(p, "logo")
    logo_html = (_img(_s(logo, "url"), "Logo", "header__logo") if _s(logo, "url")
                 else f'<span class="header__logo-text">{_s(p, "siteName", "Logo")}</span>')
    nav = []
    for item in _items(p, "navItems"):
        children = "".join(
            f'<li><a href="{_nav_href(c)}">{_s(c, "label")}</a></li>' for c in _items(item, "children")
        )
        sub = f'<ul class="header__submenu">{children}</ul>' if children else ""
        nav.append(f'<li><a href="{_nav_href(item)}">{_s(item, "label")}</a>{sub}</li>')

    top = ""
    if _flag(p, "showTopBar"):
        bar = _sub(p, "topBar")
        top = (f'<div class="header__topbar"><span>{_s(bar, "phone")}</span>'
               f'<span>{_s(bar, "email")}</span></div>')
    cta = _sub(p, "ctaButton")
    cta_html = _btn(_s(cta, "text"), _nav_href(cta), theme, _s(cta, "style", "solid")) if _flag(cta, "show") else ""
    bg = _s(p, "backgroundColor")
    style = f' style="background:{bg}"' if bg else ""
    return f"""<header class="header header--{_s(p, "style", "default")} header--logo-{_s(logo, "position", "left")}"{style}>
  {top}
  <div class="header__inner">
    {logo_html}
    <nav><ul class="header__nav">{"".join(nav)}</ul></nav>
    {cta_html}
  </div>
</header>"""


# ── Boutique ────────────────────────────────────────────────────────────────

def _product_card(product: dict, theme: Theme, show_rating: bool = True,
                  show_badge: bool = True, button: str = "solid") -> str:
    if not product:
        return f'<div class="product">{_missing("product")}</div>'
    sale = product.get("salePrice")
    price = (f'<span class="product__sale">{_price(sale)}</span><s>{_price(product.get("price"))}</s>'
             if sale is not None else _price(product.get("price")))
    badge = f'<span class="product__badge">{_s(product, "badge")}</span>' if show_badge and _s(product, "badge") else ""
    rating = (f'{_stars(product.get("rating"))}<small>({int(_num(product.get("reviewCount")))})</small>'
              if show_rating else "")
    stock = "" if _flag(product, "inStock", True) else '<span class="product__oos">Out of stock</span>'
    return f"""<div class="product">
  {badge}{_img(_s(product, "image"), _s(product, "title"), "product__image")}
  <h4 class="product__title"><a href="{_s(product, "productUrl", "#")}">{_s(product, "title") or _missing("title")}</a></h4>
  <div class="product__rating">{rating}</div>
  <div class="product__price">{price}</div>{stock}
  {_btn("Add to Cart", "#", theme, button)}
</div>"""


@renderer("productCard")
def render_product_card(p, theme):
    return _product_card(_sub(p, "product"), theme, _flag(p, "showRating", True),
                         _flag(p, "showBadge", True), _s(p, "buttonStyle", "solid"))


@renderer("productGrid")
def render_product_grid(p, theme):
    columns = _int(p.get("columns"), 4)
    cards = "".join(
        _product_card(prod, theme, _flag(p, "showRating", True), True, _s(p, "buttonStyle", "solid"))
        for prod in _items(p, "products")
    )
    return (f'<div class="product-grid" style="grid-template-columns:repeat({columns},1fr)">'
            f'{cards or _missing("products")}</div>')


@renderer("featuredProduct")
def render_featured_product(p, theme):
    product = _sub(p, "product")
    return f"""<section class="featured-product featured-product--{_s(p, "layout", "left")}">
  {_img(_s(product, "image"), _s(product, "title"), "featured-product__image")}
  <div class="featured-product__body">
    {_product_card(product, theme)}
    <p>{_s(product, "description")}</p>
  </div>
</section>"""


@renderer("productCarousel")
def render_product_carousel(p, theme):
    slides = "".join(f'<div class="carousel__slide">{_product_card(prod, theme)}</div>'
                     for prod in _items(p, "products"))
    arrows = ('<button class="carousel__prev" aria-label="Previous">‹</button>'
              '<button class="carousel__next" aria-label="Next">›</button>') if _flag(p, "showArrows", True) else ""
    autoplay = "true" if _flag(p, "autoPlay") else "false"
    return (f'<div class="carousel" data-autoplay="{autoplay}">{arrows}'
            f'<div class="carousel__track">{slides or _missing("products")}</div></div>')


@renderer("productCategories")
def render_product_categories(p, theme):
    columns = _int(p.get("columns"), 4)
    cats = "".join(
        f'<a class="category" href="/shop/{_s(c, "slug")}">{_img(_s(c, "image"), _s(c, "name"))}'
        f'<span class="category__name">{_s(c, "name")}</span>'
        f'<small>{int(_num(c.get("productCount")))} products</small></a>'
        for c in _items(p, "categories")
    )
    return (f'<div class="categories categories--{_s(p, "style", "overlay")}" '
            f'style="grid-template-columns:repeat({columns},1fr)">{cats or _missing("categories")}</div>')


@renderer("productFilter")
def render_product_filter(p, theme):
    parts = []
    if _flag(p, "showPriceRange", True):
        lo, hi = int(_num(p.get("priceMin"))), int(_num(p.get("priceMax"), 500))
        parts.append(f'<fieldset><legend>Price</legend><input type="range" min="{lo}" max="{hi}" value="{hi}">'
                     f'<output>${lo} – ${hi}</output></fieldset>')
    if _flag(p, "showCategories", True):
        boxes = "".join(f'<label><input type="checkbox" value="{c}"> {c}</label>' for c in _strings(p, "categories"))
        parts.append(f"<fieldset><legend>Categories</legend>{boxes}</fieldset>")
    if _flag(p, "showRating", True):
        parts.append('<fieldset><legend>Rating</legend>'
                     + "".join(f'<label><input type="radio" name="rating" value="{r}"> {r}+ ★</label>' for r in (4, 3, 2))
                     + "</fieldset>")
    if _flag(p, "showSort", True):
        parts.append('<select class="filter__sort"><option>Featured</option><option>Price: Low to High</option>'
                     '<option>Price: High to Low</option><option>Newest</option></select>')
    return f'<aside class="product-filter">{"".join(parts)}</aside>'


def _cart_lines(cart: dict) -> str:
    currency = _s(cart, "currency", "$")
    return "".join(
        f'<li class="cart__item">{_img(_s(i, "image"), _s(i, "title"), "cart__thumb")}'
        f'<span>{_s(i, "title")}</span><small>{_s(i, "variant")}</small>'
        f'<span>× {int(_num(i.get("quantity"), 1))}</span>'
        f'<span>{_price(_num(i.get("price")) * _num(i.get("quantity"), 1), currency)}</span></li>'
        for i in _items(cart, "items")
    )


def _cart_totals(cart: dict) -> str:
    currency = _s(cart, "currency", "$")
    rows = [("Subtotal", cart.get("subtotal")), ("Tax", cart.get("tax"))]
    shipping = _num(cart.get("shipping"))
    rows.append(("Shipping", "Free" if shipping == 0 else shipping))
    if _num(cart.get("discount")):
        rows.append(("Discount", f"-{_price(cart.get('discount'), currency)}"))
    rows.append(("Total", cart.get("total")))
    return "".join(
        f"<dt>{label}</dt><dd>{_esc(v) if isinstance(v, str) else _price(v, currency)}</dd>"
        for label, v in rows
    )


@renderer("shoppingCart")
def render_shopping_cart(p, theme):
    cart = _sub(p, "cart")
    if not cart:
        return f'<div class="cart">{_missing("cart")}</div>'
    checkout = _btn("Checkout", "/checkout", theme) if _flag(p, "showCheckoutButton", True) else ""
    return (f'<div class="cart cart--{_s(p, "style", "full")}"><ul>{_cart_lines(cart)}</ul>'
            f'<dl class="cart__totals">{_cart_totals(cart)}</dl>{checkout}</div>')


@renderer("checkoutSummary")
def render_checkout_summary(p, theme):
    cart = _sub(p, "cart")
    if not cart:
        return f'<div class="checkout-summary">{_missing("cart")}</div>'
    items = f"<ul>{_cart_lines(cart)}</ul>" if _flag(p, "showItems", True) else ""
    coupon = ('<form class="checkout-summary__coupon" onsubmit="event.preventDefault();">'
              '<input placeholder="Coupon code"><button>Apply</button></form>') if _flag(p, "showCoupon", True) else ""
    return (f'<div class="checkout-summary"><h3>Order Summary</h3>{items}{coupon}'
            f'<dl class="cart__totals">{_cart_totals(cart)}</dl></div>')


@renderer("saleBanner")
def render_sale_banner(p, theme):
    bg = _s(p, "backgroundColor") or "#DC2626"
    code = _s(p, "discountCode")
    end = _parse_date(p.get("endDate"))
    left = _remaining(end)
    timer = (f'<div class="sale-banner__timer">{left["days"]}d {left["hours"]}h {left["minutes"]}m</div>'
             if end else "")
    code_html = f'<code class="sale-banner__code">{code}</code>' if code else ""
    return f"""<section class="sale-banner sale-banner--{_s(p, "style", "full")}" style="background:{bg}">
  <h2>{_s(p, "title") or _missing("title")}</h2>
  <p>{_s(p, "subtitle")}</p>
  <strong>{_s(p, "discountText")}</strong>{code_html}{timer}
  <a href="{_s(p, "ctaUrl", "#")}" class="btn btn--light">{_s(p, "ctaText")}</a>
</section>"""


# ── Cours / LMS ─────────────────────────────────────────────────────────────

def _course_card(course: dict, theme: Theme, instructor: bool = True,
                 price: bool = True, rating: bool = True) -> str:
    if not course:
        return f'<div class="course">{_missing("course")}</div>'
    sale = course.get("salePrice")
    price_html = ""
    if price:
        price_html = (f'<span class="course__price">{_price(sale)}</span> <s>{_price(course.get("price"))}</s>'
                      if sale is not None else f'<span class="course__price">{_price(course.get("price"))}</span>')
    tutor = (f'<div class="course__instructor">{_img(_s(course, "instructorImage"), "", "avatar")}'
               f'{_s(course, "instructor")}</div>') if instructor else ""
    stars = (f'{_stars(course.get("rating"))}<small>({int(_num(course.get("reviewCount"))):,})</small>'
             if rating else "")
    return f"""<article class="course course--{_s(course, "level", "beginner")}">
  {_img(_s(course, "image"), _s(course, "title"), "course__image")}
  <span class="course__level">{_s(course, "level")}</span>
  <h4><a href="{_s(course, "courseUrl", "#")}">{_s(course, "title") or _missing("title")}</a></h4>
  {tutor}
  <div class="course__meta">{_s(course, "duration")} · {int(_num(course.get("lessonCount")))} lessons</div>
  <div class="course__rating">{stars}</div>
  {price_html}
</article>"""


@renderer("courseCard")
def render_course_card(p, theme):
    return _course_card(_sub(p, "course"), theme, _flag(p, "showInstructor", True),
                        _flag(p, "showPrice", True), _flag(p, "showRating", True))


@renderer("courseGrid")
def render_course_grid(p, theme):
    columns = _int(p.get("columns"), 3)
    cards = "".join(_course_card(c, theme) for c in _items(p, "courses"))
    return (f'<div class="course-grid" style="grid-template-columns:repeat({columns},1fr)">'
            f'{cards or _missing("courses")}</div>')


@renderer("courseCurriculum")
def render_course_curriculum(p, theme):
    modules = []
    open_attr = " open" if _flag(p, "expandedByDefault") else ""
    for m in _items(p, "modules"):
        lessons = _items(m, "lessons")
        meta = []
        if _flag(p, "showLessonCount", True):
            meta.append(f"{len(lessons)} lessons")
        if _flag(p, "showDuration", True) and _s(m, "duration"):
            meta.append(_s(m, "duration"))
        rows = "".join(
            f'<li class="lesson lesson--{_s(lesson, "type", "video")}">{_s(lesson, "title")}'
            f'{" <em>Free</em>" if _flag(lesson, "isFree") else ""}<span>{_s(lesson, "duration")}</span></li>'
            for lesson in lessons
        )
        modules.append(f'<details class="curriculum__module"{open_attr}><summary>{_s(m, "title")}'
                       f'<small>{" · ".join(meta)}</small></summary><ul>{rows}</ul></details>')
    return f'<section class="curriculum">{"".join(modules) or _missing("modules")}</section>'


@renderer("courseProgress")
def render_course_progress(p, theme):
    prog = _sub(p, "progress")
    if not prog:
        return f'<div class="course-progress">{_missing("progress")}</div>'
    pct = max(0, min(100, int(_num(prog.get("progress")))))
    cont = _btn("Continue Learning", f"/courses/{_s(prog, 'courseId')}", theme) if _flag(p, "showContinueButton", True) else ""
    return f"""<div class="course-progress">
  {_img(_s(prog, "courseImage"), _s(prog, "courseTitle"), "course-progress__image")}
  <h4>{_s(prog, "courseTitle")}</h4>
  <div class="progress"><div class="progress__bar" style="width:{pct}%;background:{theme.primary_color}"></div></div>
  <small>{int(_num(prog.get("completedLessons")))}/{int(_num(prog.get("totalLessons")))} lessons · {pct}%</small>
  <p>Last: {_s(prog, "lastAccessedLesson")}</p>
  {cont}
</div>"""


@renderer("courseInstructor")
def render_course_instructor(p, theme):
    ins = _sub(p, "instructor")
    if not ins:
        return f'<div class="instructor">{_missing("instructor")}</div>'
    stats = ""
    if _flag(p, "showStats", True):
        stats = (f'<ul class="instructor__stats"><li>{_num(ins.get("rating")):.1f} rating</li>'
                 f'<li>{int(_num(ins.get("reviewCount"))):,} reviews</li>'
                 f'<li>{int(_num(ins.get("studentCount"))):,} students</li>'
                 f'<li>{int(_num(ins.get("courseCount")))} courses</li></ul>')
    social = ""
    if _flag(p, "showSocial", True):
        social = "".join(
            f'<a href="{_s(s, "url", "#")}" rel="nofollow noopener" target="_blank">{_s(s, "platform")}</a>'
            for s in _items(ins, "socialLinks")
        )
    creds = "".join(f"<li>{c}</li>" for c in _strings(ins, "credentials"))
    return f"""<section class="instructor">
  {_img(_s(ins, "photo"), _s(ins, "name"), "instructor__photo")}
  <h3>{_s(ins, "name") or _missing("name")}</h3>
  <p class="instructor__title">{_s(ins, "title")}</p>
  {stats}
  <p>{_s(ins, "bio")}</p>
  <ul class="instructor__credentials">{creds}</ul>
  <div class="instructor__social">{social}</div>
</section>"""


@renderer("courseCategories")
def render_course_categories(p, theme):
    columns = _int(p.get("columns"), 4)
    cats = "".join(
        f'<a class="course-category" href="/courses/category/{_s(c, "slug")}" '
        f'style="border-color:{_s(c, "color") or theme.primary_color}">'
        f'<span class="course-category__icon">{_s(c, "icon")}</span><strong>{_s(c, "name")}</strong>'
        f'<small>{int(_num(c.get("courseCount")))} courses</small></a>'
        for c in _items(p, "categories")
    )
    return (f'<div class="course-categories course-categories--{_s(p, "style", "cards")}" '
            f'style="grid-template-columns:repeat({columns},1fr)">{cats or _missing("categories")}</div>')
