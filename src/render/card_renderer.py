# src/render/card_renderer.py

"""Pure HTML fragments for product cards and catalog sections.

Nothing in here touches a document or global state: every function maps
its arguments to a markup string, so the same product always renders to
the same card.  Product-supplied text is escaped before insertion.
"""

import re
from html import escape
from urllib.parse import quote

from src.config.settings import Settings
from src.filters.category_organizer import CategoryBucket
from src.models.product import ProductRecord

_ABSOLUTE_PREFIXES = ("http://", "https://", "//", "data:", "/")

_UMLAUTS = {"ä": "ae", "ö": "oe", "ü": "ue", "ß": "ss"}


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` so product text can never become markup."""
    return escape(text, quote=True)


def slugify(text: str) -> str:
    """German-aware URL slug: ``Zelte & Pavillons`` -> ``zelte-pavillons``."""
    lowered = text.lower()
    for umlaut, replacement in _UMLAUTS.items():
        lowered = lowered.replace(umlaut, replacement)
    return re.sub(r"[^a-z0-9]+", "-", lowered).strip("-")


def resolve_image(image: str, base_path: str | None = None) -> str:
    """Absolute URLs/paths pass through, relative ones get the base path."""
    if not image:
        return Settings.PLACEHOLDER_IMAGE
    if image.startswith(_ABSOLUTE_PREFIXES):
        return image
    base = Settings.SITE_BASE_PATH if base_path is None else base_path
    relative = image.removeprefix("./")
    return f"{base.rstrip('/')}/{relative}"


def contact_link(product: ProductRecord) -> str:
    """Messaging link with a prefilled enquiry for this product."""
    text = f"{Settings.CONTACT_MESSAGE_PREFIX}{product.title}"
    if product.price:
        text += f" ({product.price})"
    return (
        f"{Settings.MESSAGING_BASE_URL}/{Settings.WHATSAPP_NUMBER}"
        f"?text={quote(text, safe='')}"
    )


def detail_link(product: ProductRecord) -> str:
    return f"/{quote(product.page_name)}.html"


def _image_fallback_handler() -> str:
    # Clears itself first so a broken placeholder cannot loop
    return (
        "this.onerror=null;"
        f"this.src='{Settings.PLACEHOLDER_IMAGE}';"
        "this.alt='Bild nicht verfügbar';"
    )


def render_card(
    product: ProductRecord, base_path: str | None = None,
) -> str:
    """Render one product as a self-contained ``<article>`` card."""
    title = escape_html(product.title)
    classes = "product-card topseller" if product.topseller else "product-card"

    parts = [f'<article class="{classes}">']
    if product.topseller:
        parts.append('<div class="topseller-label">Topseller</div>')
    parts.append(
        f'<img src="{escape_html(resolve_image(product.image, base_path))}" '
        f'alt="{title}" loading="lazy" '
        f'onerror="{escape_html(_image_fallback_handler())}">'
    )
    parts.append(
        f'<h3 class="product-title"><a href="{escape_html(detail_link(product))}">'
        f"{title}</a></h3>"
    )
    if product.summary:
        parts.append(
            f'<p class="product-note">{escape_html(product.summary)}</p>'
        )
    if product.price:
        parts.append(
            '<p class="product-price"><strong>'
            f"{escape_html(product.price)}</strong></p>"
        )
    parts.append(
        f'<a href="{escape_html(contact_link(product))}" '
        'class="button whatsapp-btn product-whatsapp-btn" '
        'target="_blank" rel="noopener noreferrer" '
        f'aria-label="Per WhatsApp anfragen: {title}">Jetzt anfragen</a>'
    )
    parts.append("</article>")
    return "".join(parts)


def render_section(
    bucket: CategoryBucket, base_path: str | None = None,
) -> str:
    """One category heading followed by its card grid."""
    heading_id = f"cat-{slugify(bucket.name)}"
    cards = "".join(render_card(p, base_path) for p in bucket.products)
    return (
        f'<section class="category-section" aria-labelledby="{heading_id}">'
        f'<h2 id="{heading_id}" class="category-title">'
        f"{escape_html(bucket.name)}</h2>"
        f'<div class="product-grid">{cards}</div>'
        "</section>"
    )


def render_sections(
    buckets: list[CategoryBucket], base_path: str | None = None,
) -> str:
    return "".join(render_section(b, base_path) for b in buckets)


def filter_page_name(category: str | None) -> str:
    """Static page for one filter option; ``None`` is the landing page."""
    template = Settings.PAGE_TEMPLATE
    if category is None:
        return template.name
    return f"{template.stem}-{slugify(category) or 'kategorie'}{template.suffix}"


def render_filter_controls(
    options: list[tuple[str | None, str, int]], selected: str | None,
) -> str:
    """Filter links from ``(value, label, count)`` options.

    Each option links to its own pre-rendered page, so the controls
    work on a static site without any script.
    """
    links: list[str] = []
    for value, label, count in options:
        active = value == selected
        css = "filter-btn active" if active else "filter-btn"
        text = escape_html(label)
        if value is not None:
            text += f" ({count})"
        current = ' aria-current="page"' if active else ""
        links.append(
            f'<a class="{css}" href="{escape_html(filter_page_name(value))}" '
            f'data-category="{escape_html(value or "")}"{current}>{text}</a>'
        )
    return "".join(links)


def render_search_summary(query: str) -> str:
    return (
        '<p class="search-summary">'
        f"Suchergebnisse für „{escape_html(query)}“</p>"
    )


def render_loading() -> str:
    return (
        '<div class="catalog-loading" role="status">'
        f"{escape_html(Settings.LOADING_MESSAGE)}</div>"
    )


def render_advisory(message: str) -> str:
    return (
        '<div class="catalog-advisory" role="status">'
        f"<span>{escape_html(message)}</span>"
        '<button type="button" class="catalog-advisory-close" '
        "aria-label=\"Hinweis schließen\" "
        "onclick=\"this.parentElement.remove();\">&times;</button>"
        "</div>"
    )


def render_error(message: str) -> str:
    return (
        '<div class="catalog-error" role="alert">'
        f"<strong>{escape_html(message)}</strong></div>"
    )


def render_empty(message: str) -> str:
    return f'<div class="catalog-empty"><p>{escape_html(message)}</p></div>'
