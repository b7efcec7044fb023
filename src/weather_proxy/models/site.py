"""Site shell metadata for the single-page front end."""

from __future__ import annotations

from pydantic import BaseModel, Field

from weather_proxy.config import Settings

FONT_STYLESHEET_URL = (
    "https://fonts.googleapis.com/css2?"
    "family=Inter:ital,opsz,wght@0,14..32,100..900;1,14..32,100..900&display=swap"
)

# Tags rendered as web components rather than framework components
CUSTOM_ELEMENT_PREFIX = "iconify-icon"


class MetaTag(BaseModel):
    """A `<meta>` tag."""

    name: str
    content: str = ""


class LinkTag(BaseModel):
    """A `<link>` tag."""

    rel: str
    href: str
    sizes: str | None = None
    type: str | None = None


class SiteHead(BaseModel):
    """Document head configuration."""

    title_template: str
    html_lang: str = "en"
    meta: list[MetaTag] = Field(default_factory=list)
    link: list[LinkTag] = Field(default_factory=list)

    def links_by_rel(self, rel: str) -> list[LinkTag]:
        return [link for link in self.link if link.rel == rel]


def default_site_head(settings: Settings) -> SiteHead:
    """Build the head for the portfolio shell."""
    return SiteHead(
        title_template=settings.site_title,
        html_lang="en",
        meta=[MetaTag(name="description", content=settings.site_description)],
        link=[
            LinkTag(rel="stylesheet", href=FONT_STYLESHEET_URL),
            LinkTag(rel="icon", href="/favicon.ico", sizes="48x48"),
            LinkTag(rel="apple-touch-icon", href="/apple-touch-icon-180x180.png"),
            LinkTag(
                rel="icon",
                href="/android-chrome-192x192.png",
                sizes="192x192",
                type="image/png",
            ),
            LinkTag(
                rel="icon",
                href="/android-chrome-512x512.png",
                sizes="512x512",
                type="image/png",
            ),
            LinkTag(rel="manifest", href="/site.webmanifest"),
        ],
    )


def is_custom_element(tag: str) -> bool:
    """Check whether a tag should be left to the browser as a custom element."""
    return tag.startswith(CUSTOM_ELEMENT_PREFIX)
