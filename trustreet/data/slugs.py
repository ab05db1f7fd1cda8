"""Listing URL slugs: address-city-state-zipcode, e.g. 123-main-street-new-york-ny-10001."""

import logging
import re
from dataclasses import dataclass
from urllib.parse import unquote

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


@dataclass(frozen=True)
class ParsedSlug:
    address: str
    city: str
    state: str
    zipcode: str


def url_safe(text: str) -> str:
    """Lowercase, runs of non-alphanumerics collapsed to one hyphen, no edge hyphens."""
    return _NON_ALNUM.sub("-", text.strip().lower()).strip("-")


def generate_listing_slug(address: str, city: str, state: str, zipcode: str) -> str:
    parts = [url_safe(p) for p in (address, city, state, zipcode)]
    return "-".join(p for p in parts if p)


def parse_listing_slug(slug: str) -> ParsedSlug | None:
    """Parse right to left: zipcode, state, city, then everything else is the address.

    Multi-word city names cannot be recovered; the extra words land in the address.
    """
    parts = unquote(slug).split("-")
    if len(parts) < 4:
        logger.warning("Invalid listing slug, expected at least 4 parts: %s", slug)
        return None

    return ParsedSlug(
        address=" ".join(parts[:-3]),
        city=parts[-3],
        state=parts[-2],
        zipcode=parts[-1],
    )
