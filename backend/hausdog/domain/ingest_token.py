"""Ingest tokens route inbound emailed documents to the right property.

Format: ``{slug}-{6 hex chars}``, e.g. ``123-main-st-a7b3c9``. The slug is
built from the property address when there is one, otherwise from its name.
"""

import re
import secrets
import unicodedata

MAX_SLUG_LENGTH = 50
_FALLBACK_SLUG = "property"
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """Lowercase ASCII slug: alphanumeric runs joined by single hyphens."""
    ascii_value = (
        unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    )
    return _NON_ALNUM.sub("-", ascii_value.lower()).strip("-")


def generate_ingest_token(address: str | None, property_name: str) -> str:
    """Generate a unique ingest token for a property."""
    slug = slugify(address or property_name)[:MAX_SLUG_LENGTH].rstrip("-")
    if not slug:
        slug = _FALLBACK_SLUG
    return f"{slug}-{secrets.token_hex(3)}"


def build_ingest_email(token: str, domain: str) -> str:
    """Build the full ingest email address from a token."""
    return f"{token}@{domain}"


def extract_ingest_token(email_address: str) -> str | None:
    """Return the token (local part) of an ingest address, or None if malformed.

    Accepts display-name forms such as ``"Home <token@domain>"``.
    """
    match = re.search(r"<([^>]+)>", email_address)
    address = (match.group(1) if match else email_address).strip().lower()
    local, sep, domain = address.partition("@")
    if not sep or not local or not domain:
        return None
    return local
