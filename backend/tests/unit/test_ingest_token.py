"""Unit tests for ingest token generation and parsing."""

import re

from hausdog.domain.ingest_token import (
    MAX_SLUG_LENGTH,
    build_ingest_email,
    extract_ingest_token,
    generate_ingest_token,
    slugify,
)

TOKEN_PATTERN = re.compile(r"^[a-z0-9-]{1,50}-[0-9a-f]{6}$")


def test_token_uses_address_when_present():
    token = generate_ingest_token("123 Main St, Springfield", "Lake House")
    assert token.startswith("123-main-st-springfield-")
    assert TOKEN_PATTERN.match(token)


def test_address_takes_precedence_over_name():
    token = generate_ingest_token("123 Main St", "Home")
    assert TOKEN_PATTERN.match(token)
    assert token.startswith("123-main-st-")
    assert "home" not in token


def test_token_falls_back_to_name():
    assert generate_ingest_token(None, "Lake House").startswith("lake-house-")
    assert generate_ingest_token("", "Lake House").startswith("lake-house-")


def test_token_slug_is_truncated():
    token = generate_ingest_token("x" * 200, "ignored")
    slug, _, suffix = token.rpartition("-")
    assert len(slug) == MAX_SLUG_LENGTH
    assert len(suffix) == 6
    assert TOKEN_PATTERN.match(token)


def test_token_never_has_an_empty_slug():
    token = generate_ingest_token(None, "!!!")
    assert token.startswith("property-")
    assert TOKEN_PATTERN.match(token)


def test_tokens_are_unique_per_call():
    tokens = {generate_ingest_token("1 Elm St", "Home") for _ in range(20)}
    assert len(tokens) == 20


def test_slugify_folds_accents_and_collapses_separators():
    assert slugify("  Café -- Ünïcode  Lane ") == "cafe-unicode-lane"


def test_build_and_extract_ingest_email():
    email = build_ingest_email("lake-house-a7b3c9", "ingest.hausdog.app")
    assert email == "lake-house-a7b3c9@ingest.hausdog.app"
    assert extract_ingest_token(email) == "lake-house-a7b3c9"
    assert extract_ingest_token(f"Lake House <{email}>") == "lake-house-a7b3c9"


def test_extract_rejects_malformed_addresses():
    assert extract_ingest_token("no-at-sign") is None
    assert extract_ingest_token("@ingest.hausdog.app") is None
    assert extract_ingest_token("token@") is None
