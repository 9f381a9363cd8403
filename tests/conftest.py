"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator

import pytest

# Set test environment before any engine code reads settings
os.environ["SEOSCORE_ENV"] = "test"


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Clear cached engine settings around each test."""
    from seoscore.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def acme_record() -> dict:
    """Minimal organization with only name, slug and url."""
    return {"name": "Acme", "slug": "acme", "url": "https://acme.com"}


@pytest.fixture
def complete_organization() -> dict:
    """Organization with every scored field filled in."""
    return {
        "name": "Acme",
        "slug": "acme",
        "legalName": "Acme Holdings LLC",
        "url": "https://acme.com",
        "logoMedia": {
            "url": "https://cdn.acme.com/logo.png",
            "altText": "Acme logo",
            "width": 512,
            "height": 512,
        },
        "ogImageMedia": {
            "url": "https://cdn.acme.com/og.jpg",
            "altText": "Acme storefront",
            "width": 1200,
            "height": 630,
        },
        "seoTitle": "Acme - Industrial anvils and rocket skates since 1949",
        "seoDescription": (
            "Acme builds industrial anvils, rocket skates and portable holes for "
            "professionals who need gear that works on the first try, every time, "
            "in every dusty desert."
        ),
        "sameAs": [
            "https://twitter.com/acme",
            "https://linkedin.com/company/acme",
            "https://facebook.com/acme",
        ],
        "businessBrief": "x" * 150,
        "email": "hello@acme.com",
        "phone": "+1 555 0100",
        "gtmId": "GTM-ABC123",
        "foundingDate": "1949-09-17",
        "description": "d" * 120,
        "contactType": "customer service",
        "twitterCard": "summary_large_image",
        "twitterTitle": "Acme anvils",
        "twitterDescription": "Anvils that drop on time.",
        "twitterImageMedia": {"url": "https://cdn.acme.com/tw.jpg", "altText": "Anvil"},
        "canonicalUrl": "https://acme.com/",
        "addressStreet": "1 Desert Road",
        "addressCity": "Phoenix",
        "addressCountry": "US",
        "addressPostalCode": "85001",
    }
