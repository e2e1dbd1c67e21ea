"""Pytest configuration and fixtures for Mallu Card tests."""

import pytest

from mallu_card.models.address import Address


# ============================================================================
# ADDRESS FIXTURES
# ============================================================================

@pytest.fixture
def kochi_home():
    """Primary address in Kochi."""
    return Address(identifier="1", address_text="MG Road", city="Kochi",
                   address_category=1, display_name="Arun")


@pytest.fixture
def thrissur_other():
    """Non-primary address in Thrissur."""
    return Address(identifier="2", address_text="Round North", city="Thrissur",
                   address_category=3, display_name="Arun K")


@pytest.fixture
def mumbai_work():
    """Work address outside the region."""
    return Address(identifier="3", address_text="Bandra Kurla Complex", city="Mumbai",
                   address_category=2, display_name="Arun (Office)")


@pytest.fixture
def sample_public_data():
    """publicData payload as delivered by the address proof."""
    return {
        "address": [
            {"id": "1", "address": "MG Road", "city": "Kochi", "addressCategory": 1, "name": "Arun"},
            {"id": "2", "address": "Andheri West", "city": "Mumbai", "addressCategory": 2, "name": "Arun"},
        ]
    }


@pytest.fixture
def sample_proof(sample_public_data):
    """Raw proof object carrying publicData at the root."""
    return {
        "identifier": "0xproof",
        "claimData": {"provider": "http", "context": "{}"},
        "signatures": ["0xsig"],
        "publicData": sample_public_data,
    }


# ============================================================================
# API TEST FIXTURES
# ============================================================================

@pytest.fixture
def api_settings():
    """API settings for tests."""
    from mallu_api.config.settings import APISettings

    return APISettings(
        log_format="text",
        log_level="WARNING",
        access_log=False,
        rate_limit_requests=1000,
        rate_limit_window=60,
    )


@pytest.fixture
def api_client(api_settings):
    """FastAPI test client with lifespan started."""
    from fastapi.testclient import TestClient
    from mallu_api.app.main import create_app

    with TestClient(create_app(api_settings)) as client:
        yield client
