"""Unit test configuration - in-memory store and mocked JWT validation"""

import os
from unittest.mock import Mock, patch

import pytest

# Set env vars BEFORE importing mediahub.main / mediahub.auth
# (both read configuration at module level, on import)
os.environ.setdefault("STORE_TYPE", "memory")
os.environ.setdefault("AUDIENCE", "test-audience.apps.googleusercontent.com")
os.environ.setdefault("JWKS_URL", "https://www.googleapis.com/oauth2/v3/certs")
os.environ.setdefault("ISSUER", "https://accounts.google.com")

from mediahub.listing import ListingEngine
from mediahub.stores import InMemoryDocumentStore

from listing_fixtures import ALICE, BOB, make_video


@pytest.fixture
def users():
    return [
        {"id": ALICE, "fullName": "Alice Doe", "username": "alice", "avatar": "https://cdn.example.com/a.png",
         "email": "alice@example.com", "password": "hashed"},
        {"id": BOB, "fullName": "Bob Roe", "username": "bob", "avatar": "https://cdn.example.com/b.png",
         "email": "bob@example.com", "password": "hashed"},
    ]


@pytest.fixture
def twelve_videos():
    """12 published videos + 1 unpublished, created one minute apart"""
    videos = [make_video(n, f"Video number {n}") for n in range(1, 13)]
    videos.append(make_video(99, "Draft video", published=False))
    return videos


@pytest.fixture
def store(users, twelve_videos):
    return InMemoryDocumentStore({"users": users, "videos": twelve_videos, "comments": []})


@pytest.fixture
def engine(store):
    return ListingEngine(store=store, user_lookup=store)


@pytest.fixture(autouse=True)
def mock_jwks_validation():
    """
    Mock PyJWKClient and jwt.decode for each unit test.

    Unit tests never fetch real JWKS keys; tokens are simple HS256 tokens
    decoded without signature verification.
    """
    import jwt as pyjwt
    original_jwt_decode = pyjwt.decode

    with patch("mediahub.auth.PyJWKClient") as mock_jwks_client, \
         patch("mediahub.auth.jwt.decode") as mock_jwt_decode:

        mock_signing_key = Mock()
        mock_signing_key.key = "test_public_key"
        mock_client_instance = Mock()
        mock_client_instance.get_signing_key_from_jwt.return_value = mock_signing_key
        mock_jwks_client.return_value = mock_client_instance

        def decode_side_effect(token, *args, **kwargs):
            # Use ORIGINAL jwt.decode (not mocked) to avoid recursion
            return original_jwt_decode(token, options={"verify_signature": False})

        mock_jwt_decode.side_effect = decode_side_effect

        yield
