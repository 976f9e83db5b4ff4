"""Tests for the in-memory credential store."""

from pydantic import SecretStr

from lichess_mcp.foundation.credentials import CredentialStore


def test_starts_empty() -> None:
    store = CredentialStore()
    assert store.get() is None
    assert not store.is_set


def test_set_replaces_unconditionally() -> None:
    store = CredentialStore("lip_first")
    store.set("lip_second")
    assert store.get() == "lip_second"


def test_accepts_secret_str() -> None:
    store = CredentialStore(SecretStr("lip_secret"))
    assert store.get() == "lip_secret"


def test_clear() -> None:
    store = CredentialStore("lip_abc")
    store.clear()
    assert store.get() is None


def test_clear_if_matching_token() -> None:
    store = CredentialStore("lip_abc")
    assert store.clear_if("lip_abc") is True
    assert store.get() is None


def test_clear_if_keeps_newer_token() -> None:
    """A token set after the revoke snapshot survives the revoke's clear."""
    store = CredentialStore("lip_old")
    store.set("lip_new")
    assert store.clear_if("lip_old") is False
    assert store.get() == "lip_new"


def test_clear_if_on_empty_store() -> None:
    assert CredentialStore().clear_if("lip_abc") is False


def test_repr_never_shows_token() -> None:
    store = CredentialStore("lip_very_secret")
    assert "lip_very_secret" not in repr(store)
    assert repr(CredentialStore()) == "CredentialStore(token=None)"
