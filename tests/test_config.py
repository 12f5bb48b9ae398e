"""Tests for configuration and logging helpers."""

from pathlib import Path

from dunnet.config import Config
from dunnet.logging import hash_fingerprint_processor


def test_defaults(monkeypatch):
    """Unset variables fall back to the defaults."""
    for name in ("DUNNET_PORT", "DUNNET_SEED", "DUNNET_JSON_LOGS", "DUNNET_HASH_FINGERPRINTS"):
        monkeypatch.delenv(name, raising=False)
    config = Config.from_env()
    assert config.port == 1965
    assert config.seed is None
    assert not config.json_logs
    assert config.hash_fingerprints


def test_from_env(monkeypatch):
    """DUNNET_* variables override the defaults."""
    monkeypatch.setenv("DUNNET_PORT", "1966")
    monkeypatch.setenv("DUNNET_SEED", "42")
    monkeypatch.setenv("DUNNET_JSON_LOGS", "yes")
    monkeypatch.setenv("DUNNET_HASH_FINGERPRINTS", "false")
    monkeypatch.setenv("DUNNET_CERTFILE", "/tmp/cert.pem")
    config = Config.from_env()
    assert config.port == 1966
    assert config.seed == 42
    assert config.json_logs
    assert not config.hash_fingerprints
    assert config.certfile == Path("/tmp/cert.pem")


def test_fingerprints_are_hashed():
    """Fingerprints are hashed before they are logged."""
    event = hash_fingerprint_processor(None, "info", {"fingerprint": "abc", "event": "x"})
    assert "fingerprint" not in event
    assert len(event["fingerprint_hash"]) == 12


def test_unknown_fingerprint_dropped():
    """The "unknown" placeholder is dropped instead of hashed."""
    event = hash_fingerprint_processor(None, "info", {"fingerprint": "unknown"})
    assert event == {}
