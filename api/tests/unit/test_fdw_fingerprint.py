import hashlib
from dataclasses import replace

from app.infrastructure.external.fdw.types import RemoteConnectionConfig, config_hash


BASE = RemoteConnectionConfig(
    server_name="autr_server",
    host="localhost",
    port=5432,
    dbname="autr_db",
    user="postgres",
    password="secret",
)


def test_fingerprint_is_deterministic_sha256_hex() -> None:
    first = BASE.fingerprint()
    second = replace(BASE).fingerprint()

    assert first == second
    assert len(first) == 64
    assert first == config_hash(BASE)


def test_fingerprint_matches_compact_json_payload() -> None:
    payload = '{"host":"localhost","port":5432,"dbname":"autr_db","user":"postgres","password":"secret"}'

    assert BASE.fingerprint() == hashlib.sha256(payload.encode("utf-8")).hexdigest()


def test_fingerprint_changes_when_any_connection_field_changes() -> None:
    original = BASE.fingerprint()

    for change in (
        {"host": "other"},
        {"port": 5433},
        {"dbname": "other_db"},
        {"user": "reader"},
        {"password": "rotated"},
    ):
        assert replace(BASE, **change).fingerprint() != original


def test_fingerprint_ignores_server_name() -> None:
    assert replace(BASE, server_name="another").fingerprint() == BASE.fingerprint()


def test_password_not_in_repr() -> None:
    assert "secret" not in repr(BASE)
