from __future__ import annotations

from userauth.application.services.password_hashing import WerkzeugPasswordHasher


def test_hash_is_salted_and_verifiable() -> None:
    hasher = WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")

    first = hasher.hash("secret1")
    second = hasher.hash("secret1")

    assert first != second
    assert "secret1" not in first
    assert hasher.verify("secret1", first)
    assert hasher.verify("secret1", second)


def test_verify_rejects_wrong_password() -> None:
    hasher = WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")

    assert not hasher.verify("wrong", hasher.hash("secret1"))


def test_verify_rejects_empty_hash() -> None:
    assert not WerkzeugPasswordHasher().verify("secret1", "")
