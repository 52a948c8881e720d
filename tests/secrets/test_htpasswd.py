import bcrypt
import pytest

from baremetal_secrets import htpasswd
from baremetal_secrets.errors import HashDerivationError
from baremetal_secrets.htpasswd import (
    auth_config_block,
    hash_password,
    htpasswd_line,
    verify_htpasswd,
)


def test_hash_uses_2y_marker_and_cost_5():
    hashed = hash_password("Abcdef0123456789")
    assert hashed.startswith("$2y$05$")
    assert len(hashed) == 60


def test_hash_still_verifies_with_bcrypt():
    hashed = hash_password("Abcdef0123456789")
    assert bcrypt.checkpw(b"Abcdef0123456789", hashed.encode())
    assert not bcrypt.checkpw(b"wrong", hashed.encode())


@pytest.mark.parametrize("marker", ["a", "b", "x", "y"])
def test_marker_forced_whatever_library_emits(monkeypatch, marker):
    fixed = "$2" + marker + "$05$abcdefghijklmnopqrstuuKBSu3zkC8DMZmQm2V7yXQT3OAx2XKU."

    monkeypatch.setattr(bcrypt, "hashpw", lambda pw, salt: fixed.encode())

    hashed = hash_password("whatever")
    assert hashed == "$2y" + fixed[3:]


def test_unexpected_hash_format_is_hash_error(monkeypatch):
    monkeypatch.setattr(bcrypt, "hashpw", lambda pw, salt: b"$1$notbcrypt")
    with pytest.raises(HashDerivationError):
        hash_password("whatever")


def test_bcrypt_failure_is_hash_error(monkeypatch):
    def boom(rounds=12, prefix=b"2b"):
        raise ValueError("invalid rounds")

    monkeypatch.setattr(bcrypt, "gensalt", boom)
    with pytest.raises(HashDerivationError) as ei:
        hash_password("whatever")
    assert isinstance(ei.value.__cause__, ValueError)


def test_cost_constant_matches_htpasswd_default():
    assert htpasswd.HTPASSWD_BCRYPT_COST == 5


def test_htpasswd_line():
    assert htpasswd_line("ironic-user", "$2y$05$xyz") == "ironic-user:$2y$05$xyz"


def test_auth_config_block_exact_text():
    assert auth_config_block("ironic", "ironic-user", "P4ssw0rd") == (
        "[ironic]\n"
        "auth_type = http_basic\n"
        "username = ironic-user\n"
        "password = P4ssw0rd\n"
    )


def test_verify_htpasswd():
    line = htpasswd_line("inspector-user", hash_password("s3cretS3cret0000"))
    assert verify_htpasswd(line, "s3cretS3cret0000")
    assert not verify_htpasswd(line, "s3cretS3cret0001")
    assert not verify_htpasswd("no-separator", "x")
    assert not verify_htpasswd("user:not-a-hash", "x")
