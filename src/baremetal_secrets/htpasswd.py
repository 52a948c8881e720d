# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/baremetal_secrets/htpasswd.py

from __future__ import annotations

import bcrypt

from baremetal_secrets.errors import HashDerivationError

# htpasswd -B default cost
HTPASSWD_BCRYPT_COST = 5
HTPASSWD_BCRYPT_VERSION = "y"


def _force_version(hashed: str) -> str:
    """
    Rebuild a bcrypt hash with the "$2y$" marker.

    Ironic's basic auth checker expects what htpasswd emits ($2y$). The
    2a/2b/2y variants only differ for passwords with high-bit bytes, and
    generated passwords are plain ASCII.
    """
    if len(hashed) < 4 or not hashed.startswith("$2") or hashed[3] != "$":
        raise HashDerivationError(f"Unexpected bcrypt hash format: {hashed[:4]!r}")
    return hashed[:2] + HTPASSWD_BCRYPT_VERSION + hashed[3:]


def hash_password(password: str, *, cost: int = HTPASSWD_BCRYPT_COST) -> str:
    """Return the htpasswd-style bcrypt hash ($2y$05$...) of *password*."""
    try:
        salt = bcrypt.gensalt(rounds=cost)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt).decode("ascii")
    except (ValueError, TypeError) as exc:
        raise HashDerivationError(f"bcrypt hashing failed: {exc}") from exc
    return _force_version(hashed)


def htpasswd_line(username: str, hashed: str) -> str:
    return f"{username}:{hashed}"


def auth_config_block(section: str, username: str, password: str) -> str:
    """INI block read by Ironic's http_basic auth config loader."""
    return (
        f"[{section}]\n"
        "auth_type = http_basic\n"
        f"username = {username}\n"
        f"password = {password}\n"
    )


def verify_htpasswd(line: str, password: str) -> bool:
    """Check a "user:hash" htpasswd line against a plaintext password."""
    _, sep, hashed = line.partition(":")
    if not sep or not hashed:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("ascii"))
    except ValueError:
        return False
