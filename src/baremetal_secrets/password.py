# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/baremetal_secrets/password.py

from __future__ import annotations

import secrets
import string

from baremetal_secrets.errors import RandomSourceError

PASSWORD_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
PASSWORD_LENGTH = 16


def generate_password(length: int = PASSWORD_LENGTH) -> str:
    """
    Return a random password drawn from [A-Za-z0-9].

    secrets.choice samples through SystemRandom.randbelow, so every symbol
    has probability 1/62. Entropy failures are raised as RandomSourceError.
    """
    if length <= 0:
        raise ValueError(f"Password length must be positive, got {length}")

    try:
        return "".join(secrets.choice(PASSWORD_ALPHABET) for _ in range(length))
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceError(f"Secure random source failed: {exc}") from exc
