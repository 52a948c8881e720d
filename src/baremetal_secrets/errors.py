# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/baremetal_secrets/errors.py
from __future__ import annotations

from typing import Optional


class SecretsError(RuntimeError):
    """Base class for secret bootstrap failures."""


class RandomSourceError(SecretsError):
    """Raised when the OS entropy source cannot produce random data."""


class HashDerivationError(SecretsError):
    """Raised when the htpasswd bcrypt hash cannot be computed."""


class StoreConfigError(SecretsError):
    """Raised when the Kubernetes client configuration cannot be loaded."""


class StoreError(SecretsError):
    """
    Failure reported by a secrets store.

    Carries the namespace/name of the secret involved and, when the store
    is the Kubernetes API, the HTTP status it answered with.
    """

    def __init__(
        self,
        message: str,
        *,
        namespace: str,
        name: str,
        status: Optional[int] = None,
    ) -> None:
        super().__init__(f"{message} (secret={namespace}/{name})")
        self.namespace = namespace
        self.name = name
        self.status = status


class SecretNotFound(StoreError):
    """The secret does not exist yet."""


class SecretAlreadyExists(StoreError):
    """Create lost the race: another writer created the secret first."""


class StoreReadError(StoreError):
    """Reading a secret failed for a reason other than "not found"."""


class StoreWriteError(StoreError):
    """Creating a secret failed for a reason other than a conflict."""
