# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/baremetal_secrets/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

# Field keys of the generated secrets
PASSWORD_KEY = "password"
USERNAME_KEY = "username"
HTPASSWD_KEY = "htpasswd"
AUTH_CONFIG_KEY = "auth-config"


@dataclass(frozen=True)
class SecretKind:
    """
    One managed secret.

    A kind without username/section only stores a raw password (mariadb).
    A kind with both also carries the htpasswd line and the auth-config
    block for an Ironic service account.
    """
    name: str
    username: Optional[str] = None
    section: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Secret name must not be empty")
        if (self.username is None) != (self.section is None):
            raise ValueError(
                f"Secret {self.name!r}: username and section must be set together"
            )

    @property
    def has_auth(self) -> bool:
        return self.username is not None


MARIADB_SECRET = SecretKind(name="metal3-mariadb-password")  # nosec
IRONIC_SECRET = SecretKind(
    name="metal3-ironic-password",
    username="ironic-user",
    section="ironic",
)
INSPECTOR_SECRET = SecretKind(
    name="metal3-ironic-inspector-password",
    username="inspector-user",
    section="inspector",
)

DEFAULT_SECRET_KINDS: tuple[SecretKind, ...] = (
    MARIADB_SECRET,
    IRONIC_SECRET,
    INSPECTOR_SECRET,
)


@dataclass(frozen=True)
class SecretRecord:
    """A namespaced Secret as handed to / returned by a store."""
    name: str
    namespace: str
    string_data: dict[str, str] = field(default_factory=dict)
    type: str = "Opaque"

    def to_manifest(self) -> dict:
        return {
            "apiVersion": "v1",
            "kind": "Secret",
            "metadata": {"name": self.name, "namespace": self.namespace},
            "type": self.type,
            "stringData": dict(self.string_data),
        }


class EnsureResult(str, Enum):
    CREATED = "created"
    ALREADY_EXISTS = "already exists"
