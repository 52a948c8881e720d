# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/baremetal_secrets/provisioner.py

from __future__ import annotations

import logging
from typing import Iterable

from baremetal_secrets.errors import SecretAlreadyExists, SecretNotFound
from baremetal_secrets.htpasswd import auth_config_block, hash_password, htpasswd_line
from baremetal_secrets.models import (
    AUTH_CONFIG_KEY,
    DEFAULT_SECRET_KINDS,
    HTPASSWD_KEY,
    INSPECTOR_SECRET,
    IRONIC_SECRET,
    MARIADB_SECRET,
    PASSWORD_KEY,
    USERNAME_KEY,
    EnsureResult,
    SecretKind,
    SecretRecord,
)
from baremetal_secrets.password import generate_password
from baremetal_secrets.store import SecretStore

log = logging.getLogger("baremetal_secrets")


def build_secret_data(kind: SecretKind, password: str) -> dict[str, str]:
    """
    Compute every field of a new secret.

    All values derive from the same *password*; nothing is written until the
    whole mapping has been built.
    """
    if not kind.has_auth:
        return {PASSWORD_KEY: password}

    hashed = hash_password(password)
    return {
        USERNAME_KEY: kind.username,
        PASSWORD_KEY: password,
        HTPASSWD_KEY: htpasswd_line(kind.username, hashed),
        AUTH_CONFIG_KEY: auth_config_block(kind.section, kind.username, password),
    }


class SecretProvisioner:
    """
    Creates the metal3 bootstrap secrets once per namespace.

    Existing secrets are never read back or modified. Uniqueness is left to
    the store's create; a create conflict means a concurrent bootstrap won
    and is reported as ALREADY_EXISTS. No retries.
    """

    def __init__(self, store: SecretStore, namespace: str) -> None:
        self.store = store
        self.namespace = namespace

    def ensure(self, kind: SecretKind) -> EnsureResult:
        try:
            self.store.get(self.namespace, kind.name)
        except SecretNotFound:
            pass
        else:
            log.debug("Secret %s/%s already exists", self.namespace, kind.name)
            return EnsureResult.ALREADY_EXISTS

        # Secret does not exist yet: build it completely, then create it
        data = build_secret_data(kind, generate_password())
        record = SecretRecord(name=kind.name, namespace=self.namespace, string_data=data)

        try:
            self.store.create(record)
        except SecretAlreadyExists:
            log.info(
                "Secret %s/%s was created concurrently; keeping existing one",
                self.namespace, kind.name,
            )
            return EnsureResult.ALREADY_EXISTS

        log.info("Created secret %s/%s", self.namespace, kind.name)
        return EnsureResult.CREATED

    def ensure_all(
        self, kinds: Iterable[SecretKind] = DEFAULT_SECRET_KINDS
    ) -> dict[str, EnsureResult]:
        results: dict[str, EnsureResult] = {}
        for kind in kinds:
            results[kind.name] = self.ensure(kind)
        return results


def ensure_secret(store: SecretStore, namespace: str, kind: SecretKind) -> EnsureResult:
    return SecretProvisioner(store, namespace).ensure(kind)


def create_mariadb_password_secret(store: SecretStore, namespace: str) -> EnsureResult:
    """Ensure the MariaDB password secret for Ironic's database."""
    return ensure_secret(store, namespace, MARIADB_SECRET)


def create_ironic_password_secret(store: SecretStore, namespace: str) -> EnsureResult:
    """Ensure the Ironic API basic-auth secret."""
    return ensure_secret(store, namespace, IRONIC_SECRET)


def create_inspector_password_secret(store: SecretStore, namespace: str) -> EnsureResult:
    """Ensure the Ironic Inspector basic-auth secret."""
    return ensure_secret(store, namespace, INSPECTOR_SECRET)
