# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/baremetal_secrets/store.py

from __future__ import annotations

import base64
import dataclasses
import logging
import threading
from typing import Optional, Protocol

import urllib3
from kubernetes import client, config
from kubernetes.client.exceptions import ApiException
from kubernetes.config.config_exception import ConfigException

from baremetal_secrets.errors import (
    SecretAlreadyExists,
    SecretNotFound,
    StoreConfigError,
    StoreReadError,
    StoreWriteError,
)
from baremetal_secrets.models import SecretRecord

log = logging.getLogger("baremetal_secrets")


class SecretStore(Protocol):
    """
    Minimal persistent store used by the provisioner.

    get() raises SecretNotFound when the secret is absent; create() raises
    SecretAlreadyExists when another writer got there first. Any other
    failure is raised as-is.
    """

    def get(self, namespace: str, name: str) -> SecretRecord: ...

    def create(self, record: SecretRecord) -> None: ...


def _decode_data(data: Optional[dict]) -> dict[str, str]:
    return {
        k: base64.b64decode(v).decode("utf-8", errors="replace")
        for k, v in (data or {}).items()
    }


class KubernetesSecretStore:
    """
    SecretStore backed by the core/v1 Secrets API.
    """

    def __init__(self, api: client.CoreV1Api) -> None:
        self.api = api

    @classmethod
    def from_kubeconfig(
        cls,
        *,
        kubeconfig: Optional[str] = None,
        kube_context: Optional[str] = None,
        in_cluster: bool = False,
    ) -> "KubernetesSecretStore":
        try:
            if in_cluster:
                config.load_incluster_config()
            else:
                config.load_kube_config(config_file=kubeconfig, context=kube_context)
        except ConfigException as exc:
            raise StoreConfigError(f"Kubernetes client configuration failed: {exc}") from exc
        return cls(client.CoreV1Api())

    def get(self, namespace: str, name: str) -> SecretRecord:
        try:
            secret = self.api.read_namespaced_secret(name=name, namespace=namespace)
        except ApiException as exc:
            if exc.status == 404:
                raise SecretNotFound(
                    "Secret not found", namespace=namespace, name=name, status=404
                ) from exc
            raise StoreReadError(
                f"Reading secret failed: {exc.status} {exc.reason}",
                namespace=namespace,
                name=name,
                status=exc.status,
            ) from exc
        except (urllib3.exceptions.HTTPError, OSError) as exc:
            raise StoreReadError(
                f"Reading secret failed: {exc}", namespace=namespace, name=name
            ) from exc

        return SecretRecord(
            name=name,
            namespace=namespace,
            string_data=_decode_data(secret.data),
            type=secret.type or "Opaque",
        )

    def create(self, record: SecretRecord) -> None:
        body = client.V1Secret(
            api_version="v1",
            kind="Secret",
            metadata=client.V1ObjectMeta(name=record.name, namespace=record.namespace),
            type=record.type,
            string_data=dict(record.string_data),
        )
        try:
            self.api.create_namespaced_secret(namespace=record.namespace, body=body)
        except ApiException as exc:
            if exc.status == 409:
                raise SecretAlreadyExists(
                    "Secret already exists",
                    namespace=record.namespace,
                    name=record.name,
                    status=409,
                ) from exc
            raise StoreWriteError(
                f"Creating secret failed: {exc.status} {exc.reason}",
                namespace=record.namespace,
                name=record.name,
                status=exc.status,
            ) from exc
        except (urllib3.exceptions.HTTPError, OSError) as exc:
            raise StoreWriteError(
                f"Creating secret failed: {exc}",
                namespace=record.namespace,
                name=record.name,
            ) from exc


class InMemorySecretStore:
    """
    Dict-backed SecretStore for dry runs and tests.

    create() is atomic under a lock, so it arbitrates concurrent writers the
    same way the API server does.
    """

    def __init__(self, records: Optional[list[SecretRecord]] = None) -> None:
        self._lock = threading.Lock()
        self._records: dict[tuple[str, str], SecretRecord] = {}
        self.get_calls = 0
        self.create_calls = 0
        for r in records or []:
            self._records[(r.namespace, r.name)] = dataclasses.replace(
                r, string_data=dict(r.string_data)
            )

    def get(self, namespace: str, name: str) -> SecretRecord:
        with self._lock:
            self.get_calls += 1
            record = self._records.get((namespace, name))
        if record is None:
            raise SecretNotFound("Secret not found", namespace=namespace, name=name)
        return dataclasses.replace(record, string_data=dict(record.string_data))

    def create(self, record: SecretRecord) -> None:
        key = (record.namespace, record.name)
        with self._lock:
            self.create_calls += 1
            if key in self._records:
                raise SecretAlreadyExists(
                    "Secret already exists",
                    namespace=record.namespace,
                    name=record.name,
                )
            self._records[key] = dataclasses.replace(
                record, string_data=dict(record.string_data)
            )
        log.debug("[memory-store] stored %s/%s", record.namespace, record.name)

    def records(self) -> list[SecretRecord]:
        with self._lock:
            return [
                dataclasses.replace(r, string_data=dict(r.string_data))
                for r in self._records.values()
            ]
