# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/baremetal_secrets/bootstrap.py

from __future__ import annotations

import logging
from typing import Optional

from baremetal_secrets.config.models import ProvisioningConfig
from baremetal_secrets.models import EnsureResult
from baremetal_secrets.provisioner import SecretProvisioner
from baremetal_secrets.store import KubernetesSecretStore, SecretStore

log = logging.getLogger("baremetal_secrets")


def bootstrap_secrets(
    cfg: ProvisioningConfig,
    *,
    store: Optional[SecretStore] = None,
) -> dict[str, EnsureResult]:
    """
    Ensure every configured secret exists in cfg.namespace.

    Builds a Kubernetes-backed store from the config unless one is passed.
    The first fatal error aborts the run and is raised unchanged.
    """
    if store is None:
        store = KubernetesSecretStore.from_kubeconfig(
            kubeconfig=cfg.kubeconfig,
            kube_context=cfg.kube_context,
            in_cluster=cfg.in_cluster,
        )

    kinds = cfg.secret_kinds()
    log.info("Ensuring %d secret(s) in namespace %s", len(kinds), cfg.namespace)

    results = SecretProvisioner(store, cfg.namespace).ensure_all(kinds)
    for name, result in results.items():
        log.info("  %-40s %s", name, result.value)
    return results
