# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/baremetal_secrets/config/loader.py

import logging
from pathlib import Path

import yaml

from .models import ProvisioningConfig

log = logging.getLogger("baremetal_secrets")


def _load_yaml(path: Path) -> dict:
    data = yaml.safe_load(path.read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping in {path}, got {type(data).__name__}")
    return data


def load_config(path: str | Path) -> ProvisioningConfig:
    """
    Load and validate a provisioning YAML config.

    Only ``namespace`` is required. Without a ``secrets`` list the three
    metal3 secrets (mariadb, ironic, inspector) are ensured.
    """
    path = Path(path)
    data = _load_yaml(path)
    log.debug("Loaded provisioning config from %s", path)
    return ProvisioningConfig.model_validate(data)
