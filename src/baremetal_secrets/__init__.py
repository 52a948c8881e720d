# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/baremetal_secrets/__init__.py

from baremetal_secrets.models import (
    DEFAULT_SECRET_KINDS,
    INSPECTOR_SECRET,
    IRONIC_SECRET,
    MARIADB_SECRET,
    EnsureResult,
    SecretKind,
    SecretRecord,
)
from baremetal_secrets.password import generate_password
from baremetal_secrets.provisioner import (
    SecretProvisioner,
    create_inspector_password_secret,
    create_ironic_password_secret,
    create_mariadb_password_secret,
    ensure_secret,
)

__version__ = "0.1.0"
