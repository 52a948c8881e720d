# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/baremetal_secrets/config/models.py

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from baremetal_secrets.models import DEFAULT_SECRET_KINDS, SecretKind


class SecretKindSpec(BaseModel):
    name: str = Field(min_length=1)
    username: Optional[str] = None      # set for htpasswd / auth-config secrets
    section: Optional[str] = None       # auth-config section, e.g. "ironic"

    @model_validator(mode="after")
    def _username_and_section_together(self) -> "SecretKindSpec":
        if (self.username is None) != (self.section is None):
            raise ValueError(
                f"secret {self.name!r}: username and section must be set together"
            )
        return self

    def to_kind(self) -> SecretKind:
        return SecretKind(name=self.name, username=self.username, section=self.section)


def _default_specs() -> List[SecretKindSpec]:
    return [
        SecretKindSpec(name=k.name, username=k.username, section=k.section)
        for k in DEFAULT_SECRET_KINDS
    ]


class ProvisioningConfig(BaseModel):
    """Where and which bootstrap secrets to ensure."""

    namespace: str = Field(min_length=1)
    kubeconfig: Optional[str] = None
    kube_context: Optional[str] = None
    in_cluster: bool = False
    secrets: List[SecretKindSpec] = Field(default_factory=_default_specs)

    @field_validator("secrets")
    @classmethod
    def _unique_names(cls, v: List[SecretKindSpec]) -> List[SecretKindSpec]:
        seen = set()
        for spec in v:
            if spec.name in seen:
                raise ValueError(f"duplicate secret name: {spec.name}")
            seen.add(spec.name)
        return v

    def secret_kinds(self) -> List[SecretKind]:
        return [s.to_kind() for s in self.secrets]
