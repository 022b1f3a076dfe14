"""Pydantic models for the nais application manifest.

Only the fields the drag command reads are modelled; everything else in the
manifest is ignored.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ManifestModel(BaseModel):
    """Base for manifest models: camelCase aliases, unknown keys ignored."""
    model_config = ConfigDict(populate_by_name=True, extra='ignore')


class EnvVar(ManifestModel):
    """A single environment entry from spec.env."""
    name: str
    value: str = ""

    @field_validator('value', mode='before')
    @classmethod
    def _scalar_to_str(cls, value):
        # YAML turns `value: 1` into an int; nais treats it as the string "1"
        if value is None:
            return ""
        if isinstance(value, bool):
            return str(value).lower()
        if isinstance(value, (int, float)):
            return str(value)
        return value


class VaultMount(ManifestModel):
    """A Vault path and the local directory its keys are written to."""
    kv_path: str = Field(alias='kvPath')
    mount_path: str = Field(alias='mountPath')


class VaultConfig(ManifestModel):
    enabled: bool = False
    mounts: List[VaultMount] = []

    @field_validator('mounts', mode='before')
    @classmethod
    def _none_to_empty(cls, value):
        return [] if value is None else value


class ApplicationSpec(ManifestModel):
    port: int = 0
    env: List[EnvVar] = []
    vault: VaultConfig = VaultConfig()

    @field_validator('env', mode='before')
    @classmethod
    def _none_to_empty(cls, value):
        return [] if value is None else value

    @field_validator('vault', mode='before')
    @classmethod
    def _none_to_default(cls, value):
        return {} if value is None else value


class ApplicationMetadata(ManifestModel):
    name: str


class ApplicationDescriptor(ManifestModel):
    """The parsed application manifest."""
    api_version: Optional[str] = Field(default=None, alias='apiVersion')
    kind: Optional[str] = None
    metadata: ApplicationMetadata
    spec: ApplicationSpec = ApplicationSpec()

    @field_validator('spec', mode='before')
    @classmethod
    def _none_to_default(cls, value):
        return {} if value is None else value

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def port(self) -> int:
        return self.spec.port

    @property
    def vault_enabled(self) -> bool:
        return self.spec.vault.enabled

    @property
    def mounts(self) -> List[VaultMount]:
        return self.spec.vault.mounts
