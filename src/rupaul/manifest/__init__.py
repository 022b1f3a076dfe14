"""
Naiserator application manifest models and loading.
"""

from .models import (
    ApplicationDescriptor,
    ApplicationMetadata,
    ApplicationSpec,
    EnvVar,
    VaultConfig,
    VaultMount,
)
from .loading import load_manifest, parse_manifest

__all__ = [
    'ApplicationDescriptor',
    'ApplicationMetadata',
    'ApplicationSpec',
    'EnvVar',
    'VaultConfig',
    'VaultMount',
    'load_manifest',
    'parse_manifest',
]
