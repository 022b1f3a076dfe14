"""
Application manifest loading.

Reads a naiserator YAML file into an ApplicationDescriptor.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import ValidationError

from rupaul.config.exceptions import ManifestError
from .models import ApplicationDescriptor

logger = logging.getLogger(__name__)


def parse_manifest(data: Dict[str, Any], path: str = None) -> ApplicationDescriptor:
    """Validate already-parsed manifest data.

    Raises:
        ManifestError: If the data is not a mapping or fails validation
    """
    if not isinstance(data, dict):
        raise ManifestError(f"expected a mapping at the top level, got {type(data).__name__}", path=path)

    try:
        return ApplicationDescriptor.model_validate(data)
    except ValidationError as e:
        raise ManifestError(f"invalid manifest: {e}", path=path) from e


def load_manifest(path: Union[str, Path]) -> ApplicationDescriptor:
    """Load an application manifest from a YAML file.

    Args:
        path: Path to the naiserator YAML file

    Returns:
        The parsed ApplicationDescriptor

    Raises:
        ManifestError: If the file is missing, unreadable, malformed or invalid
    """
    manifest_path = Path(path)
    logger.debug(f"Loading manifest from {manifest_path}")

    try:
        with open(manifest_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ManifestError(str(e), path=str(manifest_path)) from e
    except yaml.YAMLError as e:
        raise ManifestError(f"malformed YAML: {e}", path=str(manifest_path)) from e

    if data is None:
        raise ManifestError("manifest is empty", path=str(manifest_path))

    app = parse_manifest(data, path=str(manifest_path))
    logger.debug(f"Loaded application '{app.name}' with {len(app.mounts)} vault mount(s)")
    return app
