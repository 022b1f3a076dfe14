"""
Builds the companion docker-compose.yml for an application manifest.
"""

import logging
import os
from pathlib import Path
from typing import Union

import yaml

from rupaul.config.exceptions import ComposeWriteError
from rupaul.config.settings import Settings, settings as default_settings
from rupaul.manifest.models import ApplicationDescriptor
from .models import ComposeDescriptor, ServiceSpec

logger = logging.getLogger(__name__)


def build_service(app: ApplicationDescriptor, settings: Settings = default_settings) -> ServiceSpec:
    """Derive the docker-compose service for an application.

    Args:
        app: The parsed application manifest
        settings: Supplies the build context and the secrets volume

    Returns:
        ServiceSpec with image, port mapping, secrets volume and environment
    """
    service = ServiceSpec(
        build=settings.build_context,
        image=app.name,
        volumes=[],
        ports=[],
        environment={},
    )

    if app.port > 0:
        service.ports.append(f"{app.port}:{app.port}")

    if app.vault_enabled:
        service.volumes.append(settings.secrets_volume)

    # Later duplicates overwrite earlier ones
    for entry in app.spec.env:
        service.environment[entry.name] = entry.value

    return service


def build_compose(app: ApplicationDescriptor, settings: Settings = default_settings) -> ComposeDescriptor:
    """Wrap the application's service in a compose descriptor."""
    return ComposeDescriptor(
        version=settings.compose_version,
        services={app.name: build_service(app, settings)},
    )


def render_compose(descriptor: ComposeDescriptor) -> str:
    """Serialize a compose descriptor to YAML with sorted keys."""
    return yaml.safe_dump(descriptor.model_dump(), default_flow_style=False, sort_keys=True)


def write_compose(descriptor: ComposeDescriptor, output_dir: Union[str, Path] = None,
                  settings: Settings = default_settings) -> Path:
    """Write docker-compose.yml, overwriting any existing file.

    Args:
        descriptor: The compose descriptor to write
        output_dir: Directory to write into (created if absent)
        settings: Supplies the default output directory and file name

    Returns:
        Path of the written file

    Raises:
        ComposeWriteError: If serialization or writing fails
    """
    output_dir = Path(output_dir if output_dir is not None else settings.output_dir)
    compose_path = output_dir / settings.compose_filename

    try:
        content = render_compose(descriptor)
    except yaml.YAMLError as e:
        raise ComposeWriteError(f"could not serialize compose file: {e}", path=str(compose_path)) from e

    try:
        os.makedirs(output_dir, exist_ok=True)
        compose_path.write_bytes(content.encode('utf-8'))
    except OSError as e:
        raise ComposeWriteError(str(e), path=str(compose_path)) from e

    logger.debug(f"Wrote {len(content)} bytes to {compose_path}")
    return compose_path
