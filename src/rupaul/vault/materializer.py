"""
Writes Vault secrets to local files, one file per key.

Mounts are processed in manifest order. There is no rollback: a failure
leaves every file written before it on disk.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, List, Union

from rupaul.config.exceptions import SecretWriteError
from rupaul.config.settings import settings as default_settings
from rupaul.manifest.models import VaultMount
from .payload import effective_payload, normalize

logger = logging.getLogger(__name__)


def secret_destination(mount_path: str, output_dir: Union[str, Path] = None) -> Path:
    """Resolve a mount path under output_dir, treating it as relative."""
    output_dir = Path(output_dir if output_dir is not None else default_settings.output_dir)
    relative = Path(mount_path)
    if relative.is_absolute():
        relative = relative.relative_to(relative.anchor)
    return output_dir / relative


def write_secret(directory: Union[str, Path], key: str, value: str) -> Path:
    """Write value as the full contents of directory/key.

    Raises:
        SecretWriteError: If the directory or file cannot be written
    """
    directory = Path(directory)
    filename = directory / key
    # key must name a file directly inside directory
    if key == '..' or filename.parent != directory:
        raise SecretWriteError(f"Secret key {key!r} is not a plain file name under {directory}", path=str(directory), key=key)

    try:
        os.makedirs(directory, exist_ok=True)
    except OSError as e:
        raise SecretWriteError(f"Could not make directory {directory}: {e}", path=str(directory), key=key) from e

    try:
        filename.write_bytes(value.encode('utf-8'))
    except OSError as e:
        raise SecretWriteError(f"Could not write secret to {filename}: {e}", path=str(filename), key=key) from e
    return filename


def materialize_mount(session, mount: VaultMount, reporter, output_dir: Union[str, Path] = None) -> List[Path]:
    """Read one mount from Vault and write each of its keys."""
    reporter.info(f"Reading secret from Vault: {mount.kv_path}")
    payload = session.read_secret(mount.kv_path)

    destination = secret_destination(mount.mount_path, output_dir)
    written = []
    for key, value in normalize(effective_payload(payload)):
        reporter.info(f"Found secret {mount.kv_path}/{key}")
        written.append(write_secret(destination, key, value))

    logger.debug(f"Wrote {len(written)} secret(s) from {mount.kv_path} to {destination}")
    return written


def materialize(session, mounts: Iterable[VaultMount], reporter, output_dir: Union[str, Path] = None) -> List[Path]:
    """Materialize every mount in order; the first failure propagates."""
    written = []
    for mount in mounts:
        written.extend(materialize_mount(session, mount, reporter, output_dir))
    return written
