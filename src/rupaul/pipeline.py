"""
The drag pipeline: manifest, compose file, Vault session, secret files.

Each stage raises a DragException on failure; the caller decides how to
report it.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional, Union

from rupaul.compose.builder import build_compose, write_compose
from rupaul.config.settings import Settings, settings as default_settings
from rupaul.manifest.loading import load_manifest
from rupaul.manifest.models import ApplicationDescriptor
from rupaul.vault.credential_helper import TokenHelper
from rupaul.vault.materializer import materialize
from rupaul.vault.session import TokenInfo, open_session

logger = logging.getLogger(__name__)


@dataclass
class DragResult:
    """What a successful run produced."""
    app: ApplicationDescriptor
    compose_path: Path
    token_info: Optional[TokenInfo] = None
    secret_files: List[Path] = field(default_factory=list)


def drag(manifest_path: Union[str, Path], reporter, output_dir: Union[str, Path] = None,
         environ: Optional[Mapping[str, str]] = None, helper: Optional[TokenHelper] = None,
         settings: Settings = default_settings, session_factory=open_session) -> DragResult:
    """Generate docker-compose.yml and write the application's Vault secrets.

    Args:
        manifest_path: Path to the naiserator YAML file
        reporter: Receives progress messages
        output_dir: Where docker-compose.yml and secret directories go
        environ: Environment used for token resolution (defaults to os.environ)
        helper: Token helper used when VAULT_TOKEN is unset
        settings: Endpoint and file name settings
        session_factory: Opens an authenticated Vault session

    Raises:
        DragException: The first failure of any stage
    """
    output_dir = Path(output_dir if output_dir is not None else settings.output_dir)

    app = load_manifest(manifest_path)

    compose_path = write_compose(build_compose(app, settings), output_dir, settings)
    reporter.info(f"Generated {compose_path}")

    reporter.info(f"Fetching secrets from Vault ({settings.vault_addr})")
    session = session_factory(reporter, environ=environ, helper=helper, settings=settings)

    secret_files = materialize(session, app.mounts, reporter, output_dir)
    logger.debug(f"Drag finished for '{app.name}': {len(secret_files)} secret file(s)")

    return DragResult(
        app=app,
        compose_path=compose_path,
        token_info=session.token_info,
        secret_files=secret_files,
    )
