"""Drag task.

Thin task definition that reports failures with built-in guidance and
delegates to the pipeline for the actual work.
"""

import os
import sys
from invoke import task

from rupaul import pipeline
from rupaul.config.exceptions import DragException
from rupaul.config.logging import bootstrap_logging
from rupaul.presentation import Reporter


def _handle_drag_error(reporter: Reporter, e: DragException):
    """Print the error guidance and exit."""
    reporter.error(e.guidance)
    sys.exit(1)


@task(
    positional=['manifest'],
    help={
        'manifest': 'Path to the naiserator YAML file',
        'debug': 'Enable debug logging (sets LOG_LEVEL=DEBUG)'
    }
)
def drag(ctx, manifest, debug=False):
    """
    Drag secrets from Vault, and generate a companion docker-compose file.

    Writes docker-compose.yml to the current directory and one file per
    secret key under each mount path from the manifest.

    Examples:
        rupaul drag nais.yaml
        VAULT_TOKEN=s.xxxx rupaul drag nais.yaml
        rupaul drag nais.yaml --debug
    """
    if debug:
        os.environ['LOG_LEVEL'] = 'DEBUG'
    bootstrap_logging(__name__)

    reporter = Reporter()
    reporter.quote()

    try:
        pipeline.drag(manifest, reporter)
    except DragException as e:
        _handle_drag_error(reporter, e)
