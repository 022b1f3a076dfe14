"""
Configuration for rupaul: fixed settings, logging bootstrap and the
exception hierarchy shared by every stage.
"""

from .settings import Settings, settings
from .logging import bootstrap_logging
from .exceptions import (
    DragException,
    ManifestError,
    ComposeWriteError,
    VaultConnectionError,
    NotLoggedInError,
    TokenHelperError,
    TokenValidationError,
    PolicyLookupError,
    SessionNotAuthenticatedError,
    SecretReadError,
    InvalidSecretTypeError,
    SecretWriteError,
)

__all__ = [
    'Settings',
    'settings',
    'bootstrap_logging',
    'DragException',
    'ManifestError',
    'ComposeWriteError',
    'VaultConnectionError',
    'NotLoggedInError',
    'TokenHelperError',
    'TokenValidationError',
    'PolicyLookupError',
    'SessionNotAuthenticatedError',
    'SecretReadError',
    'InvalidSecretTypeError',
    'SecretWriteError',
]
