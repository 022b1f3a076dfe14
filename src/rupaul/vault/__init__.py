"""
Vault access for the drag command: token resolution, session setup, payload
disambiguation and writing secrets to disk.
"""

from .credential_helper import TokenHelper
from .session import VaultSession, TokenInfo, open_session, resolve_token, token_policies
from .payload import ValueKind, kind_of, is_versioned_payload, effective_payload, normalize
from .materializer import secret_destination, write_secret, materialize_mount, materialize

__all__ = [
    'TokenHelper',
    'VaultSession',
    'TokenInfo',
    'open_session',
    'resolve_token',
    'token_policies',
    'ValueKind',
    'kind_of',
    'is_versioned_payload',
    'effective_payload',
    'normalize',
    'secret_destination',
    'write_secret',
    'materialize_mount',
    'materialize',
]
