"""
Vault session setup.

Connects to the Vault endpoint, resolves and validates a token, and reads
secrets on behalf of the materializer.
"""

import logging
import os
from typing import Any, Dict, List, Mapping, Optional

import hvac
import hvac.exceptions
import requests
from pydantic import BaseModel

from rupaul.config.exceptions import (
    NotLoggedInError,
    PolicyLookupError,
    SecretReadError,
    SessionNotAuthenticatedError,
    TokenHelperError,
    TokenValidationError,
    VaultConnectionError,
)
from rupaul.config.settings import Settings, settings as default_settings
from .credential_helper import TokenHelper

logger = logging.getLogger(__name__)


class TokenInfo(BaseModel):
    """The parts of a token self lookup that drag reports."""
    display_name: Optional[str] = None
    policies: List[str] = []
    raw: Dict[str, Any] = {}

    @classmethod
    def from_lookup(cls, response: Mapping[str, Any]) -> 'TokenInfo':
        """Build TokenInfo from a lookup-self response.

        A missing or non-string display_name is ignored; a malformed policy
        list is fatal.

        Raises:
            PolicyLookupError: If policies is not a list of strings
        """
        data = (response or {}).get('data') or {}

        display_name = data.get('display_name')
        if not isinstance(display_name, str):
            display_name = None

        return cls(display_name=display_name, policies=token_policies(data), raw=dict(data))


def token_policies(data: Mapping[str, Any]) -> List[str]:
    """Extract the policy list from token metadata; missing means none."""
    policies = data.get('policies')
    if policies is None:
        return []
    if not isinstance(policies, list):
        raise PolicyLookupError(f"unable to convert token policies to expected format: {type(policies).__name__}")
    for policy in policies:
        if not isinstance(policy, str):
            raise PolicyLookupError(f"unable to convert token policies to expected format: {policy!r}")
    return list(policies)


def resolve_token(environ: Optional[Mapping[str, str]] = None, helper: Optional[TokenHelper] = None,
                  settings: Settings = default_settings) -> str:
    """Resolve the Vault token from the environment, then the token helper.

    Raises:
        NotLoggedInError: If neither source yields a token
    """
    environ = os.environ if environ is None else environ
    token = environ.get(settings.vault_token_env, "")
    if token:
        logger.debug(f"Using Vault token from {settings.vault_token_env}")
        return token

    helper = helper or TokenHelper()
    try:
        token = helper.get()
    except TokenHelperError as e:
        raise NotLoggedInError(str(e), login_command=settings.vault_login_command) from e

    if not token:
        raise NotLoggedInError(login_command=settings.vault_login_command)

    logger.debug(f"Using Vault token from {helper.path}")
    return token


class VaultSession:
    """A connection to the single Vault endpoint."""

    def __init__(self, url: str = None, timeout: int = None, client: hvac.Client = None,
                 http: requests.Session = None, settings: Settings = default_settings):
        self.url = url or settings.vault_addr
        self.timeout = timeout if timeout is not None else settings.vault_timeout
        self.settings = settings
        self.http = http or requests.Session()
        self.client = client or hvac.Client(url=self.url, timeout=self.timeout, session=self.http)
        self.token_info: Optional[TokenInfo] = None

    @property
    def authenticated(self) -> bool:
        return self.token_info is not None

    def check_connectivity(self) -> None:
        """Check the endpoint root without credentials.

        Raises:
            VaultConnectionError: On any network-level failure
        """
        try:
            response = self.http.get(self.url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise VaultConnectionError(str(e), path=self.url) from e
        logger.debug(f"Vault connectivity check {self.url} returned HTTP {response.status_code}")

    def authenticate(self, token: str) -> TokenInfo:
        """Set the token and validate it with a self lookup.

        Raises:
            TokenValidationError: If the lookup fails
            PolicyLookupError: If the returned policies are malformed
        """
        self.client.token = token
        try:
            response = self.client.auth.token.lookup_self()
        except (hvac.exceptions.VaultError, requests.exceptions.RequestException) as e:
            raise TokenValidationError(str(e)) from e

        self.token_info = TokenInfo.from_lookup(response)
        return self.token_info

    def read_secret(self, path: str) -> Dict[str, Any]:
        """Read the raw payload stored at path.

        Raises:
            SessionNotAuthenticatedError: If the token has not been validated
            SecretReadError: If the read fails or nothing is stored at path
        """
        if not self.authenticated:
            raise SessionNotAuthenticatedError("Vault token has not been validated", path=path)

        try:
            response = self.client.read(path)
        except (hvac.exceptions.VaultError, requests.exceptions.RequestException) as e:
            raise SecretReadError(str(e), path=path) from e

        if response is None:
            raise SecretReadError("no secret found", path=path)

        data = response.get('data') if isinstance(response, Mapping) else None
        if data is None:
            return {}
        if not isinstance(data, Mapping):
            raise SecretReadError(f"unexpected payload type {type(data).__name__}", path=path)
        return dict(data)


def open_session(reporter, environ: Optional[Mapping[str, str]] = None, helper: Optional[TokenHelper] = None,
                 settings: Settings = default_settings, session: VaultSession = None) -> VaultSession:
    """Connect, resolve and validate a token, and report who is logged in.

    Returns:
        An authenticated VaultSession
    """
    session = session or VaultSession(settings=settings)
    session.check_connectivity()

    token = resolve_token(environ=environ, helper=helper, settings=settings)
    info = session.authenticate(token)

    if info.display_name is not None:
        reporter.info(f"Logged in as {info.display_name}")
    reporter.info(f"The Vault token has policies {', '.join(info.policies)}")

    return session
