"""
Token helper compatible with the Vault CLI.

`vault login` caches the token in ~/.vault-token; reading it back lets the
drag command reuse an existing login.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from rupaul.config.exceptions import TokenHelperError
from rupaul.config.settings import settings

logger = logging.getLogger(__name__)


class TokenHelper:
    """Reads the token cached by the Vault CLI's internal token helper."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self._path = Path(path) if path is not None else None

    @property
    def path(self) -> Path:
        if self._path is None:
            self._path = settings.token_helper_path
        return self._path

    def get(self) -> str:
        """Return the cached token, or an empty string if there is none.

        Raises:
            TokenHelperError: If the token file exists but cannot be read
        """
        try:
            token = self.path.read_text(encoding='utf-8')
        except FileNotFoundError:
            logger.debug(f"No cached token at {self.path}")
            return ""
        except OSError as e:
            raise TokenHelperError(str(e), path=str(self.path)) from e

        return token.strip()
