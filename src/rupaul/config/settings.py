"""
Fixed settings for the drag command.

There is a single Vault endpoint and no per-environment configuration; the
only runtime inputs are VAULT_TOKEN and LOG_LEVEL.
"""
from pathlib import Path
from pydantic import BaseModel


class Settings(BaseModel):
    """Settings shared by the drag pipeline."""
    vault_addr: str = "https://vault.adeo.no"
    vault_timeout: int = 5
    vault_token_env: str = "VAULT_TOKEN"
    vault_login_command: str = "vault login -method=oidc"
    token_helper_filename: str = ".vault-token"
    output_dir: str = "."
    compose_filename: str = "docker-compose.yml"
    compose_version: str = "3"
    build_context: str = "."
    secrets_volume: str = "${PWD}/secrets:/secrets"

    @property
    def token_helper_path(self) -> Path:
        """Location of the token cached by `vault login`."""
        return Path.home() / self.token_helper_filename


settings = Settings()
