"""
Exception classes with built-in guidance for the drag pipeline.

Every stage raises one of these; only the command entry point prints the
guidance and exits.
"""


class DragException(Exception):
    """Base exception for all fatal drag errors."""
    def __init__(self, message: str, path: str = None, key: str = None):
        super().__init__(message)
        self.path = path
        self.key = key
        self.guidance = self._generate_guidance()

    def _generate_guidance(self):
        """Override in subclasses to provide specific guidance."""
        return str(self)


class ManifestError(DragException):
    """Raised when the application manifest cannot be read or parsed."""
    def _generate_guidance(self):
        return f"Could not load manifest {self.path}: {self}"


class ComposeWriteError(DragException):
    """Raised when docker-compose.yml cannot be serialized or written."""
    def _generate_guidance(self):
        return f"Could not write {self.path}: {self}"


class VaultConnectionError(DragException):
    """Raised when the Vault endpoint is unreachable."""
    def _generate_guidance(self):
        return f"Could not connect to Vault - network problem? {self}"


class NotLoggedInError(DragException):
    """Raised when no token is found in the environment or the token helper."""
    def __init__(self, message: str = "No Vault token available", login_command: str = "vault login -method=oidc",
                 **kwargs):
        self.login_command = login_command
        super().__init__(message, **kwargs)

    def _generate_guidance(self):
        return f"Looks like you're not logged in to vault. Run \"{self.login_command}\" to login."


class TokenHelperError(DragException):
    """Raised when the cached token file exists but cannot be read."""
    def _generate_guidance(self):
        return f"Could not get Vault token, {self}"


class TokenValidationError(DragException):
    """Raised when the token self lookup fails."""
    def _generate_guidance(self):
        return f"Could not verify the validity of the Vault token - it may be invalid or expired. {self}"


class PolicyLookupError(DragException):
    """Raised when the token metadata carries a malformed policy list."""
    pass


class SessionNotAuthenticatedError(DragException):
    """Raised when a secret is read before the token has been validated."""
    pass


class SecretReadError(DragException):
    """Raised when a secret cannot be read from Vault."""
    def _generate_guidance(self):
        return f"Could not read secret {self.path}: {self}"


class InvalidSecretTypeError(DragException):
    """Raised when a secret value is not a string."""
    def __init__(self, message: str = None, key: str = None, value_type: str = None, **kwargs):
        self.value_type = value_type
        super().__init__(message or f"Secret {key} has invalid type {value_type}", key=key, **kwargs)


class SecretWriteError(DragException):
    """Raised when a secret file or its directory cannot be written."""
    pass
