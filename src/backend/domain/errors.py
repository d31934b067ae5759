class CredentialStoreError(Exception):
    """Base class for failures raised by the credential store."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(CredentialStoreError):
    """A required field (the patient id) is missing or empty."""


class ConflictError(CredentialStoreError):
    """The patient id is already registered."""


class AuthenticationError(CredentialStoreError):
    """Unknown patient id or wrong password.

    Both cases share this single error so callers cannot tell which ids exist.
    """
