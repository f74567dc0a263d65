"""Custom exceptions for license key resolution."""


class CredentialError(Exception):
    """Base exception for credential lookups."""

    pass


class SourceUnavailableError(CredentialError):
    """Raised when a source cannot produce a license key."""

    def __init__(self, message: str, source: str = "unknown"):
        super().__init__(message)
        self.source = source


class MalformedSecretError(SourceUnavailableError):
    """Raised when a secret record lacks a usable LicenseKey attribute."""

    pass
