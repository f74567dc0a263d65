"""Extension configuration model."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Configuration:
    """
    Settings the extension starts with.

    license_key is a literal value that bypasses every remote lookup;
    license_key_secret_id names the Secrets Manager secret (and SSM
    parameter) to query instead of the default.
    """

    license_key: Optional[str] = None
    license_key_secret_id: Optional[str] = None
    log_level: str = "INFO"
    log_format: str = "standard"
    aws_region: Optional[str] = None

    def masked_license_key(self) -> Optional[str]:
        """License key safe for display."""
        return mask(self.license_key)


def mask(value: Optional[str], visible: int = 4) -> Optional[str]:
    """Hide all but the last few characters of a secret value."""
    if value is None:
        return None
    if len(value) <= visible:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]
