"""Abstract base class for license key sources."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional


class LicenseKeySource(ABC):
    """
    Abstract base class that every license key source implements.

    Sources are tried by the resolver in a fixed order:
    - AWS Secrets Manager
    - AWS SSM Parameter Store
    - Environment variable
    """

    name: str = "unknown"

    @abstractmethod
    def get_license_key(self, secret_id: str) -> str:
        """
        Retrieve the license key.

        Args:
            secret_id: Resolution identifier for this attempt

        Returns:
            The license key as string

        Raises:
            SourceUnavailableError: If this source has no usable value
        """
        pass


class AWSClientSource(LicenseKeySource):
    """
    Source backed by a boto3 client.

    The client is either given directly or built by client_factory on first
    use, so a missing region or profile only fails the lookup that needs it.
    """

    def __init__(self, client: Any = None, client_factory: Optional[Callable[[], Any]] = None):
        """
        Args:
            client: boto3 client or a compatible fake
            client_factory: Builds the client when none was given
        """
        self._client = client
        self._client_factory = client_factory

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = self._client_factory()
        return self._client


@dataclass(frozen=True)
class LicenseKeyResolution:
    """Represents how the license key was resolved."""

    source: str
    license_key: str
