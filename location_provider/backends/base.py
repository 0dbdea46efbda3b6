from abc import ABC, abstractmethod
from typing import Any

from location_provider.models.location import BackendKind

RawBackendResult = dict[str, Any]


class BaseLocationBackend(ABC):
    """Abstract base for the IP2Location lookup backends.

    Implementations return the backend's raw field mapping untouched; turning it
    into a CanonicalLocation is the normalizer's job. A backend that cannot
    produce a result returns None instead of raising.
    """

    kind: BackendKind

    @abstractmethod
    async def fetch(self, ip: str) -> RawBackendResult | None:
        """Fetch raw location fields for an explicit IP address."""
        raise NotImplementedError
