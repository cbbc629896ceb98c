"""Port for resolving claim metadata pointers."""

from abc import abstractmethod
from typing import Protocol

from impact.domain.report.model.metadata import HypercertMetadata


class MetadataStore(Protocol):
    """Resolves a claim's metadata ``uri`` to its document."""

    @abstractmethod
    async def get_metadata(self, uri: str) -> HypercertMetadata: ...
