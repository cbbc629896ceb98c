"""Port for listing on-chain claims."""

from abc import abstractmethod
from typing import Protocol

from impact.domain.report.model.claim import Claim


class ClaimSource(Protocol):
    """Lists hypercert claims held by an owner address."""

    @abstractmethod
    async def claims_by_owner(self, address: str) -> list[Claim]:
        """Return the claims owned by ``address`` in indexer order.

        Raises:
            RemoteFetchError: If the indexer cannot be queried.
        """
        ...
