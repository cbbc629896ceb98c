"""Port for the CMS holding editorial report content and funding totals."""

from abc import abstractmethod
from typing import Protocol

from impact.domain.report.model.cms import CMSReport


class EditorialSource(Protocol):
    @abstractmethod
    async def list_reports(self) -> list[CMSReport]:
        """Return every editorial report record."""
        ...

    @abstractmethod
    async def funded_amount_by_claim_id(self, claim_id: str) -> float:
        """Return the amount funded so far for the claim, 0 when nothing is recorded."""
        ...
