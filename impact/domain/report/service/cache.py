"""In-memory report cache backed by the claim indexer, metadata store and CMS."""

import asyncio
import logging
from collections.abc import Callable
from enum import StrEnum

import logfire

from impact.domain.report.model.claim import Claim
from impact.domain.report.model.cms import CMSReport
from impact.domain.report.model.report import Report
from impact.domain.report.port.claim_source import ClaimSource
from impact.domain.report.port.editorial_source import EditorialSource
from impact.domain.report.port.metadata_store import MetadataStore
from impact.domain.report.service.merge import build_report, find_cms_report
from impact.domain.shared.error import (
    ConfigurationError,
    ImpactError,
    NotFoundError,
    RemoteFetchError,
)

logger = logging.getLogger(__name__)


class CacheState(StrEnum):
    UNINITIALIZED = "uninitialized"
    POPULATING = "populating"
    POPULATED = "populated"


class ReportCache:
    """Process-local cache of merged reports.

    The report list is fetched once, on first demand, and then served as-is:
    there is no TTL and no refresh. Population is single-flight: callers that
    arrive while a population is running await that same population rather
    than starting their own. A failed population leaves the cache empty so the
    next call starts over.

    Only ``funded_so_far`` changes after population, through
    update_funded_amount(), which is serialized by an asyncio.Lock.
    """

    def __init__(
        self,
        claim_source: ClaimSource,
        metadata_store: MetadataStore,
        editorial_source: EditorialSource,
        *,
        owner_address: str,
        state_property: str = "State",
    ) -> None:
        self._claim_source = claim_source
        self._metadata_store = metadata_store
        self._editorial_source = editorial_source
        self._owner_address = owner_address
        self._state_property = state_property

        self._reports: list[Report] | None = None
        self._population: asyncio.Task[list[Report]] | None = None
        self._lock = asyncio.Lock()

    @property
    def state(self) -> CacheState:
        if self._reports is not None:
            return CacheState.POPULATED
        if self._population is not None:
            return CacheState.POPULATING
        return CacheState.UNINITIALIZED

    async def fetch_reports(self) -> list[Report]:
        """Return the cached reports, populating the cache on first call.

        Raises:
            ConfigurationError: If no owner address is configured. Nothing is fetched.
            RemoteFetchError: If any remote collaborator fails.
            ContentMismatchError: If a claim's title has no CMS record.
        """
        if not self._owner_address:
            logger.error("Owner address is not configured")
            raise ConfigurationError(
                "Owner address is not configured (set IMPACT_HYPERCERTS__OWNER_ADDRESS)"
            )

        if self._reports is not None:
            logger.debug("Reports already cached (%d), skipping remote fetch", len(self._reports))
            return self._reports

        if self._population is None:
            self._population = asyncio.create_task(
                self._populate(), name="populate-report-cache"
            )
            self._population.add_done_callback(_retrieve_failure)
        else:
            logger.debug("Report cache population already in flight, joining it")

        # Shielded so a cancelled request does not abort the shared population
        return await asyncio.shield(self._population)

    def get_reports(self) -> list[Report]:
        """Return the cached reports without fetching; empty if not yet populated."""
        if self._reports is not None:
            return self._reports
        return []

    async def fetch_report_by_slug(self, slug: str) -> Report:
        reports = await self.fetch_reports()
        report = _find(reports, lambda r: r.slug == slug)
        if report is None:
            logger.warning("Report with slug '%s' not found", slug)
            raise NotFoundError(f"Report with slug '{slug}' not found")
        return report

    async def fetch_report_by_hypercert_id(self, hypercert_id: str) -> Report:
        reports = await self.fetch_reports()
        report = _find(reports, lambda r: r.hypercert_id == hypercert_id)
        if report is None:
            logger.warning("Report with hypercert id '%s' not found", hypercert_id)
            raise NotFoundError(f"Report with hypercert id '{hypercert_id}' not found")
        return report

    async def update_funded_amount(self, hypercert_id: str, amount: float) -> Report | None:
        """Add ``amount`` to the cached report's funded_so_far.

        A hypercert id with no cached report is ignored (returns None) and logged,
        since funding events can arrive for claims that are not cached yet.
        """
        async with self._lock:
            report = _find(self.get_reports(), lambda r: r.hypercert_id == hypercert_id)
            if report is None:
                logger.warning(
                    "Funding update of %s for hypercert '%s' ignored: report not cached",
                    amount,
                    hypercert_id,
                )
                return None
            report.funded_so_far += amount
            logger.info(
                "Funded amount for hypercert '%s' is now %s", hypercert_id, report.funded_so_far
            )
            return report

    async def _populate(self) -> list[Report]:
        try:
            with logfire.span("populate report cache", owner_address=self._owner_address):
                logger.info(
                    "Fetching reports from remote using owner address %s", self._owner_address
                )
                claims = await self._claim_source.claims_by_owner(self._owner_address)
                cms_reports = await self._editorial_source.list_reports()
                reports = await self._assemble_all(claims, cms_reports)
            self._reports = reports
        except ImpactError as e:
            logger.error("Failed to fetch reports: %s", e.message)
            raise
        finally:
            self._population = None

        logger.info("Cached %d reports", len(self._reports))
        return self._reports

    async def _assemble_all(
        self, claims: list[Claim], cms_reports: list[CMSReport]
    ) -> list[Report]:
        # The first failing claim cancels the rest; results keep claim order
        try:
            async with asyncio.TaskGroup() as tg:
                tasks = [tg.create_task(self._assemble(claim, cms_reports)) for claim in claims]
        except ExceptionGroup as eg:
            raise eg.exceptions[0]
        return [task.result() for task in tasks]

    async def _assemble(self, claim: Claim, cms_reports: list[CMSReport]) -> Report:
        if not claim.uri:
            raise RemoteFetchError(f"Claim '{claim.id}' has no metadata URI")

        metadata = await self._metadata_store.get_metadata(claim.uri)
        cms_report = find_cms_report(cms_reports, metadata.name)
        funded = await self._editorial_source.funded_amount_by_claim_id(claim.id)

        return build_report(
            claim,
            metadata,
            cms_report,
            funded_so_far=funded,
            state_property=self._state_property,
        )


def _retrieve_failure(task: asyncio.Task) -> None:
    # Every waiter may have been cancelled before the population finished
    if not task.cancelled():
        task.exception()


def _find(reports: list[Report], predicate: Callable[[Report], bool]) -> Report | None:
    return next((r for r in reports if predicate(r)), None)
