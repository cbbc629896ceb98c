"""Merging a claim, its metadata and its CMS record into a Report."""

import logging

from impact.domain.report.model.claim import Claim
from impact.domain.report.model.cms import CMSReport
from impact.domain.report.model.metadata import Dimension, HypercertMetadata
from impact.domain.report.model.report import Report
from impact.domain.shared.error import ContentMismatchError

logger = logging.getLogger(__name__)


def find_cms_report(cms_reports: list[CMSReport], title: str) -> CMSReport:
    """Return the CMS record whose title equals ``title`` exactly.

    Records without a title never match.

    Raises:
        ContentMismatchError: If no record carries that title.
    """
    for cms_report in cms_reports:
        if cms_report.title is not None and cms_report.title == title:
            return cms_report
    logger.error("CMS content for report titled '%s' not found", title)
    raise ContentMismatchError(f"CMS content for report titled '{title}' not found")


def _display(dimension: Dimension | None) -> str | None:
    return dimension.display_value if dimension is not None else None


def build_report(
    claim: Claim,
    metadata: HypercertMetadata,
    cms_report: CMSReport,
    *,
    funded_so_far: float,
    state_property: str,
) -> Report:
    dimensions = metadata.hypercert

    state = metadata.property_value(state_property)
    if state is None:
        logger.debug(
            "Metadata for claim %s has no '%s' property", claim.id, state_property
        )

    category = None
    contributors: list[str] = []
    if dimensions is not None:
        if dimensions.work_scope is not None and dimensions.work_scope.value:
            category = str(dimensions.work_scope.value[0])
        if dimensions.contributors is not None:
            contributors = [str(name) for name in dimensions.contributors.value]

    return Report(
        hypercert_id=claim.id,
        title=metadata.name,
        summary=metadata.description,
        image=metadata.image,
        original_report_url=metadata.external_url,
        state=str(state) if state is not None else None,
        category=category,
        work_timeframe=_display(dimensions.work_timeframe) if dimensions else None,
        impact_scope=_display(dimensions.impact_scope) if dimensions else None,
        impact_timeframe=_display(dimensions.impact_timeframe) if dimensions else None,
        contributors=contributors,
        cms_id=cms_report.id,
        status=cms_report.status,
        date_created=cms_report.date_created,
        slug=cms_report.slug,
        story=cms_report.story,
        bc_ratio=cms_report.bc_ratio,
        villages_impacted=cms_report.villages_impacted,
        people_impacted=cms_report.people_impacted,
        verified_by=cms_report.verified_by,
        date_updated=cms_report.date_updated,
        byline=cms_report.byline,
        total_cost=cms_report.total_cost,
        funded_so_far=funded_so_far,
    )
