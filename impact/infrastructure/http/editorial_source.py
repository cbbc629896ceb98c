"""Directus adapter for the EditorialSource port."""

import logging

import httpx

from impact.config import CmsConfig
from impact.domain.report.model.cms import CMSReport
from impact.domain.report.port.editorial_source import EditorialSource
from impact.domain.shared.error import RemoteFetchError

logger = logging.getLogger(__name__)


class DirectusEditorialSource(EditorialSource):
    """Reads report content and contribution totals from the Directus REST API.

    The client is expected to carry the CMS base URL and auth header.
    """

    def __init__(self, client: httpx.AsyncClient, config: CmsConfig) -> None:
        self._client = client
        self._config = config

    async def list_reports(self) -> list[CMSReport]:
        path = f"/items/{self._config.reports_collection}"
        try:
            response = await self._client.get(path, params={"limit": -1})
            response.raise_for_status()
            items = response.json()["data"]
            reports = [CMSReport.model_validate(item) for item in items]
        except (httpx.HTTPError, KeyError, TypeError, ValueError) as e:
            logger.error("Failed to fetch CMS reports: %s", e)
            raise RemoteFetchError(f"Failed to fetch CMS reports: {e}") from e

        logger.debug("Fetched %d CMS reports", len(reports))
        return reports

    async def funded_amount_by_claim_id(self, claim_id: str) -> float:
        path = f"/items/{self._config.contributions_collection}"
        amount_field = self._config.contributions_amount_field
        params = {
            f"filter[{self._config.contributions_hypercert_field}][_eq]": claim_id,
            "aggregate[sum]": amount_field,
        }
        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
            rows = response.json()["data"]
            # Directus aggregates come back as [{"sum": {"<field>": "12.5"}}]
            total = rows[0].get("sum", {}).get(amount_field) if rows else None
            return float(total) if total is not None else 0.0
        except (httpx.HTTPError, KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error("Failed to fetch funded amount of %s: %s", claim_id, e)
            raise RemoteFetchError(f"Failed to fetch funded amount of {claim_id}: {e}") from e
