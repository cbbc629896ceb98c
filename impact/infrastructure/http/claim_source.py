"""Hypercerts subgraph adapter for the ClaimSource port."""

import logging

import httpx
import pydantic

from impact.domain.report.model.claim import Claim
from impact.domain.report.port.claim_source import ClaimSource
from impact.domain.shared.error import ConfigurationError, RemoteFetchError

logger = logging.getLogger(__name__)

# Mirrors the hypercerts SDK's ClaimsByOwner query
CLAIMS_BY_OWNER_QUERY = """
query ClaimsByOwner($owner: Bytes = "", $orderDirection: OrderDirection, $first: Int, $skip: Int) {
  claims(where: { owner: $owner }, skip: $skip, first: $first, orderDirection: $orderDirection) {
    chainName
    contract
    tokenID
    creator
    id
    owner
    totalUnits
    uri
  }
}
"""


class GraphClaimSource(ClaimSource):
    """Queries the hypercerts subgraph over GraphQL."""

    def __init__(self, client: httpx.AsyncClient, url: str) -> None:
        self._client = client
        self._url = url

    async def claims_by_owner(self, address: str) -> list[Claim]:
        if not self._url:
            logger.error("Claim indexer URL is not configured")
            raise ConfigurationError(
                "Claim indexer URL is not configured (set IMPACT_INDEXER__URL)"
            )

        logger.info("Fetching claims owned by %s", address)
        payload = {
            "query": CLAIMS_BY_OWNER_QUERY,
            "variables": {"owner": address},
        }

        try:
            response = await self._client.post(self._url, json=payload)
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Failed to fetch claims owned by %s: %s", address, e)
            raise RemoteFetchError(f"Failed to fetch claims owned by {address}: {e}") from e

        try:
            if body.get("errors"):
                logger.error("Indexer returned errors for owner %s: %s", address, body["errors"])
                raise RemoteFetchError(
                    f"Failed to fetch claims owned by {address}: {body['errors']}"
                )
            raw_claims = (body.get("data") or {}).get("claims") or []
            claims = [Claim.model_validate(raw) for raw in raw_claims]
        except (pydantic.ValidationError, AttributeError) as e:
            logger.error("Malformed claims response for owner %s: %s", address, e)
            raise RemoteFetchError(
                f"Malformed claims response for owner {address}: {e}"
            ) from e

        logger.info("Fetched %d claims", len(claims))
        return claims
