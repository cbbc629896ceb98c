"""IPFS gateway adapter for the MetadataStore port."""

import logging

import httpx
import pydantic

from impact.domain.report.model.metadata import HypercertMetadata
from impact.domain.report.port.metadata_store import MetadataStore
from impact.domain.shared.error import RemoteFetchError

logger = logging.getLogger(__name__)

IPFS_SCHEME = "ipfs://"


def gateway_url(gateway: str, uri: str) -> str:
    """Translate a metadata pointer to a gateway URL.

    ``ipfs://<cid>`` and bare CIDs go through the gateway; http(s) URLs are
    used as-is.
    """
    if uri.startswith(("http://", "https://")):
        return uri
    cid = uri.removeprefix(IPFS_SCHEME).lstrip("/")
    return f"{gateway.rstrip('/')}/ipfs/{cid}"


class IpfsMetadataStore(MetadataStore):
    """Fetches hypercert metadata JSON from an IPFS HTTP gateway."""

    def __init__(self, client: httpx.AsyncClient, gateway: str) -> None:
        self._client = client
        self._gateway = gateway

    async def get_metadata(self, uri: str) -> HypercertMetadata:
        url = gateway_url(self._gateway, uri)
        try:
            response = await self._client.get(url)
            response.raise_for_status()
            return HypercertMetadata.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as e:
            # pydantic.ValidationError is a ValueError
            logger.error("Failed to fetch metadata of %s: %s", uri, e)
            raise RemoteFetchError(f"Failed to fetch metadata of {uri}: {e}") from e
