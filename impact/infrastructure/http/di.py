"""DI provider for HTTP infrastructure."""

from typing import AsyncIterable, NewType

import httpx
from dishka import Provider, provide

from impact.config import Config
from impact.domain.report.port.claim_source import ClaimSource
from impact.domain.report.port.editorial_source import EditorialSource
from impact.domain.report.port.metadata_store import MetadataStore
from impact.infrastructure.http.claim_source import GraphClaimSource
from impact.infrastructure.http.editorial_source import DirectusEditorialSource
from impact.infrastructure.http.metadata_store import IpfsMetadataStore
from impact.util.di.scope import Scope

# One client per remote so timeouts and headers stay independent
IndexerHttpClient = NewType("IndexerHttpClient", httpx.AsyncClient)
IpfsHttpClient = NewType("IpfsHttpClient", httpx.AsyncClient)
CmsHttpClient = NewType("CmsHttpClient", httpx.AsyncClient)


class HttpProvider(Provider):
    """DI provider for the remote report sources."""

    @provide(scope=Scope.APP)
    async def get_indexer_http_client(self, config: Config) -> AsyncIterable[IndexerHttpClient]:
        client = httpx.AsyncClient(timeout=config.indexer.timeout)
        yield IndexerHttpClient(client)
        await client.aclose()

    @provide(scope=Scope.APP)
    async def get_ipfs_http_client(self, config: Config) -> AsyncIterable[IpfsHttpClient]:
        # Gateways commonly redirect to a subdomain per CID
        client = httpx.AsyncClient(timeout=config.ipfs.timeout, follow_redirects=True)
        yield IpfsHttpClient(client)
        await client.aclose()

    @provide(scope=Scope.APP)
    async def get_cms_http_client(self, config: Config) -> AsyncIterable[CmsHttpClient]:
        headers = {"Accept": "application/json"}
        if config.cms.token:
            headers["Authorization"] = f"Bearer {config.cms.token}"
        client = httpx.AsyncClient(
            base_url=config.cms.url,
            headers=headers,
            timeout=config.cms.timeout,
        )
        yield CmsHttpClient(client)
        await client.aclose()

    @provide(scope=Scope.APP, provides=ClaimSource)
    def get_claim_source(self, client: IndexerHttpClient, config: Config) -> GraphClaimSource:
        return GraphClaimSource(client=client, url=config.indexer.url)

    @provide(scope=Scope.APP, provides=MetadataStore)
    def get_metadata_store(self, client: IpfsHttpClient, config: Config) -> IpfsMetadataStore:
        return IpfsMetadataStore(client=client, gateway=config.ipfs.gateway_url)

    @provide(scope=Scope.APP, provides=EditorialSource)
    def get_editorial_source(
        self, client: CmsHttpClient, config: Config
    ) -> DirectusEditorialSource:
        return DirectusEditorialSource(client=client, config=config.cms)
