"""API tests for the report routes, run against an in-process ASGI app."""

from unittest.mock import AsyncMock

import httpx
import pytest
import pytest_asyncio
from dishka import Provider, make_async_container, provide
from fastapi import FastAPI

from impact.application.api.rest.app import register_routes
from impact.application.di import ContextProvider
from impact.config import Config, HypercertsConfig
from impact.domain.report.model.claim import Claim
from impact.domain.report.model.cms import CMSReport
from impact.domain.report.model.metadata import HypercertMetadata
from impact.domain.report.port.claim_source import ClaimSource
from impact.domain.report.port.editorial_source import EditorialSource
from impact.domain.report.port.metadata_store import MetadataStore
from impact.domain.report.util.di.provider import ReportProvider
from impact.domain.shared.error import RemoteFetchError
from impact.util.di.fastapi import setup_dishka
from impact.util.di.scope import Scope


class FakeSourcesProvider(Provider):
    """Provides mocked remote sources in place of the HTTP adapters."""

    def __init__(self, claims: AsyncMock, metadata: AsyncMock, editorial: AsyncMock) -> None:
        super().__init__()
        self._claims = claims
        self._metadata = metadata
        self._editorial = editorial

    @provide(scope=Scope.APP)
    def get_claim_source(self) -> ClaimSource:
        return self._claims

    @provide(scope=Scope.APP)
    def get_metadata_store(self) -> MetadataStore:
        return self._metadata

    @provide(scope=Scope.APP)
    def get_editorial_source(self) -> EditorialSource:
        return self._editorial


@pytest.fixture
def sources() -> tuple[AsyncMock, AsyncMock, AsyncMock]:
    claims = AsyncMock()
    claims.claims_by_owner.return_value = [Claim(id="claim-1", uri="ipfs://foo")]

    metadata = AsyncMock()
    metadata.get_metadata.return_value = HypercertMetadata.model_validate(
        {"name": "Foo", "properties": [{"trait_type": "State", "value": "Oaxaca"}]}
    )

    editorial = AsyncMock()
    editorial.list_reports.return_value = [
        CMSReport(id=1, title="Foo", slug="foo-1", total_cost=100)
    ]
    editorial.funded_amount_by_claim_id.return_value = 50.0
    return claims, metadata, editorial


def _make_app(sources, owner_address: str = "0xowner") -> FastAPI:
    config = Config(hypercerts=HypercertsConfig(owner_address=owner_address))
    container = make_async_container(
        ContextProvider(),
        FakeSourcesProvider(*sources),
        ReportProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]
    )
    app = FastAPI()
    setup_dishka(container, app)
    register_routes(app)
    return app


@pytest_asyncio.fixture
async def client(sources):
    app = _make_app(sources)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    await app.state.dishka_container.close()


class TestReportRoutes:
    @pytest.mark.asyncio
    async def test_get_report_by_slug_returns_flat_document(self, client):
        response = await client.get("/api/v1/reports/foo-1")

        assert response.status_code == 200
        body = response.json()
        assert body["hypercertId"] == "claim-1"
        assert body["title"] == "Foo"
        assert body["slug"] == "foo-1"
        assert body["state"] == "Oaxaca"
        assert body["totalCost"] == 100.0
        assert body["fundedSoFar"] == 50.0

    @pytest.mark.asyncio
    async def test_list_reports(self, client):
        response = await client.get("/api/v1/reports")

        assert response.status_code == 200
        assert [r["slug"] for r in response.json()["reports"]] == ["foo-1"]

    @pytest.mark.asyncio
    async def test_get_by_hypercert_id(self, client):
        response = await client.get("/api/v1/reports/hypercert/claim-1")

        assert response.status_code == 200
        assert response.json()["slug"] == "foo-1"

    @pytest.mark.asyncio
    async def test_unknown_slug_is_404(self, client):
        response = await client.get("/api/v1/reports/nonexistent")

        assert response.status_code == 404
        assert response.json()["code"] == "NotFoundError"

    @pytest.mark.asyncio
    async def test_cache_is_shared_across_requests(self, client, sources):
        claims, _, _ = sources

        await client.get("/api/v1/reports")
        await client.get("/api/v1/reports/foo-1")

        claims.claims_by_owner.assert_awaited_once_with("0xowner")

    @pytest.mark.asyncio
    async def test_cache_status_does_not_trigger_fetch(self, client, sources):
        claims, _, _ = sources

        response = await client.get("/api/v1/reports/cache")

        assert response.json() == {"state": "uninitialized", "count": 0}
        claims.claims_by_owner.assert_not_called()

        await client.get("/api/v1/reports")
        response = await client.get("/api/v1/reports/cache")
        assert response.json() == {"state": "populated", "count": 1}

    @pytest.mark.asyncio
    async def test_funding_update_accumulates(self, client):
        await client.get("/api/v1/reports")

        response = await client.post("/api/v1/reports/claim-1/funding", json={"amount": 25})

        assert response.status_code == 200
        assert response.json() == {"hypercertId": "claim-1", "fundedSoFar": 75.0}
        detail = await client.get("/api/v1/reports/foo-1")
        assert detail.json()["fundedSoFar"] == 75.0

    @pytest.mark.asyncio
    async def test_funding_update_for_unknown_report_is_noop(self, client):
        await client.get("/api/v1/reports")

        response = await client.post("/api/v1/reports/unknown-id/funding", json={"amount": 10})

        assert response.status_code == 200
        assert response.json() == {"hypercertId": "unknown-id", "fundedSoFar": None}

    @pytest.mark.asyncio
    async def test_funding_update_requires_amount(self, client):
        response = await client.post("/api/v1/reports/claim-1/funding", json={})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_remote_failure_is_503(self, client, sources):
        claims, _, _ = sources
        claims.claims_by_owner.side_effect = RemoteFetchError("indexer unreachable")

        response = await client.get("/api/v1/reports/foo-1")

        assert response.status_code == 503
        assert response.json()["message"] == "indexer unreachable"

    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestMissingOwnerAddress:
    @pytest.mark.asyncio
    async def test_reports_request_is_500_configuration_error(self, sources):
        app = _make_app(sources, owner_address="")
        transport = httpx.ASGITransport(app=app)

        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/v1/reports")

        assert response.status_code == 500
        assert response.json()["code"] == "ConfigurationError"
        sources[0].claims_by_owner.assert_not_called()
        await app.state.dishka_container.close()
