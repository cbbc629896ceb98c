"""Unit tests for DirectusEditorialSource adapter."""

import httpx
import pytest

from impact.config import CmsConfig
from impact.domain.shared.error import RemoteFetchError
from impact.infrastructure.http.editorial_source import DirectusEditorialSource

CMS_URL = "https://cms.example"


def _source(handler) -> DirectusEditorialSource:
    client = httpx.AsyncClient(base_url=CMS_URL, transport=httpx.MockTransport(handler))
    return DirectusEditorialSource(client=client, config=CmsConfig(url=CMS_URL))


class TestListReports:
    @pytest.mark.asyncio
    async def test_lists_reports(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={
                    "data": [
                        {"id": 1, "title": "Foo", "slug": "foo-1", "total_cost": "100"},
                        {"id": 2, "title": "Bar", "slug": "bar-2", "total_cost": None},
                    ]
                },
            )

        reports = await _source(handler).list_reports()

        assert [r.slug for r in reports] == ["foo-1", "bar-2"]
        assert reports[0].total_cost == 100.0
        assert reports[1].total_cost == 0.0
        assert seen[0].url.path == "/items/reports"
        assert seen[0].url.params["limit"] == "-1"

    @pytest.mark.asyncio
    async def test_incomplete_draft_row_does_not_fail_listing(self):
        source = _source(
            lambda request: httpx.Response(
                200,
                json={
                    "data": [
                        {"id": 1, "title": "Foo", "slug": "foo-1", "total_cost": "100"},
                        {
                            "id": 2,
                            "title": "Draft",
                            "slug": None,
                            "status": "draft",
                            "people_impacted": 12.5,
                            "total_cost": None,
                        },
                        {"id": 3, "title": None, "slug": None, "status": "draft"},
                    ]
                },
            )
        )

        reports = await source.list_reports()

        assert [r.slug for r in reports] == ["foo-1", None, None]
        assert reports[1].title == "Draft"
        assert reports[1].people_impacted == 12.5
        assert reports[2].title is None

    @pytest.mark.asyncio
    async def test_server_error_is_wrapped(self):
        source = _source(lambda request: httpx.Response(500, text="boom"))

        with pytest.raises(RemoteFetchError, match="CMS reports"):
            await source.list_reports()

    @pytest.mark.asyncio
    async def test_missing_data_key_is_wrapped(self):
        source = _source(lambda request: httpx.Response(200, json={"errors": []}))

        with pytest.raises(RemoteFetchError):
            await source.list_reports()

    @pytest.mark.asyncio
    async def test_non_numeric_cost_is_rejected(self):
        source = _source(
            lambda request: httpx.Response(
                200, json={"data": [{"id": 1, "title": "Foo", "slug": "foo", "total_cost": "n/a"}]}
            )
        )

        with pytest.raises(RemoteFetchError):
            await source.list_reports()


class TestFundedAmount:
    @pytest.mark.asyncio
    async def test_sums_contributions_for_claim(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"data": [{"sum": {"amount": "125.5"}}]})

        amount = await _source(handler).funded_amount_by_claim_id("claim-1")

        assert amount == 125.5
        params = seen[0].url.params
        assert seen[0].url.path == "/items/contributions"
        assert params["filter[hypercert_id][_eq]"] == "claim-1"
        assert params["aggregate[sum]"] == "amount"

    @pytest.mark.asyncio
    async def test_no_contributions_is_zero(self):
        source = _source(
            lambda request: httpx.Response(200, json={"data": [{"sum": {"amount": None}}]})
        )

        assert await source.funded_amount_by_claim_id("claim-1") == 0.0

    @pytest.mark.asyncio
    async def test_empty_aggregate_is_zero(self):
        source = _source(lambda request: httpx.Response(200, json={"data": []}))

        assert await source.funded_amount_by_claim_id("claim-1") == 0.0

    @pytest.mark.asyncio
    async def test_failure_names_the_claim(self):
        source = _source(lambda request: httpx.Response(503))

        with pytest.raises(RemoteFetchError, match="claim-9"):
            await source.funded_amount_by_claim_id("claim-9")
