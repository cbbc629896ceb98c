"""Unit tests for report query and command handlers."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from impact.domain.report.command.update_funded_amount import (
    UpdateFundedAmount,
    UpdateFundedAmountHandler,
)
from impact.domain.report.model.report import Report
from impact.domain.report.query.get_cache_status import GetCacheStatus, GetCacheStatusHandler
from impact.domain.report.query.get_report import (
    GetReportByHypercertId,
    GetReportByHypercertIdHandler,
    GetReportBySlug,
    GetReportBySlugHandler,
)
from impact.domain.report.query.list_reports import ListReports, ListReportsHandler
from impact.domain.report.service.cache import CacheState, ReportCache


def _report(**overrides) -> Report:
    data = {"hypercert_id": "claim-1", "title": "Foo", "cms_id": 1, "slug": "foo-1"}
    data.update(overrides)
    return Report(**data)


class TestQueryHandlers:
    @pytest.mark.asyncio
    async def test_list_reports(self):
        cache = AsyncMock(spec=ReportCache)
        cache.fetch_reports.return_value = [_report()]

        result = await ListReportsHandler(cache=cache).run(ListReports())

        assert [r.slug for r in result.reports] == ["foo-1"]

    @pytest.mark.asyncio
    async def test_get_by_slug(self):
        cache = AsyncMock(spec=ReportCache)
        cache.fetch_report_by_slug.return_value = _report()

        result = await GetReportBySlugHandler(cache=cache).run(GetReportBySlug(slug="foo-1"))

        assert result.hypercert_id == "claim-1"
        cache.fetch_report_by_slug.assert_awaited_once_with("foo-1")

    @pytest.mark.asyncio
    async def test_get_by_hypercert_id(self):
        cache = AsyncMock(spec=ReportCache)
        cache.fetch_report_by_hypercert_id.return_value = _report()

        result = await GetReportByHypercertIdHandler(cache=cache).run(
            GetReportByHypercertId(hypercert_id="claim-1")
        )

        assert result.slug == "foo-1"

    @pytest.mark.asyncio
    async def test_cache_status_does_not_fetch(self):
        cache = MagicMock(spec=ReportCache)
        cache.state = CacheState.UNINITIALIZED
        cache.get_reports.return_value = []

        result = await GetCacheStatusHandler(cache=cache).run(GetCacheStatus())

        assert result.state == CacheState.UNINITIALIZED
        assert result.count == 0
        cache.fetch_reports.assert_not_called()


class TestUpdateFundedAmountHandler:
    @pytest.mark.asyncio
    async def test_returns_new_total(self):
        cache = AsyncMock(spec=ReportCache)
        cache.update_funded_amount.return_value = _report(funded_so_far=75.0)

        result = await UpdateFundedAmountHandler(cache=cache).run(
            UpdateFundedAmount(hypercert_id="claim-1", amount=25)
        )

        assert result.funded_so_far == 75.0
        cache.update_funded_amount.assert_awaited_once_with("claim-1", 25.0)

    @pytest.mark.asyncio
    async def test_unknown_target_returns_none_total(self):
        cache = AsyncMock(spec=ReportCache)
        cache.update_funded_amount.return_value = None

        result = await UpdateFundedAmountHandler(cache=cache).run(
            UpdateFundedAmount(hypercert_id="unknown-id", amount=10)
        )

        assert result.hypercert_id == "unknown-id"
        assert result.funded_so_far is None

    def test_rejects_non_finite_amount(self):
        with pytest.raises(ValueError):
            UpdateFundedAmount(hypercert_id="claim-1", amount=float("inf"))
