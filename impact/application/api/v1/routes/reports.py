"""Report REST routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel, Field

from impact.domain.report.command.update_funded_amount import (
    FundedAmountUpdated,
    UpdateFundedAmount,
    UpdateFundedAmountHandler,
)
from impact.domain.report.model.report import Report
from impact.domain.report.query.get_cache_status import (
    CacheStatus,
    GetCacheStatus,
    GetCacheStatusHandler,
)
from impact.domain.report.query.get_report import (
    GetReportByHypercertId,
    GetReportByHypercertIdHandler,
    GetReportBySlug,
    GetReportBySlugHandler,
)
from impact.domain.report.query.list_reports import (
    ListReports,
    ListReportsHandler,
    ReportList,
)

router = APIRouter(prefix="/reports", tags=["Reports"], route_class=DishkaRoute)


class FundingBody(BaseModel):
    """Body of a funding update."""

    amount: float = Field(allow_inf_nan=False)


@router.get("", response_model=ReportList)
async def list_reports(
    handler: FromDishka[ListReportsHandler],
) -> ReportList:
    return await handler.run(ListReports())


# Declared before /{slug} so "cache" is not taken for a slug
@router.get("/cache", response_model=CacheStatus)
async def get_cache_status(
    handler: FromDishka[GetCacheStatusHandler],
) -> CacheStatus:
    return await handler.run(GetCacheStatus())


@router.get("/hypercert/{hypercert_id}", response_model=Report)
async def get_report_by_hypercert_id(
    hypercert_id: str,
    handler: FromDishka[GetReportByHypercertIdHandler],
) -> Report:
    return await handler.run(GetReportByHypercertId(hypercert_id=hypercert_id))


@router.get("/{slug}", response_model=Report)
async def get_report(
    slug: str,
    handler: FromDishka[GetReportBySlugHandler],
) -> Report:
    return await handler.run(GetReportBySlug(slug=slug))


@router.post("/{hypercert_id}/funding", response_model=FundedAmountUpdated)
async def update_funded_amount(
    hypercert_id: str,
    body: FundingBody,
    handler: FromDishka[UpdateFundedAmountHandler],
) -> FundedAmountUpdated:
    return await handler.run(UpdateFundedAmount(hypercert_id=hypercert_id, amount=body.amount))
