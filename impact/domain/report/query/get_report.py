from impact.domain.report.model.report import Report
from impact.domain.report.service.cache import ReportCache
from impact.domain.shared.query import Query, QueryHandler


class GetReportBySlug(Query):
    slug: str


class GetReportBySlugHandler(QueryHandler[GetReportBySlug, Report]):
    cache: ReportCache

    async def run(self, cmd: GetReportBySlug) -> Report:
        return await self.cache.fetch_report_by_slug(cmd.slug)


class GetReportByHypercertId(Query):
    hypercert_id: str


class GetReportByHypercertIdHandler(QueryHandler[GetReportByHypercertId, Report]):
    cache: ReportCache

    async def run(self, cmd: GetReportByHypercertId) -> Report:
        return await self.cache.fetch_report_by_hypercert_id(cmd.hypercert_id)
