from impact.domain.report.model.report import Report
from impact.domain.report.service.cache import ReportCache
from impact.domain.shared.query import Query, QueryHandler, Result


class ListReports(Query): ...


class ReportList(Result):
    reports: list[Report]


class ListReportsHandler(QueryHandler[ListReports, ReportList]):
    cache: ReportCache

    async def run(self, cmd: ListReports) -> ReportList:
        return ReportList(reports=await self.cache.fetch_reports())
