"""Inspect the report cache without triggering a fetch."""

from impact.domain.report.service.cache import CacheState, ReportCache
from impact.domain.shared.query import Query, QueryHandler, Result


class GetCacheStatus(Query): ...


class CacheStatus(Result):
    state: CacheState
    count: int


class GetCacheStatusHandler(QueryHandler[GetCacheStatus, CacheStatus]):
    cache: ReportCache

    async def run(self, cmd: GetCacheStatus) -> CacheStatus:
        return CacheStatus(state=self.cache.state, count=len(self.cache.get_reports()))
