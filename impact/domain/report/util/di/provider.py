from dishka import Provider, provide

from impact.config import Config
from impact.domain.report.command.update_funded_amount import UpdateFundedAmountHandler
from impact.domain.report.port.claim_source import ClaimSource
from impact.domain.report.port.editorial_source import EditorialSource
from impact.domain.report.port.metadata_store import MetadataStore
from impact.domain.report.query.get_cache_status import GetCacheStatusHandler
from impact.domain.report.query.get_report import (
    GetReportByHypercertIdHandler,
    GetReportBySlugHandler,
)
from impact.domain.report.query.list_reports import ListReportsHandler
from impact.domain.report.service.cache import ReportCache
from impact.util.di.scope import Scope


class ReportProvider(Provider):
    # One cache for the application lifetime
    @provide(scope=Scope.APP)
    def get_report_cache(
        self,
        config: Config,
        claim_source: ClaimSource,
        metadata_store: MetadataStore,
        editorial_source: EditorialSource,
    ) -> ReportCache:
        return ReportCache(
            claim_source=claim_source,
            metadata_store=metadata_store,
            editorial_source=editorial_source,
            owner_address=config.hypercerts.owner_address,
            state_property=config.hypercerts.state_property,
        )

    # Command Handlers
    update_funded_amount_handler = provide(UpdateFundedAmountHandler, scope=Scope.UOW)

    # Query Handlers
    list_reports_handler = provide(ListReportsHandler, scope=Scope.UOW)
    get_report_by_slug_handler = provide(GetReportBySlugHandler, scope=Scope.UOW)
    get_report_by_hypercert_id_handler = provide(GetReportByHypercertIdHandler, scope=Scope.UOW)
    get_cache_status_handler = provide(GetCacheStatusHandler, scope=Scope.UOW)
