"""Record a funding contribution against a cached report."""

import math

from pydantic import ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from impact.domain.report.service.cache import ReportCache
from impact.domain.shared.command import Command, CommandHandler, Result


class UpdateFundedAmount(Command):
    hypercert_id: str
    amount: float

    @field_validator("amount")
    @classmethod
    def _finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("amount must be a finite number")
        return value


class FundedAmountUpdated(Result):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    hypercert_id: str
    funded_so_far: float | None  # None when no report with that id is cached


class UpdateFundedAmountHandler(CommandHandler[UpdateFundedAmount, FundedAmountUpdated]):
    cache: ReportCache

    async def run(self, cmd: UpdateFundedAmount) -> FundedAmountUpdated:
        report = await self.cache.update_funded_amount(cmd.hypercert_id, cmd.amount)
        return FundedAmountUpdated(
            hypercert_id=cmd.hypercert_id,
            funded_so_far=report.funded_so_far if report is not None else None,
        )
