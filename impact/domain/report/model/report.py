from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Report(BaseModel):
    """A claim merged with its metadata and CMS content.

    Serialized with camelCase keys (``hypercertId``, ``fundedSoFar``, ...), the
    flat document shape the report pages consume. ``funded_so_far`` is the only
    field that changes after the report is cached.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # From the claim and its metadata
    hypercert_id: str
    title: str
    summary: str | None = None
    image: str | None = None
    original_report_url: str | None = None
    state: str | None = None
    category: str | None = None
    work_timeframe: str | None = None
    impact_scope: str | None = None
    impact_timeframe: str | None = None
    contributors: list[str] = []

    # From the CMS
    cms_id: int | str
    status: str | None = None
    date_created: str | None = None
    slug: str | None = None
    story: str | None = None
    bc_ratio: float | None = None
    villages_impacted: float | int | None = None
    people_impacted: float | int | None = None
    verified_by: str | None = None
    date_updated: str | None = None
    byline: str | None = None
    total_cost: float = 0.0

    funded_so_far: float = 0.0
