from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class CMSReport(BaseModel):
    """Editorial record from the CMS, matched to claims by ``title``.

    Directus rows are taken as stored: drafts may lack a title or slug, and
    such rows only matter if a claim matches them.
    """

    model_config = ConfigDict(extra="ignore")

    id: int | str
    title: str | None = None
    slug: str | None = None
    status: str | None = None
    date_created: str | None = None
    date_updated: str | None = None
    story: str | None = None
    bc_ratio: float | None = None
    villages_impacted: float | int | None = None
    people_impacted: float | int | None = None
    verified_by: str | None = None
    byline: str | None = None
    total_cost: float = 0.0

    @field_validator("total_cost", mode="before")
    @classmethod
    def _blank_cost_is_zero(cls, value: Any) -> Any:
        # Directus sends decimals as strings and leaves unset costs null
        if value is None or value == "":
            return 0.0
        return value
