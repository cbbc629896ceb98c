from typing import Any

from pydantic import BaseModel, ConfigDict


class MetadataProperty(BaseModel):
    """One entry of the metadata ``properties`` list."""

    model_config = ConfigDict(extra="allow")

    trait_type: str | None = None
    value: Any = None


class Dimension(BaseModel):
    """A hypercert dimension such as work scope or impact timeframe."""

    model_config = ConfigDict(extra="allow")

    name: str | None = None
    value: list[Any] = []
    display_value: str | None = None


class HypercertDimensions(BaseModel):
    model_config = ConfigDict(extra="allow")

    work_scope: Dimension | None = None
    work_timeframe: Dimension | None = None
    impact_scope: Dimension | None = None
    impact_timeframe: Dimension | None = None
    contributors: Dimension | None = None
    rights: Dimension | None = None


class HypercertMetadata(BaseModel):
    """Off-chain descriptive document a claim's ``uri`` points at."""

    model_config = ConfigDict(extra="allow")

    name: str
    description: str | None = None
    image: str | None = None
    external_url: str | None = None
    properties: list[MetadataProperty] = []
    hypercert: HypercertDimensions | None = None

    def property_value(self, trait_type: str) -> Any:
        """Value of the property whose trait_type matches (case-insensitive), or None."""
        wanted = trait_type.casefold()
        for prop in self.properties:
            if prop.trait_type is not None and prop.trait_type.casefold() == wanted:
                return prop.value
        return None
