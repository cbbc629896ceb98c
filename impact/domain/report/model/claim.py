from pydantic import BaseModel, ConfigDict, Field


class Claim(BaseModel):
    """An on-chain hypercert claim as returned by the indexer.

    Only ``id`` and ``uri`` are interpreted; the remaining indexer fields are
    carried along untouched.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    id: str
    uri: str | None = None
    owner: str | None = None
    creator: str | None = None
    contract: str | None = None
    token_id: str | None = Field(default=None, alias="tokenID")
    chain_name: str | None = Field(default=None, alias="chainName")
    total_units: str | None = Field(default=None, alias="totalUnits")
