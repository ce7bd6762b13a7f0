from pydantic import BaseModel, ConfigDict


class TagRow(BaseModel):
    """
    Key/value annotation of a single way or node.
    Exactly one of `way_id` and `node_id` references the owner entity.
    """

    model_config = ConfigDict(frozen=True)

    k: str
    v: str
    way_id: int | None = None
    node_id: int | None = None
