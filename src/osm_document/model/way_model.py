import datetime

from pydantic import BaseModel, ConfigDict, Field

from osm_document.model.node_model import NodeRow
from osm_document.model.tag_model import TagRow


class WayRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    visible: bool = True
    version: int = 1
    changeset_id: int = 0
    timestamp: datetime.datetime
    user: str = ""
    uid: int = 0
    # Order of node references defines the path geometry
    nodes: list[int] = Field(default_factory=list)
    tags: list[TagRow] = Field(default_factory=list)


class WayEntities(BaseModel):
    model_config = ConfigDict(frozen=True)

    ways: list[WayRow]
    nodes: list[NodeRow]
    way_tags: list[TagRow]
