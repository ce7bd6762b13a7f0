import datetime

from pydantic import BaseModel, ConfigDict, Field

from osm_document.model.tag_model import TagRow


class NodeRow(BaseModel):
    """
    Node as stored in the database.
    Attributes:
        id (int): Unique identifier of the node.
        latitude (int): Latitude in decimal degrees scaled by 10^7.
        longitude (int): Longitude in decimal degrees scaled by 10^7.
        changeset_id (int): Changeset which last modified the node.
        user (str): Display name of the author.
        uid (int): ID of the author.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    latitude: int
    longitude: int
    visible: bool = True
    version: int = 1
    changeset_id: int = 0
    timestamp: datetime.datetime
    user: str = ""
    uid: int = 0
    tags: list[TagRow] = Field(default_factory=list)
