from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class Source(StrEnum):
    ROAD_LAB_PRO = "RoadLabPro"
    ROUTE_SHOOT = "RouteShoot"


class RoadIdRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    road_id: str


class FieldGeometryRow(RoadIdRow):
    """
    Field survey geometry of a single road.
    Attributes:
        road_id (str): Identifier of the road the geometry belongs to.
        source (Source): Survey tool which recorded the geometry.
        geometry (str): GeoJSON geometry encoded as text by the database.
    """

    source: Source
    geometry: str
