from collections.abc import Sequence

from shapely.geometry import MultiPoint

from osm_document.coordinates import node_coordinates
from osm_document.exceptions import EmptyWayError
from osm_document.model import NodeRow

BoundingBox = tuple[float, float, float, float]


def get_bounding_box(
    nodes: Sequence[NodeRow], way_id: int | None = None
) -> BoundingBox:
    """
    Returns (min_lon, min_lat, max_lon, max_lat) of the given way nodes.
    """
    if not nodes:
        raise EmptyWayError(way_id)

    points = MultiPoint([node_coordinates(node) for node in nodes])
    min_lon, min_lat, max_lon, max_lat = points.bounds

    return min_lon, min_lat, max_lon, max_lat
