from .bounding_box import BoundingBox, get_bounding_box
from .coordinates import format_coordinate, node_coordinates, to_decimal_degrees
from .exceptions import EmptyWayError, WayNotFound
from .model import NodeRow, TagRow, WayEntities, WayRow
from .osm_document_writer import OsmDocumentWriter
from .tag_attacher import attach_tags

__all__ = [
    "BoundingBox",
    "get_bounding_box",
    "to_decimal_degrees",
    "node_coordinates",
    "format_coordinate",
    "EmptyWayError",
    "WayNotFound",
    "NodeRow",
    "TagRow",
    "WayRow",
    "WayEntities",
    "OsmDocumentWriter",
    "attach_tags",
]
