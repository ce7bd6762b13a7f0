from .exceptions import MalformedGeometryError
from .existence_mapper import filter_existing_ids, map_existing_ids
from .geometry_grouper import (
    group_geometries_by_id,
    make_geometries_feature_collection,
    parse_geometry,
)
from .model import (
    Feature,
    FeatureCollection,
    FieldGeometryRow,
    GroupedFeatureCollections,
    RoadIdRow,
    Source,
)

__all__ = [
    "MalformedGeometryError",
    "map_existing_ids",
    "filter_existing_ids",
    "group_geometries_by_id",
    "make_geometries_feature_collection",
    "parse_geometry",
    "Feature",
    "FeatureCollection",
    "FieldGeometryRow",
    "GroupedFeatureCollections",
    "RoadIdRow",
    "Source",
]
