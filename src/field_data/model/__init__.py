from .feature_collection_model import (
    Feature,
    FeatureCollection,
    GroupedFeatureCollections,
)
from .field_geometry_model import FieldGeometryRow, RoadIdRow, Source

__all__ = [
    "Feature",
    "FeatureCollection",
    "GroupedFeatureCollections",
    "FieldGeometryRow",
    "RoadIdRow",
    "Source",
]
