import json
from collections.abc import Iterable
from typing import Any

from shapely.errors import ShapelyError
from shapely.geometry import shape

from field_data.exceptions import MalformedGeometryError
from field_data.model import (
    Feature,
    FeatureCollection,
    FieldGeometryRow,
    GroupedFeatureCollections,
    Source,
)


def parse_geometry(row: FieldGeometryRow) -> dict[str, Any]:
    try:
        geometry = json.loads(row.geometry)
    except json.JSONDecodeError as exc:
        raise MalformedGeometryError(row.road_id, str(exc)) from exc

    if not isinstance(geometry, dict):
        raise MalformedGeometryError(row.road_id, "geometry is not a JSON object")

    try:
        shape(geometry)
    except (ShapelyError, AttributeError, KeyError, TypeError, ValueError) as exc:
        raise MalformedGeometryError(row.road_id, str(exc) or repr(exc)) from exc

    return geometry


def _to_feature(row: FieldGeometryRow, properties: dict[str, str]) -> Feature:
    return {**parse_geometry(row), "properties": properties}


def group_geometries_by_id(
    rows: Iterable[FieldGeometryRow],
) -> GroupedFeatureCollections:
    """
    Groups field geometries by road ID and then by source.

    Returns a list with one single-key object per road ID, in order of first
    occurrence. Each object maps the road ID to feature collections, one for
    each source of that road, also in order of first occurrence.
    """
    rows_by_road_id: dict[str, dict[Source, list[FieldGeometryRow]]] = {}
    for row in rows:
        rows_by_source = rows_by_road_id.setdefault(row.road_id, {})
        rows_by_source.setdefault(row.source, []).append(row)

    return [
        {
            road_id: [
                FeatureCollection(
                    features=[
                        _to_feature(
                            row, {"source": str(source), "road_id": road_id}
                        )
                        for row in source_rows
                    ]
                )
                for source, source_rows in rows_by_source.items()
            ]
        }
        for road_id, rows_by_source in rows_by_road_id.items()
    ]


def make_geometries_feature_collection(
    rows: Iterable[FieldGeometryRow],
) -> FeatureCollection:
    return FeatureCollection(
        features=[
            _to_feature(row, {"road_id": row.road_id, "source": str(row.source)})
            for row in rows
        ]
    )
