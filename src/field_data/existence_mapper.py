from collections.abc import Iterable, Sequence

from field_data.model import RoadIdRow


def _get_existing_ids(existing_rows: Iterable[RoadIdRow]) -> set[str]:
    return {row.road_id for row in existing_rows}


def map_existing_ids(
    existing_rows: Iterable[RoadIdRow], ids: Sequence[str]
) -> list[dict[str, bool]]:
    """
    Returns one `{id: exists}` entry per requested ID, keeping order and
    repeated IDs.
    """
    existing_ids = _get_existing_ids(existing_rows)
    return [{road_id: road_id in existing_ids} for road_id in ids]


def filter_existing_ids(
    existing_rows: Iterable[RoadIdRow], ids: Sequence[str]
) -> list[str]:
    existing_ids = _get_existing_ids(existing_rows)
    return [road_id for road_id in ids if road_id in existing_ids]
