from fastapi import HTTPException

MIN_VPROMMS_ID_LENGTH = 10


def _split_ids(ids: str) -> list[str]:
    return [item.strip() for item in ids.split(",") if item.strip()]


def _parse_way_id(way_id: str) -> int:
    try:
        parsed_way_id = int(way_id)
    except ValueError:
        raise HTTPException(400, "Way ID must be a non-zero number")

    if parsed_way_id == 0:
        raise HTTPException(400, "Way ID must be a non-zero number")

    return parsed_way_id


def validate_road_ids(ids: str) -> list[str]:
    road_ids = _split_ids(ids)
    if not road_ids:
        raise HTTPException(400, "At least one road ID must be provided")

    return road_ids


def validate_way_id(way_id: str) -> int:
    return _parse_way_id(way_id)


def validate_way_ids(way_ids: str) -> list[int]:
    parsed_way_ids = [_parse_way_id(way_id) for way_id in _split_ids(way_ids)]
    if not parsed_way_ids:
        raise HTTPException(400, "At least one way ID must be provided")

    return parsed_way_ids


def validate_vpromms_id(vpromms_id: str) -> str:
    if len(vpromms_id) < MIN_VPROMMS_ID_LENGTH:
        raise HTTPException(
            400, f"VProMMs ID must be at least {MIN_VPROMMS_ID_LENGTH} characters"
        )

    return vpromms_id
