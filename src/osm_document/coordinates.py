from osm_document.model import NodeRow

COORDINATE_SCALE = 10_000_000
COORDINATE_PRECISION = 7


def to_decimal_degrees(value: int | str) -> float:
    return int(value) / COORDINATE_SCALE


def node_coordinates(node: NodeRow) -> tuple[float, float]:
    """
    Returns (lon, lat) pair of the node in decimal degrees.
    """
    return to_decimal_degrees(node.longitude), to_decimal_degrees(node.latitude)


def format_coordinate(value: int | str) -> str:
    """
    Renders a scaled coordinate as decimal degrees without scientific notation,
    e.g. 97879030 -> "9.787903", 1 -> "0.0000001".
    """
    text = f"{to_decimal_degrees(value):.{COORDINATE_PRECISION}f}"
    text = text.rstrip("0").rstrip(".")

    return "0" if text in ("", "-0") else text
