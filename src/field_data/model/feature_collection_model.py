from typing import Any, Literal

from pydantic import BaseModel, Field

# GeoJSON geometry with a `properties` object laid over it
Feature = dict[str, Any]


class FeatureCollection(BaseModel):
    type: Literal["FeatureCollection"] = Field(default="FeatureCollection")
    features: list[Feature] = Field(default_factory=list)


GroupedFeatureCollections = list[dict[str, list[FeatureCollection]]]
