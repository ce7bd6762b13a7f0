from pydantic import BaseModel, Field


class ChangesetTag(BaseModel):
    k: str
    v: str


class ChangesetContent(BaseModel):
    tag: list[ChangesetTag] = Field(default_factory=list)


class ChangesetOsm(BaseModel):
    changeset: ChangesetContent = Field(default_factory=ChangesetContent)


class ChangesetCreateRequest(BaseModel):
    # Placeholders until users are authorized by OAuth
    uid: int = 1
    user: str = "placeholder"
    osm: ChangesetOsm = Field(default_factory=ChangesetOsm)
