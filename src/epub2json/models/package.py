"""Data models for the OPF package descriptor."""

from pydantic import BaseModel, ConfigDict


class ManifestEntry(BaseModel):
    """Single item declared in the OPF manifest."""

    model_config = ConfigDict(frozen=True)

    id: str
    href: str
    media_type: str

    @property
    def is_xhtml(self) -> bool:
        return self.media_type == "application/xhtml+xml"


class SpineItem(BaseModel):
    """Single itemref from the OPF spine."""

    model_config = ConfigDict(frozen=True)

    idref: str
    linear: bool = True


class Metadata(BaseModel):
    """Dublin-Core metadata written to metadata.json.

    Field order is the key order of the serialized file.
    """

    title: str
    publisher: str
    creators: list[str]
    date: str
    identifier: str
    language: str
    description: str
    rights: str
    source: str
    type: str
