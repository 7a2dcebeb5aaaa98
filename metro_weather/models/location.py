"""Location model."""

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    """A selectable district with its coordinates."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    display_name: str
    localized_name: str
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Location):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
