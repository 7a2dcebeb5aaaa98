"""District registry and wrap-around location selection."""

from collections.abc import Iterator, Sequence

from ..models.location import Location

DISTRICTS: tuple[Location, ...] = (
    Location(id="shibuya", display_name="Shibuya", localized_name="渋谷", latitude=35.6595, longitude=139.7004),
    Location(id="shinjuku", display_name="Shinjuku", localized_name="新宿", latitude=35.6938, longitude=139.7036),
    Location(id="ginza", display_name="Ginza", localized_name="銀座", latitude=35.6717, longitude=139.7649),
    Location(id="harajuku", display_name="Harajuku", localized_name="原宿", latitude=35.6702, longitude=139.7026),
    Location(id="akihabara", display_name="Akihabara", localized_name="秋葉原", latitude=35.6984, longitude=139.7731),
    Location(id="roppongi", display_name="Roppongi", localized_name="六本木", latitude=35.6627, longitude=139.7298),
)


class LocationCycle:
    """Ordered registry of locations that wraps around on `next`."""

    def __init__(self, locations: Sequence[Location] = DISTRICTS):
        if not locations:
            raise ValueError("LocationCycle needs at least one location")
        ids = [loc.id for loc in locations]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Duplicate location ids: {ids}")
        self._locations = tuple(locations)

    def __len__(self) -> int:
        return len(self._locations)

    def __iter__(self) -> Iterator[Location]:
        return iter(self._locations)

    def index(self, current: Location) -> int:
        """Return the position of a location in the registry.

        Raises:
            ValueError: If the location is not registered
        """
        for i, loc in enumerate(self._locations):
            if loc.id == current.id:
                return i
        raise ValueError(f"Location '{current.id}' is not in the registry")

    def get(self, location_id: str) -> Location:
        """Look up a location by id.

        Raises:
            KeyError: If no location has that id
        """
        for loc in self._locations:
            if loc.id == location_id:
                return loc
        raise KeyError(location_id)

    def next(self, current: Location) -> Location:
        """Return the location after `current`, wrapping to the first."""
        return self._locations[(self.index(current) + 1) % len(self._locations)]
