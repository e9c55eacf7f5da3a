"""Cities and the residents living in them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass
class City:
    """A named city holding an ordered list of resident names."""

    name: str
    residents: list[str] = field(default_factory=list)

    def has_resident(self, name: str) -> bool:
        """Return True if a resident with exactly this name lives here."""
        return name in self.residents

    def add_resident(self, name: str) -> None:
        """Append a resident to the end of the list."""
        self.residents.append(name)

    def remove_resident(self, name: str) -> None:
        """Remove the first resident with this name; ValueError if absent."""
        try:
            self.residents.remove(name)
        except ValueError:
            raise ValueError(f"resident {name!r} not found in {self.name!r}") from None

    def rename_resident(self, old: str, new: str) -> None:
        """Rename the first resident called ``old``; ValueError if absent."""
        try:
            position = self.residents.index(old)
        except ValueError:
            raise ValueError(f"resident {old!r} not found in {self.name!r}") from None
        self.residents[position] = new

    def reversed(self) -> City:
        """Return a new city with the same name and residents in reverse order."""
        return City(self.name, self.residents[::-1])

    def format_residents(self) -> str:
        """Render the resident list as printed text."""
        if not self.residents:
            return "List penduduk kosong.\n"
        lines = ["Daftar Penduduk:"]
        lines.extend(f"- {resident}" for resident in self.residents)
        return "\n".join(lines) + "\n"


class CityList:
    """An ordered collection of cities."""

    def __init__(self, cities: Iterable[City] = ()) -> None:
        self._cities: list[City] = list(cities)

    def __len__(self) -> int:
        return len(self._cities)

    def __iter__(self) -> Iterator[City]:
        return iter(self._cities)

    def find(self, name: str) -> City | None:
        """Return the first city with this name, or None."""
        return next((city for city in self._cities if city.name == name), None)

    def append(self, city: City) -> None:
        """Add a city at the end."""
        self._cities.append(city)

    def prepend(self, city: City) -> None:
        """Add a city at the front."""
        self._cities.insert(0, city)

    def remove(self, name: str) -> City:
        """Remove and return the first city with this name; ValueError if absent."""
        for position, city in enumerate(self._cities):
            if city.name == name:
                return self._cities.pop(position)
        raise ValueError(f"city {name!r} not found")

    def clear(self) -> None:
        """Remove every city and its residents."""
        self._cities.clear()

    def reversed(self) -> CityList:
        """Return a copy with cities in reverse order; residents keep their order."""
        return CityList(City(city.name, list(city.residents)) for city in reversed(self._cities))

    def format(self) -> str:
        """Render every city with its residents as printed text."""
        if not self._cities:
            return "List kota kosong.\n"
        parts = ["Daftar Kota:\n"]
        for city in self._cities:
            parts.append(f"- {city.name}\n")
            parts.append(city.format_residents())
        return "".join(parts)