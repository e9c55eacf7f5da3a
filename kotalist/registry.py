"""A registry of cities and residents with checked add, edit and remove operations."""

from __future__ import annotations

from kotalist.model import City, CityList


class RegistryError(Exception):
    """Base class for every error the registry reports."""


class CityExistsError(RegistryError):
    """A city with the given name is already registered."""

    def __init__(self, city: str) -> None:
        self.city = city
        super().__init__(f"Kota {city} sudah ada dalam daftar.")


class CityNotFoundError(RegistryError, LookupError):
    """No city with the given name is registered."""

    def __init__(self, city: str) -> None:
        self.city = city
        super().__init__(f"Kota {city} tidak ditemukan.")


class ResidentExistsError(RegistryError):
    """The city already has a resident with the given name."""

    def __init__(self, resident: str, city: str) -> None:
        self.resident = resident
        self.city = city
        super().__init__(f"Penduduk {resident} sudah ada di kota {city}.")


class ResidentNotFoundError(RegistryError, LookupError):
    """The city has no resident with the given name."""

    def __init__(self, resident: str, city: str) -> None:
        self.resident = resident
        self.city = city
        super().__init__(f"Penduduk {resident} tidak ditemukan di kota {city}.")


class EmptyRegistryError(RegistryError):
    """The registry holds no cities at all."""

    def __init__(self) -> None:
        super().__init__("Daftar kota kosong.")


class NoResidentsError(RegistryError):
    """The city has no residents."""

    def __init__(self, city: str) -> None:
        self.city = city
        super().__init__(f"Tidak ada penduduk di kota {city}.")


class Registry:
    """Cities with unique names, each holding residents with unique names."""

    def __init__(self, cities: CityList | None = None) -> None:
        self.cities = cities if cities is not None else CityList()

    def _city(self, city_name: str) -> City:
        city = self.cities.find(city_name)
        if city is None:
            raise CityNotFoundError(city_name)
        return city

    def add_city(self, city_name: str) -> None:
        """Register a new, empty city at the end of the list."""
        if self.cities.find(city_name) is not None:
            raise CityExistsError(city_name)
        self.cities.append(City(city_name))

    def add_resident(self, city_name: str, resident_name: str) -> None:
        """Add a resident to the end of an existing city's list."""
        city = self._city(city_name)
        if city.has_resident(resident_name):
            raise ResidentExistsError(resident_name, city_name)
        city.add_resident(resident_name)

    def remove_city(self, city_name: str) -> None:
        """Remove a city together with all of its residents."""
        if not len(self.cities):
            raise EmptyRegistryError()
        try:
            self.cities.remove(city_name)
        except ValueError:
            raise CityNotFoundError(city_name) from None

    def remove_resident(self, city_name: str, resident_name: str) -> None:
        """Remove one resident from a city."""
        city = self._city(city_name)
        if not city.residents:
            raise NoResidentsError(city_name)
        try:
            city.remove_resident(resident_name)
        except ValueError:
            raise ResidentNotFoundError(resident_name, city_name) from None

    def rename_city(self, old_name: str, new_name: str) -> None:
        """Give a city a new name that no other city uses."""
        if not len(self.cities):
            raise EmptyRegistryError()
        city = self._city(old_name)
        if self.cities.find(new_name) is not None:
            raise CityExistsError(new_name)
        city.name = new_name

    def rename_resident(self, city_name: str, old_name: str, new_name: str) -> None:
        """Give a resident a new name that no one else in the city uses."""
        city = self._city(city_name)
        if not city.residents:
            raise NoResidentsError(city_name)
        if not city.has_resident(old_name):
            raise ResidentNotFoundError(old_name, city_name)
        if city.has_resident(new_name):
            raise ResidentExistsError(new_name, city_name)
        city.rename_resident(old_name, new_name)

    def describe_all(self) -> str:
        """Render every city with its resident count and residents."""
        if not len(self.cities):
            raise EmptyRegistryError()
        parts = []
        for city in self.cities:
            parts.append(f"\nKota: {city.name}\n")
            parts.append(f"Jumlah Penduduk: {len(city.residents)}\n")
            parts.append("Daftar Penduduk:\n")
            parts.append(city.format_residents() if city.residents else "- Tidak ada penduduk\n")
        return "".join(parts)

    def describe_city(self, city_name: str) -> str:
        """Render one city with its resident count and residents."""
        city = self._city(city_name)
        text = f"\nKota: {city.name}\nJumlah Penduduk: {len(city.residents)}\n"
        return text + (city.format_residents() if city.residents else "- Tidak ada penduduk\n")

    def count_residents(self, city_name: str) -> int:
        """Return the number of residents in one city."""
        return len(self._city(city_name).residents)

    def total_cities(self) -> int:
        """Return the number of registered cities."""
        return len(self.cities)

    def total_residents(self) -> int:
        """Return the number of residents across all cities."""
        return sum(len(city.residents) for city in self.cities)