# kotalist

A small library for keeping track of cities and the people who live in them.
Cities are kept in the order they were added. Each city keeps its own ordered
list of residents.

## Installation

```
pip install .
```

## Usage

The checked operations are in `kotalist.registry.Registry`:

```python
from kotalist.registry import Registry, CityNotFoundError

registry = Registry()
registry.add_city("Bandung")
registry.add_resident("Bandung", "Ani")
registry.add_resident("Bandung", "Budi")

print(registry.total_cities())        # 1
print(registry.total_residents())     # 2
print(registry.count_residents("Bandung"))  # 2
print(registry.describe_city("Bandung"))

try:
    registry.add_resident("Jakarta", "Citra")
except CityNotFoundError as exc:
    print(exc)                        # Kota Jakarta tidak ditemukan.
```

`Registry` offers these methods:

- `add_city(city_name)` and `add_resident(city_name, resident_name)`
- `remove_city(city_name)` removes a city and all of its residents
- `remove_resident(city_name, resident_name)`
- `rename_city(old_name, new_name)` and `rename_resident(city_name, old_name, new_name)`
- `describe_all()` and `describe_city(city_name)` return printable text
- `count_residents(city_name)`, `total_cities()` and `total_residents()`

City names must be unique across the registry. Resident names must be unique
within a city. Failures raise subclasses of `RegistryError`:
`CityExistsError`, `CityNotFoundError`, `ResidentExistsError`,
`ResidentNotFoundError`, `EmptyRegistryError` and `NoResidentsError`. Each
one carries a short message in Indonesian.

The underlying containers are in `kotalist.model`. `City` holds a name and a
list of residents. `CityList` is an ordered collection of cities. It supports
`len()`, iteration, `find`, `append`, `prepend`, `remove`, `clear`,
`reversed` and `format`.

## What it does not do

The package has no interactive menu and no command to run. It is used only
from Python. Data is kept in memory and is not saved anywhere.

## Tests

```
pip install .[test]
pytest
```