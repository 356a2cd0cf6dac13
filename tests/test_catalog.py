from collections import Counter

from musiclife.catalog import default_locations, default_people
from musiclife.people import Musician
from musiclife.staff import Bodyguard, Manager, Producer, SoundTechnician


def test_locations_order_and_size():
    cities = default_locations()
    assert len(cities) == 20
    assert cities[0].name == "Bucuresti"
    assert cities[-1].name == "Stockholm"


def test_locations_have_unique_names():
    names = [city.name for city in default_locations()]
    assert len(set(names)) == len(names)


def test_location_values_from_table():
    cluj = default_locations()[1]
    assert cluj.name == "Cluj-Napoca"
    assert cluj.popularity == 0.8
    assert cluj.capacity == 300
    assert cluj.logistics_cost == 5000


def test_people_kinds_and_order():
    people = default_people()
    kinds = Counter(type(p) for p in people)
    assert kinds[Manager] == 3
    assert kinds[Producer] == 3
    assert kinds[Musician] == 9
    assert kinds[SoundTechnician] == 3
    assert kinds[Bodyguard] == 3
    assert isinstance(people[0], Manager)
    assert isinstance(people[-1], Bodyguard)


def test_musician_values():
    musicians = [p for p in default_people() if isinstance(p, Musician)]
    first = musicians[0]
    assert first.stage_name == "Simi"
    assert first.instrument == "chitara"
    assert first.skill_level == 2


def test_calls_return_independent_objects():
    first = default_people()
    second = default_people()
    first[6].skill_level = 10
    assert second[6].skill_level == 2
    first_cities = default_locations()
    first_cities.pop()
    assert len(default_locations()) == 20