"""The cities and people available at the start of a game."""

from .people import Musician
from .places import City
from .staff import Bodyguard, Manager, Producer, SoundTechnician

_LOCATIONS = (
    ("Bucuresti", 0.5, 300, 4000, 0),
    ("Cluj-Napoca", 0.8, 300, 5000, 0.1),
    ("Timisoara", 0.4, 100, 3000, 0),
    ("Iasi", 0.6, 200, 4000, 0.1),
    ("Brasov", 0.53, 100, 4000, 0.1),
    ("Constanta", 0.7, 200, 4000, 0),
    ("Sibiu", 0.5, 300, 5000, 0.3),
    ("Oradea", 0.7, 200, 3000, 0.1),
    ("Londra", 0.3, 600, 7000, 0.6),
    ("Paris", 0.3, 700, 8000, 0.4),
    ("Berlin", 0.2, 600, 7000, 0.4),
    ("Roma", 0.4, 700, 7000, 0.2),
    ("Madrid", 0.2, 400, 6000, 0.5),
    ("Amsterdam", 0.3, 500, 6000, 0.5),
    ("Praga", 0.3, 400, 5000, 0.1),
    ("Viena", 0.1, 500, 7000, 0.5),
    ("Budapesta", 0.4, 400, 4000, 0.1),
    ("Atena", 0.4, 400, 5500, 0.2),
    ("Lisabona", 0.3, 300, 4500, 0.3),
    ("Stockholm", 0.4, 300, 5000, 0.2),
)

_MANAGERS = (
    ("Gheorghe", "Cristian", 25, 150, 3, 10),
    ("Stoinescu", "Valentina", 23, 100, 2, 6),
    ("Neacsu", "Rares", 24, 100, 2, 3),
)

_PRODUCERS = (
    ("Muresan", "Larisa - Elena", 26, 170, 4, 3),
    ("Iordanescu", "Costin", 23, 140, 2, 1),
    ("Rosu", "Sarina", 22, 100, 1, 1),
)

_MUSICIANS = (
    ("Sorescu", "Simona", 20, "Simi", "chitara", 2, 5, 5),
    ("Elvira", "Roxana", 21, "Roxana", "chitara", 3, 6, 8),
    ("Popescu", "Sebastian", 21, "Sebastian", "chitara", 3, 7, 3),
    ("Marinescu", "Cornelia", 19, "Cornelia", "voce", 3, 8, 4),
    ("Nedelcu", "Robert", 22, "Robert", "voce", 4, 5, 1),
    ("Ghinescu", "Miruna", 19, "Miruna", "voce", 3, 9, 5),
    ("Marin", "Alexandru", 22, "Alex", "tobe", 4, 3, 2),
    ("Ilie", "Elena", 21, "Eli", "tobe", 3, 3, 8),
    ("Coman", "Andrei", 22, "Andrei", "tobe", 3, 4, 3),
)

_TECHNICIANS = (
    ("Sarinescu", "Eliza", 23, 500, 29),
    ("Rinescu", "Valeriu", 24, 600, 30),
    ("Coman", "Maria", 23, 600, 49),
)

_BODYGUARDS = (
    ("Marian", "Ovidiu", 30, 400, 25),
    ("Gheorghe", "Sergiu", 40, 500, 30),
    ("Simion", "Alin", 41, 500, 29),
)


def default_locations():
    """Return fresh copies of the cities the band can play in."""
    return [City(*row) for row in _LOCATIONS]


def default_people():
    """Return fresh copies of everyone the band can hire or recruit."""
    return [
        *(Manager(*row) for row in _MANAGERS),
        *(Producer(*row) for row in _PRODUCERS),
        *(Musician(*row) for row in _MUSICIANS),
        *(SoundTechnician(*row) for row in _TECHNICIANS),
        *(Bodyguard(*row) for row in _BODYGUARDS),
    ]