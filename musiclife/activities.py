"""Concerts and tours the band can organise."""

import struct
from abc import ABC, abstractmethod

from .places import Coach, Plane
from .staff import Bodyguard, SoundTechnician

CONCERT_TICKET_PRICE = 100
TOUR_TICKET_PRICE = 50
TOUR_MIN_COST = 10900

TRANSPORTS = (
    Plane(1000, 10),
    Plane(900, 8),
    Coach(700, 5),
    Coach(750, 6),
)


def _f32(value):
    """Round a number to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _is_event_staff(person):
    return type(person) in (SoundTechnician, Bodyguard)


def _staff_contributions(team, console):
    """Let each event staff member contribute; return technician and bodyguard scores."""
    technician = 0
    bodyguard = 0
    for person in team:
        if type(person) is SoundTechnician:
            technician = person.contribution()
            console.write(person.verdict() + "\n")
        elif type(person) is Bodyguard:
            bodyguard = person.contribution()
            console.write(person.verdict() + "\n")
    return technician, bodyguard


def _popularity_gain(success, popularity):
    return int((float(_f32(success)) / 100.0) * float(_f32(popularity)))


class Activity(ABC):
    """Something the band does that costs money and can succeed."""

    def __init__(self, success=0):
        self.success = success

    @abstractmethod
    def compute_costs(self):
        """Return what the activity costs."""

    @abstractmethod
    def run(self, console):
        """Carry out the activity, reporting on console."""


class Concert(Activity):
    """A single concert in one city."""

    _count = 0

    def __init__(self, success=0, city=None, album=None):
        super().__init__(success)
        self.city = city
        self.album = album
        self.spectators = 0
        self.team = []
        self._cost = 0
        Concert._count += 1

    def hire(self, person):
        """Add a sound technician or bodyguard to the crew; return whether hired."""
        if _is_event_staff(person):
            self.team.append(person)
            return True
        return False

    def estimate_attendance(self):
        """Set the number of spectators and return the fraction of seats filled."""
        capacity = _f32(self.city.capacity)
        estimate = _f32(_f32(self.city.popularity) * capacity)
        self.spectators = int(estimate)
        return _f32(_f32(self.spectators) / capacity)

    def compute_costs(self):
        """Add the city and crew costs to the running total and return it."""
        self._cost += self.city.logistics_cost
        self._cost += sum(person.cost() for person in self.team if _is_event_staff(person))
        return self._cost

    def run(self, console):
        console.write("---RAPORT ACTIVITATE---\n")
        ratio = self.estimate_attendance()
        console.write(f"S-au prezentat {self.spectators} de spectatori la concert\n")
        technician, bodyguard = _staff_contributions(self.team, console)
        success = self.compute_success(ratio, technician, bodyguard)
        console.write(f"Succesul final al concertului a fost de {success}\n")
        return success

    def compute_success(self, attendance_ratio, technician, bodyguard):
        """Set and return the concert's success from attendance and crew."""
        t = _f32(_f32(technician) / 100.0)
        b = _f32(_f32(bodyguard) / 100.0)
        total = _f32(_f32(t + b) + _f32(attendance_ratio))
        self.success = int(_f32(_f32(total / 3.0) * 100.0))
        return self.success

    def profit(self):
        """Return the ticket income weighted by success."""
        income = _f32(CONCERT_TICKET_PRICE * self.spectators)
        return int(_f32(income * _f32(_f32(self.success) / 100.0)))

    def popularity_gain(self, popularity):
        """Return the popularity the concert adds to the current popularity."""
        return _popularity_gain(self.success, popularity)

    @classmethod
    def count(cls):
        """Return how many concerts have been created."""
        return Concert._count

    @classmethod
    def reset_count(cls):
        """Reset the concert counter."""
        Concert._count = 0

    def __str__(self):
        return f"Concertul a avut loc in {self.city.name} cu {self.spectators} spectatori."


def transport_menu():
    """Return the numbered list of available transports."""
    return "".join(f"{number}){transport}\n" for number, transport in enumerate(TRANSPORTS, 1))


def select_transport(console):
    """Read a transport number and return the chosen transport."""
    return TRANSPORTS[console.read_int(1, len(TRANSPORTS)) - 1]


class Tour(Activity):
    """A sequence of concerts in several cities."""

    _count = 0

    def __init__(self, success=0, duration=0, cities=(), tracks=()):
        super().__init__(success)
        self.duration = duration
        self.tickets_sold = 0
        self.cities = list(cities)
        self.tracks = list(tracks)
        self.transport = None
        self.team = []
        Tour._count += 1

    def compute_costs(self):
        """Return the transport and crew cost of one round."""
        total = self.transport.cost()
        total += sum(person.cost() for person in self.team if isinstance(person, (Bodyguard, SoundTechnician)))
        return total

    def run(self, console):
        console.write("\n---RAPORT ACTIVITATE---\n")
        for index in range(self.duration):
            console.write(f"Locatia nr.{index + 1} a turneului")
            spectators, ratio = self.round_attendance(index)
            console.write(f"\nS-au prezentat {spectators} de spectatori\n")
            technician, bodyguard = _staff_contributions(self.team, console)
            success = self.round_success(index, ratio, technician, bodyguard)
            console.write(f"Succesul final al rundei {index + 1} a fost de {success}\n")
        return self.success

    def profit(self):
        """Return the ticket income weighted by success."""
        income = float(_f32(TOUR_TICKET_PRICE * self.tickets_sold))
        return int(income * (float(_f32(self.success)) / 100.0))

    def popularity_gain(self, popularity):
        """Return the popularity the tour adds to the current popularity."""
        return _popularity_gain(self.success, popularity)

    def round_success(self, round_index, attendance_ratio, technician, bodyguard):
        """Add one round's score to the success and return the new total."""
        t = float(_f32(technician)) / 100.0
        b = float(_f32(bodyguard)) / 100.0
        reliability = _f32(_f32(self.transport.reliability) * 0.05)
        score = _f32((t + b + float(_f32(attendance_ratio))) / 3.0 + reliability)
        self.success += int(_f32(score * 100.0))
        return self.success

    def round_attendance(self, round_index):
        """Count the spectators of one round; return them and the fraction of seats filled."""
        city = self.cities[round_index]
        capacity = _f32(city.capacity)
        spectators = int(_f32(_f32(city.popularity) * capacity))
        self.tickets_sold += spectators
        return spectators, _f32(_f32(spectators) / capacity)

    def set_rounds(self, rounds):
        """Set how many rounds the tour has."""
        self.duration = rounds

    def city_unselected(self, city):
        """Return whether the city is not yet on the tour."""
        return not any(chosen == city for chosen in self.cities)

    def add_city(self, city):
        """Add a city to the tour."""
        self.cities.append(city)

    def choose_transport(self, console):
        """Show the transports, read a choice and use it for the tour."""
        console.write("Selecteaza modalitatea de transport: \n")
        console.write(transport_menu())
        self.transport = select_transport(console)
        return self.transport

    def hire(self, person):
        """Add a sound technician or bodyguard to the crew; return whether hired."""
        if _is_event_staff(person):
            self.team.append(person)
            return True
        return False

    @classmethod
    def count(cls):
        """Return how many tours have been created."""
        return Tour._count

    @classmethod
    def reset_count(cls):
        """Reset the tour counter."""
        Tour._count = 0