"""People in the game and the musicians who form the band."""

from abc import ABC, abstractmethod

UNKNOWN = "necunoscut"
MAX_SKILL = 10
INSTRUMENTS = {1: "voce", 2: "chitara", 3: "tobe"}


def _half(value):
    """Halve an integer, truncating toward zero."""
    return int(value / 2)


class Person(ABC):
    """Anyone the band can hire or recruit."""

    def __init__(self, last_name=UNKNOWN, first_name=UNKNOWN, age=0):
        self.last_name = last_name
        self.first_name = first_name
        self.age = age

    @abstractmethod
    def cost(self):
        """Return what this person costs."""

    @abstractmethod
    def contribution(self):
        """Return this person's contribution to an activity."""

    @abstractmethod
    def describe(self):
        """Return a one-line description of this person."""


class Musician(Person):
    """A band member or collaborating artist."""

    def __init__(
        self,
        last_name=UNKNOWN,
        first_name=UNKNOWN,
        age=0,
        stage_name=UNKNOWN,
        instrument=UNKNOWN,
        skill_level=0,
        cooperation=0,
        ego=0,
    ):
        super().__init__(last_name, first_name, age)
        self.stage_name = stage_name
        self.instrument = instrument
        self.skill_level = skill_level
        self.cooperation = cooperation
        self.ego = ego

    def status(self):
        """Return the musician's stage name, instrument and skill."""
        return (
            f"Muzician: {self.stage_name}\n"
            f"Tip: {self.instrument}\n"
            f"SkillLevel: {self.skill_level}"
        )

    def decline(self):
        """Lose one skill level, as happens every year."""
        self.skill_level -= 1

    def rehearse(self):
        """Gain one skill level, capped at the maximum; return a report."""
        self.skill_level += 1
        if self.skill_level >= MAX_SKILL:
            self.skill_level = MAX_SKILL
            return f"SkillLevel-ul pentru {self.stage_name} a ajuns deja la nivelul maxim"
        return f"{self.stage_name} si-a crescut skillLevel-ul la {self.skill_level}"

    def cost(self):
        return 0

    def contribution(self):
        return _half(self.cooperation - self.ego)

    def describe(self):
        return (
            f"Nume: {self.last_name} {self.first_name}, varsta {self.age} ani "
            f"(skill: {self.skill_level}, cooperativitate: {self.cooperation}, "
            f"ego: {self.ego})"
        )

    def concert_report(self):
        """Return how the musician behaved at a concert."""
        if self.cooperation < self.ego:
            return f"{self.stage_name} a cantat, dar s-a certat mult cu trupa"
        return f"{self.stage_name} a cantat, si a pastrat o atmosfera placuta in trupa"

    def tour_report(self):
        """Return how the musician performed on tour."""
        if self.skill_level > 8:
            return f"{self.stage_name} a cantat excelent"
        if self.skill_level > 3:
            return f"{self.stage_name} a cantat bine, dar s-a vazut ca nu era prea bine pregatit"
        return f"{self.stage_name} s-a chinuit destul de tare sa tina pasul."

    def fill_from(self, console, people):
        """Ask for the musician's details until they match nobody in people."""
        people = list(people)
        while True:
            console.write("Nume: ")
            self.last_name = console.read_line()
            console.write("\nPrenume: ")
            self.first_name = console.read_line()
            console.write("\nVarsta (numar intre 18 - 60): ")
            self.age = console.read_int(18, 60)
            console.write("\nNume de Scena: ")
            self.stage_name = console.read_line()
            console.write("\nTip Instrument: ")
            console.write("\n1. Voce  2. Chitara  3. Tobe\n")
            self.instrument = INSTRUMENTS[console.read_int(1, 3)]
            if any(isinstance(p, Musician) and p == self for p in people):
                console.write(
                    "\nUn muzician cu aceste date exista deja in baza de date. "
                    "Reintrodu datele.\n"
                )
                continue
            return self

    def __eq__(self, other):
        if not isinstance(other, Musician):
            return NotImplemented
        return self.last_name == other.last_name and self.first_name == other.first_name

    __hash__ = None

    def __gt__(self, other):
        if not isinstance(other, Musician):
            return NotImplemented
        return self.skill_level > other.skill_level

    def __str__(self):
        return (
            f"Nume: {self.last_name}, Prenume: {self.first_name} "
            f"(Varsta: {self.age}, Nume de Scena: {self.stage_name}, "
            f"Tip Instrument: {self.instrument}, Skill Level: {self.skill_level}, "
            f"Cooperativitate: {self.cooperation}, Ego: {self.ego})"
        )