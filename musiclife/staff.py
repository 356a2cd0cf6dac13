"""Hired staff: managers, producers, sound technicians and bodyguards."""

from .people import UNKNOWN, Person


def _div(a, b):
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


class Manager(Person):
    """Promotes the band and grows its popularity."""

    def __init__(self, last_name=UNKNOWN, first_name=UNKNOWN, age=0, cost=0,
                 experience=0, connections=0):
        super().__init__(last_name, first_name, age)
        self.fee = cost
        self.experience = experience
        self.connections = connections

    def cost(self):
        return self.fee

    def contribution(self):
        self.experience += 1
        return _div(self.experience + self.connections, 3)

    def describe(self):
        return (
            f"Nume: {self.last_name} {self.first_name}, varsta {self.age} ani , "
            f"(cost: {self.fee}, experienta: {self.experience}, "
            f"conexiuni: {self.connections})"
        )

    def tour_report(self):
        """Return how the manager helped the tour and gain experience."""
        who = f"{self.last_name} {self.first_name}, managerul trupei,"
        if self.connections > 80 and self.experience > 10:
            report = f"{who} a ajutat enorm la promovarea turneului"
        elif self.connections > 50 and self.experience > 5:
            report = f"{who} a contribuit putin la aducerea fanilor la turneu"
        else:
            report = f"{who} nu a ajutat prea tare cu promovarea turneului"
        self.experience += 1
        return report

    def concert_report(self):
        """Gain experience from a concert and return a report."""
        self.experience += 1
        return "Managerul s-a ocupat de promovarea concertului cu succes"

    def yearly_growth(self):
        """Apply the yearly growth of experience, connections and fee."""
        self.experience += 1
        self.connections += int(self.experience * 0.3)
        if self.experience * self.connections > self.fee:
            self.fee = self.experience * self.connections

    def influence(self):
        """Return the yearly popularity bonus the manager brings."""
        return 3 if self.connections + self.experience > 20 else 0

    def __str__(self):
        return (
            f"Nume: {self.last_name}, Prenume: {self.first_name} "
            f"(Varsta: {self.age}, Cost: {self.fee}, "
            f"Experienta: {self.experience}, Conexiuni: {self.connections})"
        )


class Producer(Person):
    """Produces the band's music and affects its budget."""

    def __init__(self, last_name=UNKNOWN, first_name=UNKNOWN, age=0, cost=0,
                 experience=0, successes=0):
        super().__init__(last_name, first_name, age)
        self.fee = cost
        self.experience = experience
        self.successes = successes

    def cost(self):
        return self.fee

    def contribution(self):
        return _div(self.experience + self.successes, 2)

    def describe(self):
        return (
            f"Nume: {self.last_name} {self.first_name}, varsta {self.age} ani "
            f"(experienta: {self.experience}, succese: {self.successes})"
        )

    def tour_report(self):
        """Return how the producer's songs were received on tour."""
        return (
            f"Piesele producatorului, {self.last_name} {self.first_name} "
            "au fost apreciate de public."
        )

    def concert_report(self):
        """Gain a success from a concert and return a report."""
        self.successes += 1
        return "Melodiile producatorului au fost apreciate de fani"

    def yearly_growth(self):
        """Apply the yearly growth of experience, successes and fee."""
        self.experience += 1
        self.successes += _div(self.experience, 2)
        if self.successes + self.experience > 15:
            self.fee = self.successes * self.experience

    def influence(self):
        """Return the yearly budget change the producer brings."""
        return 400 if self.successes + self.experience > 15 else -200

    def __str__(self):
        return (
            f"Nume: {self.last_name}, Prenume: {self.first_name} "
            f"(Varsta: {self.age}, Cost: {self.fee}, "
            f"Experienta: {self.experience}, Succese: {self.successes})"
        )


class _EventStaff(Person):
    """Staff paid per event whose efficiency grows with every event."""

    high_verdict = ""
    mid_verdict = ""
    low_verdict = ""

    def __init__(self, last_name=UNKNOWN, first_name=UNKNOWN, age=0,
                 cost_per_event=0, efficiency=0):
        super().__init__(last_name, first_name, age)
        self.cost_per_event = cost_per_event
        self.efficiency = efficiency

    def cost(self):
        return self.cost_per_event

    def contribution(self):
        self.efficiency += 1
        return self.efficiency

    def verdict(self):
        """Return how the event went given the current efficiency."""
        if self.efficiency >= 70:
            return self.high_verdict
        if self.efficiency >= 30:
            return self.mid_verdict
        return self.low_verdict

    def describe(self):
        return (
            f"Nume: {self.last_name} {self.first_name}, varsta {self.age} ani "
            f"(cost pe eveniment: {self.cost_per_event}, "
            f"eficienta: {self.efficiency})"
        )


class SoundTechnician(_EventStaff):
    """Handles the sound at concerts and tours."""

    high_verdict = "Tehnicianul de sunet a gestionat perfect concertul"
    mid_verdict = (
        "Au fost cateva probleme tehnice, dar acestea au fost rezolvate de tehnician"
    )
    low_verdict = (
        "Au fost destule probleme tehnice in cadrul concertului si nu toate au fost "
        "rezolvate de tehnician, vor exista consecinte ale succesului"
    )

    def __init__(self, last_name=UNKNOWN, first_name=UNKNOWN, age=0,
                 cost_per_event=0, efficiency=0):
        super().__init__(last_name, first_name, age, cost_per_event, efficiency)

    def verdict(self):
        return super().verdict()


class Bodyguard(_EventStaff):
    """Keeps concerts and tours safe."""

    high_verdict = "Bodyguard-ul a avut grija sa nu existe probleme"
    mid_verdict = (
        "Au aparut anumite probleme, insa bodyguard-ul le-a rezolvat in timp"
    )
    low_verdict = (
        "Au fost destule probleme in ceea ce priveste siguranta, bodyguard-ul a facut "
        "tot ce a putut, dar vor exista consecinte in legatura cu succesul concertului"
    )

    def __init__(self, last_name=UNKNOWN, first_name=UNKNOWN, age=0,
                 cost_per_event=0, efficiency=0):
        super().__init__(last_name, first_name, age, cost_per_event, efficiency)

    def verdict(self):
        return super().verdict()