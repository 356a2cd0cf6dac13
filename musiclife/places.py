"""Cities where the band can play and ways of travelling between them."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(eq=False)
class City:
    """A concert location."""

    name: str = "necunoscut"
    popularity: float = 0.0
    capacity: int = 0
    logistics_cost: int = 0
    risk: float = 0.0

    def __eq__(self, other):
        if not isinstance(other, City):
            return NotImplemented
        return self.name == other.name

    def __hash__(self):
        return hash(self.name)

    def __lt__(self, other):
        if not isinstance(other, City):
            return NotImplemented
        return self.logistics_cost < other.logistics_cost

    def describe(self):
        """Return a one-line summary of the city."""
        return (
            f"{self.name}: Popularitatea trupei: {self.popularity:g}, "
            f"capacitate public: {self.capacity}, "
            f"costuri logistice: {self.logistics_cost}  !!risc: {self.risk:g}"
        )


@dataclass(frozen=True)
class Transport:
    """A way of travelling between tour locations."""

    label: ClassVar[str] = "Transport"
    cost_per_round: int = 0
    reliability: float = 0.0

    def cost(self):
        """Return the travel cost for one location."""
        return self.cost_per_round

    def __str__(self):
        return (
            f"{self.label} - costul pentru deplasare per locatie: "
            f"{self.cost_per_round}, fiabilitate: {self.reliability:g}"
        )


@dataclass(frozen=True)
class Plane(Transport):
    """Travel by plane."""

    label: ClassVar[str] = "Avion"


@dataclass(frozen=True)
class Coach(Transport):
    """Travel by coach."""

    label: ClassVar[str] = "Autocar"