"""The player: the year, budget, popularity and band of the current game."""

from .band import Band

START_BUDGET = 5000


class Player:
    """The single player of the game."""

    _instance = None

    def __init__(self):
        self.year = 0
        self.budget = START_BUDGET
        self.popularity = 0
        self.band = None

    @classmethod
    def get_instance(cls):
        """Return the shared player, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def change_budget(self, amount):
        """Add amount (possibly negative) to the budget."""
        self.budget += amount

    def change_popularity(self, amount):
        """Add amount (possibly negative) to the popularity."""
        self.popularity += amount

    def next_year(self):
        """Move on to the next year."""
        self.year += 1

    def build_band(self, console, people):
        """Form a new band by asking on console, choosing from people."""
        band = Band()
        band.build(console, people)
        self.band = band
        return band

    def statistics(self):
        """Return the year, budget and popularity as text."""
        text = (
            f"\n---Anul: {self.year}---\n"
            f"Buget: {self.budget} RON\n"
            f"Popularitate: {self.popularity}\n"
        )
        if self.band is None:
            text += "Trupa nu a fost inca setata.\n"
        return text

    def reset(self):
        """Start over with the initial budget and no band."""
        self.budget = START_BUDGET
        self.popularity = 0
        self.year = 0
        self.band = None