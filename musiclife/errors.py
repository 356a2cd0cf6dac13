"""Exceptions raised by the game."""


class GameError(Exception):
    """Base class for errors that end or interrupt a game."""

    default_message = "Eroare in joc"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class SkillLevelError(GameError):
    """A skill level went above the allowed maximum."""

    default_message = "SkillLevel-ul nu poate fi mai mare decat 10"


class NegativePopularityError(GameError):
    """The player's popularity dropped below zero."""

    default_message = "Popularitatea a luat valori negative, jocul se incheie aici"


class YearsExhaustedError(GameError):
    """All the years available to the player have been used."""

    default_message = "Ai epuizat cei 20 de ani disponibili, jocul s-a incheiat"