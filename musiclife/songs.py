"""Songs that make up an album."""

from .people import Musician

GENRES = {1: "Pop", 2: "Rock", 3: "Electronic", 4: "Clasic"}


def _read_title_and_genre(song, console):
    console.write("Titlu: ")
    song.title = console.read_line()
    console.write("Gen Muzical: 1) Pop 2) Rock 3) Electronic 4) Clasic\n")
    console.write("Optiunea ta: ")
    song.genre = GENRES[console.read_int(1, 4)]


class Song:
    """A song with a title and a genre."""

    label = "Melodie"

    def __init__(self, title="necunoscut", genre=""):
        self.title = title
        self.genre = genre

    def __eq__(self, other):
        if not isinstance(other, Song):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.title == other.title
            and self.genre == other.genre
        )

    __hash__ = None

    def __str__(self):
        return f"{self.label}: Titlu: {self.title}\nGen Muzical: {self.genre}"


class SimpleSong(Song):
    """A song recorded by the band alone."""

    label = "Melodie Simpla"

    def fill_from(self, console):
        """Ask for the title and genre."""
        _read_title_and_genre(self, console)
        return self


class CollaborativeSong(Song):
    """A song recorded together with another artist."""

    label = "Melodie Colaborativa"

    def __init__(self, title="necunoscut", genre="", artist=None):
        super().__init__(title, genre)
        self.artist = artist if artist is not None else Musician()

    @classmethod
    def from_skill(cls, skill_level):
        """Create an empty song with a collaborator of the given skill."""
        return cls("", "", Musician(skill_level=skill_level))

    def collaborator_contribution(self):
        """Return the collaborator's skill level."""
        return self.artist.skill_level

    def fill_from(self, console, people):
        """Ask for the title, genre and collaborating artist."""
        _read_title_and_genre(self, console)
        console.write("\nArtistul cu care doresti sa faci colaborarea: ")
        self.artist.fill_from(console, people)
        return self

    def __str__(self):
        return (
            f"{super().__str__()}\n"
            f"Artistul cu care a fost facuta colaborarea: {self.artist}"
        )