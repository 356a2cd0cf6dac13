"""Albums recorded by the band."""

from .songs import CollaborativeSong

QUALITY_FACTOR = 2
BUDGET_INFLUENCE_RATE = 10
MIN_EARNING_PER_SONG = 50
MAX_QUALITY = 10


def _div(a, b):
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


class Album:
    """A set of songs released in a given year."""

    _count = 0

    def __init__(self, title="Album Necunoscut", release_year=0, track_count=0,
                 songs=()):
        self.title = title
        self.release_year = release_year
        self.track_count = track_count
        self.songs = list(songs)
        self.quality = 0
        type(self)._bump()

    @classmethod
    def _bump(cls):
        Album._count += 1

    def compute_quality(self, average_skill, producer_contribution):
        """Set the album quality from the band's skill and the producer."""
        collaborations = [s for s in self.songs if isinstance(s, CollaborativeSong)]
        if collaborations:
            collab_skill = _div(
                sum(s.collaborator_contribution() for s in collaborations),
                len(collaborations),
            )
            quality = _div(average_skill + collab_skill, 2)
        else:
            quality = average_skill
        quality = int(quality + producer_contribution * 0.1)
        self.quality = min(quality, MAX_QUALITY)
        return self.quality

    def popularity_gain(self, manager_contribution):
        """Return the popularity the album brings."""
        if self.quality > 7:
            base = 8
        elif self.quality > 4:
            base = 6
        else:
            base = 4
        return base + _div(manager_contribution, 5)

    def profit(self, budget, manager_contribution):
        """Return the money the album earns."""
        earning = (
            MIN_EARNING_PER_SONG * self.track_count
            + self.quality * _div(budget, BUDGET_INFLUENCE_RATE)
        ) * self.release_year
        return int(earning + manager_contribution * 0.1)

    def rename(self, title):
        """Change the album's title."""
        self.title = title

    @classmethod
    def count(cls):
        """Return how many albums have been created."""
        return Album._count

    @classmethod
    def reset_count(cls):
        """Reset the album counter."""
        Album._count = 0

    def __eq__(self, other):
        if not isinstance(other, Album):
            return NotImplemented
        return self.title == other.title

    __hash__ = None

    def __str__(self):
        header = (
            f"Nume album: {self.title}\n An lansare: {self.release_year}\n"
            f" Numar de melodii: {self.track_count}\n"
            f" Calitatea albumului: {self.quality}"
        )
        return header + "".join(f"\n{song}" for song in self.songs)