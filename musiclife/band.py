"""The band: its members, staff and albums."""

from .people import UNKNOWN, Musician
from .staff import Manager, Producer

MEMBERS_TO_PICK = 3


class Band:
    """A band with a manager, a producer, members and recorded albums."""

    def __init__(self, name=UNKNOWN, manager=None, producer=None):
        self.name = name
        self.manager = manager
        self.producer = producer
        self.members = []
        self.former_members = []
        self.albums = []

    def team(self):
        """Return the manager, the producer and the members, in that order."""
        people = [person for person in (self.manager, self.producer) if person]
        return people + list(self.members)

    def has_former_members(self):
        """Return whether anyone has left the band."""
        return bool(self.former_members)

    def add_former_member(self, musician):
        """Record a musician as a former member."""
        self.former_members.append(musician)

    def restore_former_member(self, index):
        """Bring the former member at index back into the band."""
        if 0 <= index < len(self.former_members):
            self.members.append(self.former_members.pop(index))

    def average_skill(self):
        """Return the members' average skill level, truncated."""
        if not self.members:
            raise ValueError("Trupa nu are membri")
        total = sum(member.skill_level for member in self.members)
        quotient = abs(total) // len(self.members)
        return quotient if total >= 0 else -quotient

    def record_album(self, album):
        """Add an album to the band's discography."""
        self.albums.append(album)

    def ranking(self):
        """Sort the members from most to least skilled and return them."""
        self.members.sort(key=lambda member: member.skill_level, reverse=True)
        return list(self.members)

    def remove_member(self, index):
        """Move the member at index to the former members; return them, or None."""
        if not 0 <= index < len(self.members):
            return None
        member = self.members.pop(index)
        self.add_former_member(member)
        return member

    def add_member(self, musician):
        """Recruit a musician if the best member outranks them; return whether they joined."""
        best = self.ranking()[0]
        if best > musician:
            self.members.append(musician)
            return True
        return False

    def choose_album(self, console):
        """List the albums and return the one chosen on console."""
        if not self.albums:
            raise IndexError("Trupa nu are albume")
        console.write("Selecteaza ce album vrei sa fie prezentat in cadrul concertului\n")
        for number, album in enumerate(self.albums, 1):
            console.write(f"{number}. {album}\n")
        console.write("Optiunea ta: ")
        return self.albums[console.read_int(1, len(self.albums)) - 1]

    def drop_exhausted(self):
        """Remove and return the members whose skill fell to zero."""
        gone = [member for member in self.members if member.skill_level == 0]
        self.members = [member for member in self.members if member.skill_level != 0]
        return gone

    def has_members(self):
        """Return whether the band still has members."""
        return bool(self.members)

    def has_duplicate_album(self):
        """Return whether the latest album shares its title with an earlier one."""
        if not self.albums:
            return False
        *earlier, latest = self.albums
        return any(album == latest for album in earlier)

    def build(self, console, people):
        """Ask for the name, manager, producer and three members from people."""
        people = list(people)
        managers = [p for p in people if isinstance(p, Manager)]
        producers = [p for p in people if isinstance(p, Producer)]
        musicians = [p for p in people if isinstance(p, Musician)]

        console.write("\nNume trupa: ")
        self.name = console.read_line()
        console.write("Pentru inceput vom infiinta trupa\n")
        console.write("Alege un manager: \n")
        for number, manager in enumerate(managers, 1):
            console.write(f"{number}) {manager}\n")
        console.write("Optiunea ta: ")
        self.manager = managers[console.read_int(1, len(managers)) - 1]

        console.write("Alege un producator: \n")
        for number, producer in enumerate(producers, 1):
            console.write(f"{number}) {producer}\n")
        console.write("Optiunea ta: ")
        self.producer = producers[console.read_int(1, len(producers)) - 1]

        console.write("Acum vei avea de ales 3 membrii ai trupei\n")
        console.write('Scrie "c" pentru a contiuna:')
        console.expect(["c"])
        console.write("\n")
        for number, musician in enumerate(musicians, 1):
            console.write(f"{number}) {musician}\n")
        for slot in range(1, MEMBERS_TO_PICK + 1):
            console.write(f"\nAlege Membrul nr.{slot}: ")
            while True:
                chosen = musicians[console.read_int(1, len(musicians)) - 1]
                if any(member == chosen for member in self.members):
                    console.write("Membru deja in trupa. Reincearca: ")
                    continue
                self.members.append(chosen)
                break
        return self

    def __str__(self):
        members = "".join(
            f"{number}) {member}\n\n" for number, member in enumerate(self.members, 1)
        )
        return (
            f"Nume trupa: {self.name}\nManager: {self.manager}\n"
            f"\nProducator: {self.producer}\nMembrii: {members}"
        )