"""One game session: the yearly cycle, the menu and the end-of-game checks."""

from . import actions
from .activities import Concert, Tour
from .album import Album
from .catalog import default_locations, default_people
from .errors import NegativePopularityError, YearsExhaustedError
from .people import Musician, Person
from .places import City
from .player import Player
from .registry import RegistryBuilder
from .staff import Manager, Producer

MAX_REHEARSALS = 3
WINNING_POPULARITY = 100
MAX_YEARS = 20
CONCERT_POPULARITY = 10
TOUR_POPULARITY = 50

_CONTINUE = '\nScrie "c" pentru a continua: '
_LOST_BANNER = (
    "\n===========================\n"
    "|  AI PIERDUT JOCUL! :(((((|\n"
    "===========================\n"
)
_WON_BANNER = (
    "\n===========================\n"
    "|  AI CASTIGAT JOCUL! :))))|\n"
    "===========================\n"
)


def _build_registry(kind, items):
    builder = RegistryBuilder(kind)
    for item in items:
        builder.add(item)
    return builder.build()


class Game:
    """A game of MusicLife played on a console."""

    def __init__(self, console):
        self.console = console
        self.rehearsals = 0
        self.player = Player.get_instance()
        self.locations = _build_registry(City, default_locations())
        self.people = _build_registry(Person, default_people())

    def _pause(self, prompt=_CONTINUE):
        self.console.write(prompt)
        self.console.expect(["c"])

    def setup(self):
        """Show the tips and let the player form the band."""
        write = self.console.write
        write("\n+++ Tips & tricks +++\n")
        write(
            "\n- fii atent la atributele personajelor deoarece influenteaza mult "
            "experienta din joc\n"
        )
        write(
            "- alege managerii si producatorii cu cele mai bune atribute pentru "
            "cresteri mari de popularitate si buget\n"
        )
        write(
            "- alege artistii ghidandu-te in special dupa skillLevel-ul lor, "
            "acesta este cel mai relevant\n"
        )
        self.player = Player.get_instance()
        band = self.player.build_band(self.console, self.people.items())
        write("Asa arata trupa ta acum: \n")
        for person in band.team():
            if isinstance(person, Musician):
                write(f"Membru al trupei: \n{person}\n\n")
            elif isinstance(person, Manager):
                write(f"Manager al trupei: \n{person}\n\n")
            elif isinstance(person, Producer):
                write(f"Producatorul Muzical al trupei: \n{person}\n\n")
        self._pause('\nScrie "c" pentru a continua: ')
        return band

    def start(self):
        """Greet the player and wait for the game to be started."""
        write = self.console.write
        write("\n=================================\n")
        write("Bine ai venit in jocul MusicLife!\n")
        write("=================================\n")
        write(
            "MusicLife este un joc care are la baza dezvoltarea unei trupe in lumea "
            "muzicala. Tu vei indruma trupa si va trebui sa dai ce ai mai bun pentru "
            "a-ti aduce trupa la succes.\n"
        )
        write("---------------------------------------\n")
        write(
            "Ai la dispozitie 20 de ani pentru a castiga jocul, va trebui sa aduci "
            "trupa la succes international(popularitate 100), poti trece la anul "
            'urmator inserand "n" in cadrul optiunii din meniu, dar ai grija deoarece '
            "membrii pot ajunge sa paraseasca trupa, iar in cazul in care ramai fara "
            "membri vei pierde jocul.\n"
        )
        write('Scrie "start" pentru a incepe: ')
        self.console.expect(["start"])
        write("\n")
        self.player = Player.get_instance()
        self.show_data()

    def show_data(self):
        """Show the year, budget and popularity."""
        self.console.write(self.player.statistics())

    def menu(self):
        """Show the main menu for the current popularity."""
        write = self.console.write
        write(
            "\nPentru a trece la anul urmator (n), pentru a reseta jocul (r), "
            "pentru a parasi jocul (exit)\n"
        )
        write("1. Repetitii cu trupa\n")
        write("2. Inregistreaza album\n")
        write("3. Modifica statusul trupei (recruteaza membru nou, elimina membru)\n")
        write("4. Afiseaza statusul trupei\n")
        write("5. Help\n")
        if self.player.popularity > CONCERT_POPULARITY:
            write("6. Organizeaza concert\n")
            if self.player.popularity > TOUR_POPULARITY:
                write("7. Organizeaza turneu\n")
        write("Optiunea ta: ")

    def next_year(self):
        """Advance one year, paying staff and ageing the band."""
        player = self.player
        write = self.console.write
        player.next_year()
        self.rehearsals = 0
        if player.year <= 1:
            return
        for person in player.band.team():
            if isinstance(person, Manager):
                person.yearly_growth()
                player.change_budget(-person.cost())
                write(f"-{person.cost()}$ (plata Manager)\n")
                player.change_popularity(person.influence())
                write(f"+{person.influence()} popularitate\n")
            elif isinstance(person, Producer):
                person.yearly_growth()
                player.change_budget(-person.cost())
                write(f"-{person.cost()}$ (plata Producator Muzical)\n")
                influence = person.influence()
                player.change_budget(influence)
                write(f"+{influence}$\n" if influence > 0 else f"{influence}$\n")
            elif isinstance(person, Musician):
                person.decline()
                if person.skill_level == 1:
                    write(
                        f"\nAi grija! {person.stage_name} are skillLevel-ul 1 in acest "
                        "moment, daca nu ii cresti skillLevel-ul va fi nevoit sa "
                        "paraseasca trupa in urmatorul an!\n"
                    )

    def add_budget(self, amount):
        """Add money to the budget and report it."""
        self.player.change_budget(amount)
        self.console.write(f"+ ${amount}\n")

    def spend_budget(self, amount):
        """Take money from the budget and report it."""
        self.player.change_budget(-amount)
        self.console.write(f"- ${amount}\n")

    def add_popularity(self, amount):
        """Add popularity and report it."""
        self.player.change_popularity(amount)
        self.console.write(f"+ {amount} popularitate\n")

    def is_over(self):
        """Return whether the game has ended, announcing the outcome."""
        write = self.console.write
        player = self.player
        band = player.band
        for member in band.drop_exhausted():
            write(
                f"{member.stage_name} a ramas la skillLevel-ul 0, acesta a parasit trupa.\n"
            )
        if not band.has_members():
            write(_LOST_BANNER)
            write("\n\n Din pacate toti membrii tai au parasit trupa si ai pierdut jocul\n")
            return True
        if player.popularity >= WINNING_POPULARITY:
            write(_WON_BANNER)
            write("\n\n Ai ajuns la popularitate 100 si ai castigat! Bravo!!\n")
            return True
        if player.budget <= 0:
            write(_LOST_BANNER)
            write("\n\n Din pacate resursele tale au fost epuizate, ai pierdut jocul\n")
            return True
        try:
            if player.popularity < 0:
                raise NegativePopularityError()
            if player.year >= MAX_YEARS:
                raise YearsExhaustedError()
        except (NegativePopularityError, YearsExhaustedError) as error:
            write(f"{error}\n")
            return True
        return False

    def rehearse(self):
        """Rehearse with the band, at most three times a year."""
        if self.rehearsals < MAX_REHEARSALS:
            self.rehearsals += 1
            for person in self.player.band.team():
                if isinstance(person, Musician):
                    self.console.write(f"\n{person.rehearse()}\n")
        else:
            self.console.write(
                "\nMembrii au obosit, ai facut destule repetitii in decursul acestui an\n"
            )
        self._pause()

    def record_album(self):
        """Record a new album."""
        return actions.record_album(self)

    def modify_band(self):
        """Remove, recruit or bring back a member."""
        return actions.modify_band(self)

    def show_band(self):
        """Show the band."""
        self.console.write(f"{self.player.band}\n")

    def help(self):
        """Show hints and strategies."""
        write = self.console.write
        write("\nSugestii si strategii: \n")
        write(
            "--- in primii ani este relevant sa te focusezi pe cresterea "
            "skillLevel-ului, acest lucru se poate face prin repetitii\n"
        )
        write(
            "--- inregistrarea de albume este foarte importanta la inceput deoarece "
            "ajuta mult la cresterea bugetului\n"
        )
        write(
            "--- concertul si turneul sunt modalitati prin care trupa poate creste "
            "popularitatea mai repede insa sunt activitati foarte costisitoare\n"
        )
        self._pause('Scrie "c" pentru a continua: ')

    def concert(self):
        """Organise a concert."""
        return actions.organize_concert(self)

    def tour(self):
        """Organise a tour."""
        return actions.organize_tour(self)

    def _reset_state(self):
        self.player.reset()
        Album.reset_count()
        Concert.reset_count()
        Tour.reset_count()

    def reset(self):
        """Ask for confirmation and wipe the progress; return whether it was wiped."""
        self.console.write(
            "\nEsti sigur? Asta va sterge totul si nu se va putea recupera!\n"
            'Scrie "da/nu": \n'
        )
        if self.read_choice(["da", "nu"]) == "da":
            self._reset_state()
            return True
        return False

    def final_report(self):
        """Offer and show the totals of the player's activity."""
        write = self.console.write
        write('\nVrei sa vezi raportul final al activitatii tale? "da" sau "nu"): ')
        if self.read_choice(["da", "nu"]) == "nu":
            write("\nAi parasit jocul.\n")
            return
        write("\n======= RAPORT FINAL =======\n")
        write(f" Totalul albumelor inregistrate: {Album.count()}\n")
        write(f" Totalul concertelor organizate: {Concert.count()}\n")
        write(f" Totalul turneelor organizate: {Tour.count()}\n")

    def retry(self):
        """Ask whether to play again; reset the progress if so."""
        self.console.write('\nVrei sa mai incerci odata jocul?\nOptiunea ta ("da"/"nu"): ')
        if self.console.choose(["da", "nu"]) == "da":
            self._reset_state()
            return True
        self.console.write("\nSper ca ti-a placut jocul!:)))\n")
        return False

    def read_int(self, low, high):
        """Read a whole number between low and high."""
        return self.console.read_int(low, high)

    def read_choice(self, options):
        """Read one of the given options."""
        return self.console.choose(options)