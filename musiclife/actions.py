"""The interactive game actions: albums, band changes, concerts and tours.

Each action takes a game object with the attributes ``console``, ``player``,
``locations`` and ``people`` (registries) and the methods ``read_int``,
``read_choice``, ``spend_budget``, ``add_budget`` and ``add_popularity``.
"""

import re

from .activities import Concert, Tour
from .album import Album
from .people import Musician
from .songs import CollaborativeSong, SimpleSong
from .staff import Bodyguard, Manager, Producer, SoundTechnician

_LEADING_INT = re.compile(r"[+-]?\d+")
_CONTINUE = '\nScrie "c" pentru a continua: '
_CONTINUE_PLAIN = 'Scrie "c" pentru a continua: '
MIN_ALBUM_BUDGET = 500


def _pause(game, prompt=_CONTINUE):
    game.console.write(prompt)
    game.console.expect(["c"])


def _offer_tips(game, tips):
    console = game.console
    console.write("\nVrei cateva tips-uri?\nOptiunea ta (da/nu): ")
    if game.read_choice(["da", "nu"]) == "da":
        console.write("\n++++ Tips ++++\n")
        console.write("".join(f"{tip}\n" for tip in tips))
        console.write('Scrie "c" pentru a continua: \n')
        console.expect(["c"])


def _read_index(console, error):
    """Read the leading whole number of the next non-empty line."""
    while True:
        line = console.read_line().strip()
        if not line:
            continue
        match = _LEADING_INT.match(line)
        if match is None:
            console.write(error)
            continue
        return int(match.group())


def _band(game):
    return game.player.band


def _read_song(game, songs, collaborative):
    console = game.console
    if collaborative:
        song = CollaborativeSong.from_skill(_band(game).average_skill())
        song.fill_from(console, game.people.items())
    else:
        song = SimpleSong().fill_from(console)
    duplicate = any(existing == song for existing in songs)
    if duplicate:
        console.write("\nMelodia aceasta deja exista! Mai incercam odata\n")
    else:
        songs.append(song)
    if collaborative:
        game.people.add(song.artist)
        console.write("\nMuzicianul a fost adaugat cu succes in baza de date.\n")
    return not duplicate


def record_album(game):
    """Record an album with songs chosen on the console."""
    console = game.console
    player = game.player
    band = _band(game)
    if player.budget < MIN_ALBUM_BUDGET:
        console.write("\nNe pare rau! Nu ai suficienti bani pentru a inregistra un album\n")
        _pause(game)
        return None
    _offer_tips(game, [
        "Este important sa nu consumi foarte tare bugetul la inceput",
        "SkillLevel-ul membrilor influenteaza mult calitatea albumului",
        "Melodiile in colaborare cu artisti sunt un risc daca skillLevel-ul "
        "membrilor trupei nu este prea mare",
    ])
    console.write("\n-------- Trupa inregistreaza un album acum ---------\n")
    console.write("Care este bugetul pe care vrei sa il folosesti pentru album(minimul este 500)?\n")
    console.write(f"Nu poti folosi mai mult de {player.budget} (bugetul tau disponibil)\n")
    console.write("Raspunsul tau: ")
    invested = console.read_int(MIN_ALBUM_BUDGET, player.budget)
    console.write("\n")
    game.spend_budget(invested)
    console.write("\nCate melodii vrei sa aibe albumul?\nRaspunsul tau (intre 2 si 6): ")
    track_count = game.read_int(2, 6)
    console.write("\n")

    songs = []
    number = 1
    while number <= track_count:
        console.write(f"\nMelodia nr. {number}: \n")
        console.write("Vrei ca trupa sa inregistreze o melodie normala sau impreuna cu un alt artist?\n")
        console.write("Raspunsul tau (1 pentru prima varianta, 2 pentru a doua): ")
        choice = game.read_int(1, 2)
        if _read_song(game, songs, collaborative=choice == 2):
            number += 1

    console.write("\nAi creat melodiile, acum sa finalizam ultimele detalii pentru album\n")
    console.write("Denumirea albumului: ")
    album = Album(console.read_line(), player.year, track_count, songs)
    band.record_album(album)
    while band.has_duplicate_album():
        console.write("\nAi deja un album cu acest nume! Mai incearca: ")
        album.rename(console.read_line())

    manager_contribution = 0
    producer_contribution = 0
    for person in band.team():
        if isinstance(person, Producer):
            producer_contribution = person.contribution()
        elif isinstance(person, Manager):
            manager_contribution = person.contribution()
    album.compute_quality(band.average_skill(), producer_contribution)
    game.add_popularity(album.popularity_gain(manager_contribution))
    game.add_budget(album.profit(invested, manager_contribution))
    console.write(f"\n{album}\n")
    _pause(game)
    return album


def modify_band(game):
    """Remove, recruit or bring back a band member."""
    console = game.console
    band = _band(game)
    _offer_tips(game, [
        "Este important ca membrii trupei sa aiba atribute cat mai bune",
        "SkillLevel-ul membrilor este foarte important",
        "Daca vei alege sa adaugi un membru nou, acesta poate refuza propunerea "
        "daca membrii aflati in trupa nu sunt la nivelul lui de pregatire",
        "Daca elimini un membru il poti recupera cu usurinta mai tarziu",
    ])
    console.write("\nAcesta este statusul actual al trupei: \n")
    for person in band.team():
        if isinstance(person, Musician):
            console.write(f"\n{person.status()}\n")
    _pause(game, _CONTINUE_PLAIN)

    console.write("\n1. Vrei sa elimini un membru\n2. Vrei sa recrutezi un membru nou\n")
    has_former = band.has_former_members()
    if has_former:
        console.write("3. Vrei sa readuci un fost membru\n")
    console.write("Raspunsul tau: ")
    answer = game.read_int(1, 3 if has_former else 2)

    if answer == 1:
        console.write("\nMembrii vor fi afisati de la cel mai priceput la cel mai putin priceput: \n")
        top = band.ranking()
        for number, member in enumerate(top, 1):
            console.write(f"{number}. {member}\n\n")
        console.write("\nNumarul membrului pe care vrei sa il elimini: ")
        removed = band.remove_member(console.read_int(1, len(top)) - 1)
        if removed is not None:
            console.write(f"{removed.stage_name} a parasit trupa\n")
    elif answer == 2:
        show_people(game, Musician)
        console.write("\nAlege din aceasta lista pe cine doresti sa adaugi: ")
        candidate = select_person(game, Musician)
        console.write(f"{band.ranking()[0]}\n")
        if band.add_member(candidate):
            console.write(f"{candidate.stage_name} s-a alaturat cu succes trupei.\n")
        else:
            console.write(
                "Din pacate artistul selectat este prea avansat pentru trupa si nu a acceptat\n"
            )
    elif answer == 3 and has_former:
        console.write("\nFostii membri disponibili: \n")
        former = list(band.former_members)
        for number, member in enumerate(former, 1):
            console.write(f"{number}. {member}\n\n")
        console.write("\nAlege numarul membrului pe care vrei sa il readuci: ")
        band.restore_former_member(game.read_int(1, len(former)) - 1)
        console.write("\nMembrul a fost readus in trupa cu succes!\n")
    _pause(game, _CONTINUE_PLAIN)


def _choose_city(game):
    console = game.console
    console.write("\n--Organizeaza concert pentru trupa--\n")
    console.write(
        "Scrie (c) daca locatia nu te intereseaza, sau (s) daca este cea pe care "
        "vrei sa o selectezi\n"
    )
    for city in game.locations.items():
        console.write(f"{city.describe()}\n")
        if game.read_choice(["s", "c"]) == "s":
            return city
    return None


def organize_concert(game):
    """Organise a concert in a city chosen on the console."""
    console = game.console
    player = game.player
    if player.popularity <= 10:
        console.write("\nInputul nu este valid!\n")
        return None
    _offer_tips(game, [
        "Vei primi o lista de locatii din care va trebui sa iti alegi pe loc "
        "orasul pentru concertul tau",
        "Tine cont de bugetul pe care il ai deoarece daca nu ai suficienti bani "
        "nu vei putea face concertul chiar daca l-ai planificat",
        "Alege intelept personalul, uneori cei cu abilitati mai bune dar cu cost "
        "mai scump pot influenta cu mult castigurile ulterioare",
        "Este o metoda buna de castigare a popularitatii, totusi nu te astepta "
        "la cresteri mari de buget",
    ])
    city = _choose_city(game)
    if city is None:
        console.write("Nu a fost selectat niciun oras\n")
        _pause(game, 'Scrie "c" pentru a te intoarce in meniul principal: ')
        return None

    console.write("\nAcum trebuie sa alegem personalul necesar: \n")
    show_people(game, SoundTechnician)
    console.write("\nSelecteaza un tehnician pentru sunet: ")
    technician = select_person(game, SoundTechnician)
    show_people(game, Bodyguard)
    console.write("\nSelecteaza un bodyguard: ")
    bodyguard = select_person(game, Bodyguard)
    album = _band(game).choose_album(console)

    concert = Concert(0, city, album)
    for person in (technician, bodyguard):
        if concert.hire(person):
            console.write("Angajatul a fost adaugat in echipa tehnica\n")
    if concert.compute_costs() >= player.budget:
        console.write("\nNu ai fonduri suficiente pentru a organiza un concert\n")
        _pause(game, _CONTINUE_PLAIN)
        return concert

    game.spend_budget(concert.compute_costs())
    concert.run(console)
    for person in _band(game).team():
        if isinstance(person, Musician):
            console.write(f"\n{person.concert_report()}\n")
        elif isinstance(person, (Manager, Producer)):
            console.write(f"{person.concert_report()}\n")
    game.add_budget(concert.profit())
    game.add_popularity(concert.popularity_gain(player.popularity))
    _pause(game)
    return concert


def organize_tour(game):
    """Organise a tour through cities chosen on the console."""
    console = game.console
    player = game.player
    if player.popularity <= 50:
        console.write("\nInputul nu este valid!\n")
        return None
    _offer_tips(game, [
        "Cea mai buna modalitate de castig al popularitatii",
        "Daca te afli aici probabil esti foarte aproape de a castiga jocul, felicitari!!",
        "Alege intelept personalul si modalitatile de transport",
    ])
    tour = Tour()
    console.write("\n--Organizeaza turneu--\n")
    show_people(game, SoundTechnician)
    console.write("\nSelecteaza un Tehnician pentru sunet: \n")
    if tour.hire(select_person(game, SoundTechnician)):
        console.write("Angajatul a fost adaugat cu succes\n")
    show_people(game, Bodyguard)
    console.write("\nSelecteaza un Bodyguard: \n")
    if tour.hire(select_person(game, Bodyguard)):
        console.write("Angajatul a fost adaugat cu succes\n")
    tour.choose_transport(console)

    if player.budget >= tour.compute_costs() + min_location_cost(game, tour):
        rounds = 0
        while True:
            console.write('\nVrei sa setezi o locatie? \n"da"/"nu": ')
            if game.read_choice(["da", "nu"]) != "da":
                console.write("\nSuper! Ai terminat de organizat turneul\n")
                _pause(game, _CONTINUE_PLAIN)
                break
            game.spend_budget(tour.compute_costs())
            show_available_locations(game, tour)
            tour.add_city(select_location(game, tour))
            rounds += 1
            if player.budget <= tour.compute_costs() + min_location_cost(game, tour):
                console.write("\nNu mai ai fonduri pentru a organiza o alta runda\n")
                _pause(game, _CONTINUE_PLAIN)
                break
        tour.set_rounds(rounds)
        tour.run(console)
        for person in _band(game).team():
            if isinstance(person, (Musician, Manager, Producer)):
                console.write(f"{person.tour_report()}\n")
        game.add_budget(tour.profit())
        game.add_popularity(tour.popularity_gain(player.popularity))
    else:
        console.write("\nDin pacate nu ai fonduri suficiente pentru a organiza un turneu\n")
        _pause(game, _CONTINUE_PLAIN)
    _pause(game)
    return tour


def min_location_cost(game, tour):
    """Return the cheapest cost among cities not yet on the tour, starting from the first city."""
    cities = game.locations.items()
    cheapest = cities[0].logistics_cost
    for city in cities:
        if city.logistics_cost < cheapest and tour.city_unselected(city):
            cheapest = city.logistics_cost
    return cheapest


def show_available_locations(game, tour):
    """List the affordable cities not yet on the tour; return (number, city) pairs."""
    shown = [
        (number, city)
        for number, city in enumerate(game.locations.items(), 1)
        if game.player.budget >= city.logistics_cost and tour.city_unselected(city)
    ]
    for number, city in shown:
        game.console.write(f"{number}.) {city.describe()}\n\n")
    game.console.write("Selecteaza locatia care te intereseaza: ")
    return shown


def select_location(game, tour):
    """Read a city number, pay for the city and return it."""
    cities = game.locations.items()
    error = "\nNu ai introdus o optiune corecta, mai incearca: \n"
    while True:
        number = _read_index(game.console, error)
        if not 1 <= number <= len(cities):
            game.console.write(error)
            continue
        city = cities[number - 1]
        if city.logistics_cost > game.player.budget and tour.city_unselected(city):
            game.console.write(error)
            continue
        game.spend_budget(city.logistics_cost)
        return city


def show_people(game, kind):
    """List the people of exactly the given kind; return (number, person) pairs."""
    shown = [
        (number, person)
        for number, person in enumerate(game.people.items(), 1)
        if type(person) is kind
    ]
    for number, person in shown:
        game.console.write(f"{number}) {person.describe()}\n\n")
    return shown


def select_person(game, kind):
    """Read a person number until it names someone of the given kind and return them."""
    console = game.console
    while True:
        people = game.people.items()
        number = _read_index(console, "\nNu ai introdus un input corect, mai incearca: ")
        if not 1 <= number <= len(people):
            console.write("\nNu ai introdus un input corect, mai incearca: ")
            continue
        person = people[number - 1]
        if type(person) is not kind:
            console.write(
                f"\nPersoana de la indexul {number} nu este de tipul cerut, mai incearca: "
            )
            continue
        if kind is Musician and has_duplicate(game, person):
            console.write(
                f"\nPersoana de la indexul {number} se afla deja in trupa, mai incearca: "
            )
            continue
        return person


def has_duplicate(game, musician):
    """Return whether a band member has the same name as musician."""
    return any(
        isinstance(person, Musician) and person == musician
        for person in _band(game).team()
    )