import io

import pytest

from musiclife.console import Console
from musiclife.people import Musician
from musiclife.songs import CollaborativeSong, SimpleSong


def make_console(text):
    return Console(io.StringIO(text), io.StringIO())


def test_equality_same_type():
    assert SimpleSong("A", "Rock") == SimpleSong("A", "Rock")
    assert SimpleSong("A", "Rock") != SimpleSong("B", "Rock")
    assert SimpleSong("A", "Rock") != SimpleSong("A", "Pop")


def test_equality_across_types_is_false():
    assert SimpleSong("A", "Rock") != CollaborativeSong("A", "Rock")


def test_simple_song_str():
    assert str(SimpleSong("A", "Rock")) == "Melodie Simpla: Titlu: A\nGen Muzical: Rock"


def test_default_song():
    song = SimpleSong()
    assert song.title == "necunoscut"
    assert song.genre == ""


def test_from_skill():
    song = CollaborativeSong.from_skill(7)
    assert song.collaborator_contribution() == 7
    assert song.title == ""
    assert song.artist.cooperation == 0


def test_simple_fill_from():
    song = SimpleSong().fill_from(make_console("Hit\n2\n"))
    assert song.title == "Hit"
    assert song.genre == "Rock"


def test_simple_fill_from_retries_out_of_range():
    song = SimpleSong().fill_from(make_console("Hit\n9\n3\n"))
    assert song.genre == "Electronic"


def test_simple_fill_from_eof():
    with pytest.raises(EOFError):
        SimpleSong().fill_from(make_console("Hit\n"))


def test_collaborative_fill_from_rejects_existing_musician():
    existing = Musician("Pop", "Ion", 20, "Ion", "voce", 3, 3, 3)
    text = (
        "Duet\n4\n"
        "Pop\nIon\n20\nIon\n1\n"
        "Nou\nArtist\n30\nStar\n2\n"
    )
    song = CollaborativeSong.from_skill(5).fill_from(make_console(text), [existing])
    assert song.title == "Duet"
    assert song.genre == "Clasic"
    assert song.artist.last_name == "Nou"
    assert song.artist.instrument == "chitara"
    assert song.collaborator_contribution() == 5


def test_collaborative_str_mentions_artist():
    artist = Musician("Pop", "Ion", 20, "Ion", "voce", 3, 3, 3)
    song = CollaborativeSong("Duet", "Pop", artist)
    assert str(song) == (
        "Melodie Colaborativa: Titlu: Duet\nGen Muzical: Pop\n"
        f"Artistul cu care a fost facuta colaborarea: {artist}"
    )