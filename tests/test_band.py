import io

import pytest

from musiclife.album import Album
from musiclife.band import Band
from musiclife.console import Console
from musiclife.people import Musician
from musiclife.staff import Manager, Producer


def make_console(text=""):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def musician(last, skill):
    return Musician(last, "Ion", 20, last, "voce", skill, 5, 5)


def make_band(*skills):
    band = Band("Test", Manager("M", "A", 30, 100, 2, 3), Producer("P", "B", 30, 100, 1, 1))
    band.members = [musician(f"N{i}", skill) for i, skill in enumerate(skills)]
    return band


def test_team_order():
    band = make_band(3, 4)
    team = band.team()
    assert team[0] is band.manager
    assert team[1] is band.producer
    assert team[2:] == band.members


def test_team_without_staff():
    band = Band()
    band.members = [musician("A", 2)]
    assert band.team() == band.members


def test_average_skill():
    assert make_band(3, 3, 3).average_skill() == 3
    with pytest.raises(ValueError):
        Band().average_skill()


def test_ranking_is_descending():
    band = make_band(2, 5, 3)
    ranked = band.ranking()
    skills = [m.skill_level for m in ranked]
    assert skills == sorted(skills, reverse=True)
    assert band.members == ranked


def test_remove_and_restore_member():
    band = make_band(2, 5)
    removed = band.remove_member(0)
    assert removed not in band.members
    assert band.has_former_members()
    assert band.remove_member(7) is None
    band.restore_former_member(0)
    assert removed in band.members
    assert not band.has_former_members()


def test_restore_invalid_index_is_ignored():
    band = make_band(2)
    band.add_former_member(musician("X", 1))
    band.restore_former_member(3)
    assert len(band.former_members) == 1
    assert len(band.members) == 1


def test_add_member_accepts_weaker_only():
    band = make_band(5, 3)
    weaker = musician("W", 2)
    stronger = musician("S", 9)
    assert band.add_member(weaker) is True
    assert weaker in band.members
    assert band.add_member(stronger) is False
    assert stronger not in band.members


def test_drop_exhausted_members():
    band = make_band(0, 4, 0)
    gone = band.drop_exhausted()
    assert len(gone) == 2
    assert all(m.skill_level != 0 for m in band.members)
    assert band.has_members()
    band.members[0].skill_level = 0
    band.drop_exhausted()
    assert not band.has_members()


def test_duplicate_album_detection():
    band = make_band(3)
    assert not band.has_duplicate_album()
    band.record_album(Album("Unu", 1, 2, []))
    assert not band.has_duplicate_album()
    band.record_album(Album("Doi", 1, 2, []))
    assert not band.has_duplicate_album()
    band.record_album(Album("Unu", 2, 3, []))
    assert band.has_duplicate_album()


def test_choose_album():
    band = make_band(3)
    first = Album("Unu", 1, 2, [])
    second = Album("Doi", 1, 2, [])
    band.record_album(first)
    band.record_album(second)
    console, out = make_console("2\n")
    assert band.choose_album(console) is second
    assert "Doi" in out.getvalue()


def test_choose_album_without_albums():
    console, _ = make_console("1\n")
    with pytest.raises(IndexError):
        make_band(3).choose_album(console)


def test_build_from_console():
    managers = [Manager("M1", "A", 30, 100, 2, 3), Manager("M2", "B", 30, 100, 2, 3)]
    producers = [Producer("P1", "C", 30, 100, 1, 1)]
    musicians = [musician(f"N{i}", 3) for i in range(4)]
    people = managers + producers + musicians
    console, out = make_console("Rockeri\n2\n1\nc\n1\n1\n3\n4\n")
    band = Band().build(console, people)
    assert band.name == "Rockeri"
    assert band.manager is managers[1]
    assert band.producer is producers[0]
    assert band.members == [musicians[0], musicians[2], musicians[3]]
    assert "Membru deja in trupa" in out.getvalue()


def test_str_lists_band():
    band = make_band(3)
    text = str(band)
    assert text.startswith("Nume trupa: Test")
    assert "1) " + str(band.members[0]) in text