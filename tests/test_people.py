import io

import pytest

from musiclife.console import Console
from musiclife.people import Musician, Person


def sample():
    return Musician("Sorescu", "Simona", 20, "Simi", "chitara", 2, 5, 5)


def test_person_is_abstract():
    with pytest.raises(TypeError):
        Person()


def test_default_musician():
    m = Musician(skill_level=4, cooperation=1, ego=2)
    assert m.last_name == "necunoscut"
    assert m.stage_name == "necunoscut"
    assert m.skill_level == 4


def test_rehearse_increases_skill():
    m = sample()
    report = m.rehearse()
    assert m.skill_level == 3
    assert report == "Simi si-a crescut skillLevel-ul la 3"


def test_rehearse_caps_at_maximum():
    m = Musician(stage_name="Alex", skill_level=9)
    report = m.rehearse()
    assert m.skill_level == 10
    assert report == "SkillLevel-ul pentru Alex a ajuns deja la nivelul maxim"
    m.rehearse()
    assert m.skill_level == 10


def test_decline_reduces_skill():
    m = sample()
    m.decline()
    m.decline()
    assert m.skill_level == 0


def test_contribution_truncates_toward_zero():
    assert Musician(cooperation=3, ego=8).contribution() == -2
    assert Musician(cooperation=8, ego=3).contribution() == 2
    assert sample().cost() == 0


def test_equality_by_names():
    a = sample()
    b = Musician("Sorescu", "Simona", 40, "Other", "tobe", 9, 1, 1)
    c = Musician("Sorescu", "Ana")
    assert a == b
    assert a != c


def test_greater_by_skill():
    strong = Musician(skill_level=4)
    weak = Musician(skill_level=3)
    assert strong > weak
    assert not weak > strong
    assert sorted([weak, strong], reverse=True)[0] is strong


def test_reports():
    m = Musician(stage_name="Eli", skill_level=3, cooperation=3, ego=8)
    assert m.concert_report() == "Eli a cantat, dar s-a certat mult cu trupa"
    assert m.tour_report() == "Eli s-a chinuit destul de tare sa tina pasul."
    m.skill_level = 9
    assert m.tour_report() == "Eli a cantat excelent"


def test_status_and_str():
    m = sample()
    assert m.status() == "Muzician: Simi\nTip: chitara\nSkillLevel: 2"
    assert str(m) == (
        "Nume: Sorescu, Prenume: Simona (Varsta: 20, Nume de Scena: Simi, "
        "Tip Instrument: chitara, Skill Level: 2, Cooperativitate: 5, Ego: 5)"
    )
    assert m.describe().startswith("Nume: Sorescu Simona, varsta 20 ani")


def test_fill_from_reads_details():
    console = Console(io.StringIO("Pop\nIon\n30\nJohnny\n3\n"), io.StringIO())
    m = Musician(skill_level=5).fill_from(console, [])
    assert (m.last_name, m.first_name, m.age) == ("Pop", "Ion", 30)
    assert m.stage_name == "Johnny"
    assert m.instrument == "tobe"
    assert m.skill_level == 5


def test_fill_from_retries_on_duplicate():
    out = io.StringIO()
    text = "Sorescu\nSimona\n25\nS\n1\nNou\nNume\n25\nN\n2\n"
    console = Console(io.StringIO(text), out)
    m = Musician().fill_from(console, [sample()])
    assert m.last_name == "Nou"
    assert m.instrument == "chitara"
    assert "exista deja in baza de date" in out.getvalue()