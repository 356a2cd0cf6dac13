import pytest

from musiclife.staff import Bodyguard, Manager, Producer, SoundTechnician


def test_manager_influence_threshold():
    assert Manager("A", "B", 25, 150, 3, 10).influence() == 0
    assert Manager("A", "B", 25, 150, 15, 10).influence() == 3


def test_manager_contribution_gains_experience():
    manager = Manager("A", "B", 25, 100, 2, 7)
    result = manager.contribution()
    assert manager.experience == 3
    assert result == manager.experience


def test_manager_yearly_growth_raises_fee_to_product():
    manager = Manager("A", "B", 25, 1, 9, 10)
    manager.yearly_growth()
    assert manager.experience == 10
    assert manager.cost() == manager.experience * manager.connections


def test_manager_yearly_growth_keeps_higher_fee():
    manager = Manager("Gheorghe", "Cristian", 25, 150, 3, 10)
    manager.yearly_growth()
    assert manager.cost() == 150


def test_manager_concert_report_and_experience():
    manager = Manager("A", "B", 25, 100, 2, 6)
    report = manager.concert_report()
    assert report == "Managerul s-a ocupat de promovarea concertului cu succes"
    assert manager.experience == 3


def test_manager_tour_report_levels():
    weak = Manager("Neacsu", "Rares", 24, 100, 2, 3)
    assert weak.tour_report() == (
        "Neacsu Rares, managerul trupei, nu a ajutat prea tare cu promovarea turneului"
    )
    assert weak.experience == 3
    strong = Manager("X", "Y", 30, 100, 11, 81)
    assert "a ajutat enorm" in strong.tour_report()


def test_manager_str_and_describe():
    manager = Manager("Gheorghe", "Cristian", 25, 150, 3, 10)
    assert str(manager) == (
        "Nume: Gheorghe, Prenume: Cristian (Varsta: 25, Cost: 150, "
        "Experienta: 3, Conexiuni: 10)"
    )
    assert manager.describe() == (
        "Nume: Gheorghe Cristian, varsta 25 ani , (cost: 150, experienta: 3, "
        "conexiuni: 10)"
    )


def test_producer_influence():
    assert Producer("A", "B", 26, 170, 4, 3).influence() == -200
    assert Producer("A", "B", 26, 170, 10, 10).influence() == 400


def test_producer_contribution():
    assert Producer("A", "B", 26, 170, 4, 4).contribution() == 4


def test_producer_yearly_growth_sets_fee_when_successful():
    producer = Producer("A", "B", 26, 1, 10, 10)
    producer.yearly_growth()
    assert producer.experience == 11
    assert producer.cost() == producer.successes * producer.experience


def test_producer_yearly_growth_keeps_fee_below_threshold():
    producer = Producer("Muresan", "Larisa - Elena", 26, 170, 4, 3)
    producer.yearly_growth()
    assert producer.cost() == 170


def test_producer_reports():
    producer = Producer("Rosu", "Sarina", 22, 100, 1, 1)
    assert producer.concert_report() == (
        "Melodiile producatorului au fost apreciate de fani"
    )
    assert producer.successes == 2
    assert producer.tour_report() == (
        "Piesele producatorului, Rosu Sarina au fost apreciate de public."
    )


def test_producer_str():
    producer = Producer("Rosu", "Sarina", 22, 100, 1, 1)
    assert str(producer) == (
        "Nume: Rosu, Prenume: Sarina (Varsta: 22, Cost: 100, "
        "Experienta: 1, Succese: 1)"
    )


@pytest.mark.parametrize("kind", [SoundTechnician, Bodyguard])
def test_event_staff_contribution_increments(kind):
    person = kind("Coman", "Maria", 23, 600, 49)
    assert person.contribution() == 50
    assert person.efficiency == 50
    assert person.cost() == 600


@pytest.mark.parametrize("kind", [SoundTechnician, Bodyguard])
def test_event_staff_verdict_thresholds(kind):
    person = kind("A", "B", 30, 400, 29)
    assert person.verdict() == kind.low_verdict
    person.contribution()
    assert person.verdict() == kind.mid_verdict
    person.efficiency = 70
    assert person.verdict() == kind.high_verdict


def test_technician_verdict_text():
    technician = SoundTechnician("A", "B", 23, 500, 70)
    assert technician.verdict() == "Tehnicianul de sunet a gestionat perfect concertul"


def test_bodyguard_describe():
    guard = Bodyguard("Marian", "Ovidiu", 30, 400, 25)
    assert guard.describe() == (
        "Nume: Marian Ovidiu, varsta 30 ani (cost pe eveniment: 400, eficienta: 25)"
    )