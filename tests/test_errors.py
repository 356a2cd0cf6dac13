import pytest

from musiclife.errors import (
    GameError,
    NegativePopularityError,
    SkillLevelError,
    YearsExhaustedError,
)


@pytest.mark.parametrize(
    "cls, message",
    [
        (SkillLevelError, "SkillLevel-ul nu poate fi mai mare decat 10"),
        (
            NegativePopularityError,
            "Popularitatea a luat valori negative, jocul se incheie aici",
        ),
        (
            YearsExhaustedError,
            "Ai epuizat cei 20 de ani disponibili, jocul s-a incheiat",
        ),
    ],
)
def test_default_messages(cls, message):
    assert str(cls()) == message


@pytest.mark.parametrize(
    "cls, message",
    [
        (SkillLevelError, "SkillLevel-ul nu poate fi mai mare decat 10"),
        (
            NegativePopularityError,
            "Popularitatea a luat valori negative, jocul se incheie aici",
        ),
        (
            YearsExhaustedError,
            "Ai epuizat cei 20 de ani disponibili, jocul s-a incheiat",
        ),
    ],
)
def test_caught_as_game_error(cls, message):
    with pytest.raises(GameError) as excinfo:
        raise cls()
    assert type(excinfo.value) is cls
    assert str(excinfo.value) == message


def test_custom_message_overrides_default():
    assert str(YearsExhaustedError("gata")) == "gata"