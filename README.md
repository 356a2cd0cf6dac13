# musiclife

MusicLife is a turn-based text game that you play in the terminal. You found a
band and steer it for up to twenty in-game years. You hire a manager and a
producer and pick three musicians. Then you rehearse, record albums, play concerts
and go on tours. The goal is to reach a popularity of 100 before time or money
runs out.

The game's text is in Romanian.

## Installing

```
pip install .
```

## Playing

```
musiclife
```

First the game asks you to type `start`. Next it asks for a band name. You then
choose a manager, a producer and three musicians from a fixed roster. After that,
you pick an action from the main menu each turn:

| Option | Action |
|--------|--------|
| `1` | Rehearse with the band (up to three times a year) |
| `2` | Record an album (needs a budget of at least 500) |
| `3` | Change the line-up: remove, recruit or bring back a member |
| `4` | Show the band's status |
| `5` | Help and strategy hints |
| `6` | Organise a concert (only when popularity is above 10) |
| `7` | Organise a tour (only when popularity is above 50) |
| `n` | Move to the next year |
| `r` | Reset the game |
| `exit` | Leave the game |

Each new year every musician loses one skill point. The manager and the producer
take their pay, and each of them also changes the budget or the popularity. A
musician whose skill reaches 0 leaves the band.

If the input stream ends, the game stops quietly.

### How the game ends

You win when popularity reaches 100. You lose in any of these cases:

- every musician has left the band;
- the budget falls to zero or below;
- popularity turns negative;
- the twentieth year is reached.

When the game ends, or when you choose `exit`, you can see a final report. It
counts the albums, concerts and tours created. You can then play again.

## Using it from Python

`musiclife.console.Console` reads answers from any text stream and writes prompts
to any other stream. This means a game can be driven by a script:

```python
import io
from musiclife.console import Console
from musiclife.game import Game

out = io.StringIO()
game = Game(Console(io.StringIO("start\n"), out))
game.start()
print(game.player.statistics())
```

The game rules can also be used on their own. For example, an album's quality,
the popularity it brings and its profit:

```python
from musiclife.album import Album
from musiclife.songs import SimpleSong

album = Album("Debut", 3, 2, [SimpleSong("A", "Pop"), SimpleSong("B", "Rock")])
album.compute_quality(6, 4)   # 6
album.popularity_gain(5)      # 7
album.profit(1000, 5)         # 2100
```

Other building blocks:

- `musiclife.band.Band` holds the members, the former members and the albums.
- `musiclife.activities.Concert` and `musiclife.activities.Tour` handle concerts
  and tours.
- `musiclife.staff` provides `Manager`, `Producer`, `SoundTechnician` and `Bodyguard`.
- `musiclife.catalog` provides `default_locations()` and `default_people()`, the
  starting roster.

Some state is shared across the whole process:

- `musiclife.player.Player` is a single shared instance.
- `musiclife.registry.Registry` keeps one shared list per kind of item.
- `Album`, `Concert` and `Tour` keep class-wide counters.

## What it does not do

Games are not saved. All progress exists only while the program runs.

## Running the tests

```
pip install .[test]
pytest
```