import io
import time
from collections import Counter

from philo.colors import RESET
from philo.config import Settings
from philo.table import State, Table, format_line


def _run(settings):
    out = io.StringIO()
    table = Table(settings, out=out)
    table.run()
    return table, out.getvalue()


def test_format_line_plain_message():
    line = format_line(42, 3, "hello", None, None)
    assert "0042 ms)" in line
    assert "(3)" in line
    assert line.endswith("hello\n" + RESET)


def test_format_line_with_fork():
    line = format_line(7, 2, "\thas taken", "left", 5)
    assert "\thas taken his left fork " in line
    assert "nᵒ5\n" in line


def test_format_line_does_not_truncate_time():
    assert "12345 ms)" in format_line(12345, 1, "x")


def test_every_fork_is_shared_by_two_neighbours():
    table = Table(Settings(5, 800, 200, 200), out=io.StringIO())
    numbers = Counter()
    for philosopher in table.philosophers:
        assert philosopher.right is not philosopher.left
        numbers[philosopher.right.number] += 1
        numbers[philosopher.left.number] += 1
    assert set(numbers.values()) == {2}
    assert len(numbers) == 5


def test_single_philosopher_has_one_fork():
    table = Table(Settings(1, 800, 200, 200), out=io.StringIO())
    assert table.philosophers[0].left is None
    assert table.philosophers[0].doing is State.THINKING


def test_elapsed_ms_grows():
    table = Table(Settings(2, 800, 200, 200), out=io.StringIO())
    time.sleep(0.02)
    assert table.elapsed_ms() >= 20


def test_speak_writes_a_line():
    out = io.StringIO()
    table = Table(Settings(3, 800, 200, 200), out=out)
    table.speak(table.philosophers[1], "says hi", "right")
    text = out.getvalue()
    assert "says hi his right fork" in text
    assert f"nᵒ{table.philosophers[1].right.number}" in text


def test_watch_declares_starvation_and_everybody_stops():
    out = io.StringIO()
    table = Table(Settings(3, 0, 100, 100), out=out)
    time.sleep(0.01)
    table.watch()
    assert out.getvalue().count("DIED of hunger") == 1
    assert table.someone_dead == 1
    assert all(p.is_dead() for p in table.philosophers)


def test_nobody_is_dead_at_start():
    table = Table(Settings(3, 800, 100, 100), out=io.StringIO())
    assert not any(p.is_dead() for p in table.philosophers)


def test_lonely_philosopher_starves():
    table, text = _run(Settings(1, 100, 50, 50))
    assert "his right fork" in text
    assert text.count("DIED of hunger") == 1
    assert text.index("DIED of hunger") < text.index("taken from the TABLE")
    assert table.philosophers[0].times_eaten == 0


def test_one_death_stops_the_simulation():
    table, text = _run(Settings(2, 100, 300, 60))
    assert text.count("DIED of hunger") == 1
    assert table.someone_dead == 1


def test_everybody_eats_the_meal_limit():
    table, text = _run(Settings(4, 400, 50, 50, 2))
    assert "DIED" not in text
    assert text.count("went to HEAVEN") == 4
    assert [p.times_eaten for p in table.philosophers] == [2, 2, 2, 2]