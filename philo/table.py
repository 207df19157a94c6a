"""The dining table: philosopher threads, forks and the watcher."""

import enum
import sys
import threading
import time
from dataclasses import dataclass, field
from typing import Optional, TextIO, Tuple

from .colors import C_025, C_123, C_231, C_321, C_401, C_530, RED, RESET
from .config import Settings

_TICK = 0.000001

MSG_THINKING = " == == == is thinking"
MSG_EATING = " == is eating"
MSG_SLEEPING = " == == is sleeping"
MSG_TAKEN = C_321 + "\thas taken"
MSG_HEAVEN = C_530 + "\t\twent to HEAVEN with a full belly."
MSG_DIED = RED + "\t\tDIED of hunger, you monster."
MSG_TABLE = "\ttaken from the TABLE,"


class State(enum.Enum):
    THINKING = 0
    EATING = 1
    SLEEPING = 2


def format_line(
    elapsed_ms: int,
    index: int,
    message: str,
    hand: Optional[str] = None,
    fork: Optional[int] = None,
) -> str:
    """Render one line of the simulation log."""
    head = (
        f"{C_231}{elapsed_ms:04d} ms)\t{RESET}{C_401}"
        f" \033[38;5;{index % 256}m({index}) {RESET}"
    )
    if hand is not None:
        return f"{head}{C_123}{message} his {hand} fork {C_025}nᵒ{fork}\n{RESET}"
    return f"{head}{message}\n{RESET}"


@dataclass
class _Fork:
    number: int
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


class Philosopher:
    """One diner; its :meth:`run` is the body of its thread."""

    def __init__(self, table: "Table", index: int, right: _Fork, left: Optional[_Fork]):
        self.table = table
        self.index = index
        self.right = right
        self.left = left
        self.times_eaten = 0
        self.doing = State.THINKING
        self._forks = {"right": right, "left": left}
        self._holding = set()
        self._lock = threading.Lock()
        self._last_meal = table.start
        self._dead = False

    @property
    def dead(self) -> bool:
        with self._lock:
            return self._dead

    def _mark_dead(self) -> None:
        with self._lock:
            self._dead = True

    def ms_since_meal(self) -> int:
        """Milliseconds since this philosopher last started eating."""
        now = time.monotonic()
        with self._lock:
            last = self._last_meal
        return int((now - last) * 1000)

    def _record_meal(self) -> None:
        with self._lock:
            self._last_meal = time.monotonic()

    def is_dead(self) -> bool:
        """Tell whether this philosopher must stop, putting down any held fork."""
        settings = self.table.settings
        if self.dead or (settings.max_meal < 0 and self.table.someone_dead):
            for hand in ("right", "left"):
                if hand in self._holding:
                    self._forks[hand].lock.release()
                    self.table.speak(self, MSG_TABLE, hand)
            self._holding.clear()
            return True
        return False

    def _take(self, hand: str) -> bool:
        self._forks[hand].lock.acquire()
        self._holding.add(hand)
        if self.is_dead():
            return True
        self.table.speak(self, MSG_TAKEN, hand)
        return False

    def _take_left_first(self) -> bool:
        return self._take("left") or self._take("right")

    def _take_right_first(self) -> bool:
        if self._holding:
            return False
        if self._take("right"):
            return True
        if self.table.settings.num_philo == 1:
            return False
        return self._take("left")

    def _eat(self) -> bool:
        if self.doing is not State.THINKING:
            return False
        if self.index % 2:
            if self._take_right_first():
                return True
            if self.table.settings.num_philo == 1:
                return False
        elif self._take_left_first():
            return True
        self._record_meal()
        self.table.speak(self, MSG_EATING)
        self.doing = State.EATING
        return False

    def _finish_meal(self) -> bool:
        settings = self.table.settings
        if self.doing is not State.EATING or self.ms_since_meal() < settings.tt_eat:
            return False
        for hand in ("right", "left"):
            if hand in self._holding:
                self._forks[hand].lock.release()
        self._holding.clear()
        self.times_eaten += 1
        if self.times_eaten == settings.max_meal:
            self.table.speak(self, MSG_HEAVEN)
            self._mark_dead()
            return True
        self.table.speak(self, MSG_SLEEPING)
        self.doing = State.SLEEPING
        return False

    def run(self) -> None:
        """Eat, sleep and think until dead or full."""
        settings = self.table.settings
        if self.index % 2 == 0:
            time.sleep(0.001)
        while not self.is_dead():
            if self._eat() or self._finish_meal():
                break
            if (
                self.doing is State.SLEEPING
                and self.ms_since_meal() >= settings.tt_eat + settings.tt_sleep
            ):
                self.table.speak(self, MSG_THINKING)
                self.doing = State.THINKING
            time.sleep(_TICK)


class Table:
    """Shared state of one simulation."""

    def __init__(self, settings: Settings, out: Optional[TextIO] = None):
        self.settings = settings
        self.out = sys.stdout if out is None else out
        self.start = time.monotonic()
        self._talk_lock = threading.Lock()
        self._dead_lock = threading.Lock()
        self._someone_dead = 0
        self._ended = threading.Event()
        self.forks = [_Fork(number) for number in range(1, settings.num_philo + 1)]
        self.philosophers = [
            Philosopher(self, index, *self._forks_for(index))
            for index in range(1, settings.num_philo + 1)
        ]

    def _forks_for(self, index: int) -> Tuple[_Fork, Optional[_Fork]]:
        count = self.settings.num_philo
        if count == 1:
            return self.forks[0], None
        if index == 1:
            return self.forks[0], self.forks[1]
        if index == count:
            return self.forks[count - 1], self.forks[0]
        return self.forks[index - 1], self.forks[index]

    @property
    def someone_dead(self) -> int:
        """How many philosophers the watcher has declared starved."""
        with self._dead_lock:
            return self._someone_dead

    def _record_death(self) -> None:
        with self._dead_lock:
            self._someone_dead += 1

    def elapsed_ms(self) -> int:
        """Milliseconds since the table was laid."""
        return int((time.monotonic() - self.start) * 1000)

    def speak(self, philosopher: Philosopher, message: str, hand: Optional[str] = None) -> None:
        """Write one log line for ``philosopher``, naming a fork when ``hand`` is given."""
        elapsed = self.elapsed_ms()
        fork = None
        if hand is not None:
            fork = philosopher.right.number if hand == "right" else philosopher.left.number
        line = format_line(elapsed, philosopher.index, message, hand, fork)
        with self._talk_lock:
            self.out.write(line)
            self.out.flush()

    def watch(self) -> None:
        """Declare starved philosophers dead until the simulation ends."""
        settings = self.settings
        count = settings.num_philo
        position = 0
        while not self._ended.is_set():
            position = (position + 1) % count
            philosopher = self.philosophers[position]
            if philosopher.ms_since_meal() > settings.tt_die and not philosopher.dead:
                self.speak(philosopher, MSG_DIED)
                philosopher._mark_dead()
                self._record_death()
                if settings.max_meal < 0 or self.someone_dead == count:
                    break
            time.sleep(_TICK)

    def run(self) -> None:
        """Run every philosopher and the watcher until all philosophers stop."""
        threads = [
            threading.Thread(target=p.run, name=f"philosopher-{p.index}")
            for p in self.philosophers
        ]
        for thread in threads:
            thread.start()
        watcher = threading.Thread(target=self.watch, name="watcher")
        watcher.start()
        for thread in threads:
            thread.join()
        self._ended.set()
        watcher.join()