"""Command-line settings for the dining philosophers simulation."""

from dataclasses import dataclass
from typing import List, Sequence

from .colors import ERR
from .numbers import IntParseError, parse_int_strict

_CHILDREN = "WONT SOMEBODY PLEASE THINK OF THE CHILDREN ?!?"
_SACRIFICE = "Some of you will die, but its a sacriifice im willing to make!"


class ConfigError(ValueError):
    """Raised when the command-line arguments are unusable."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation; times are in milliseconds."""

    num_philo: int
    tt_die: int
    tt_eat: int
    tt_sleep: int
    max_meal: int = -1

    @property
    def tt_think(self) -> int:
        """Eating plus sleeping time plus half of the slack left before dying."""
        busy = self.tt_eat + self.tt_sleep
        slack = self.tt_die - busy
        half = slack // 2 if slack >= 0 else -((-slack) // 2)
        return busy + half

    def warnings(self) -> List[str]:
        """Return the warnings printed for settings that are likely to kill someone."""
        messages = []
        if self.tt_die < self.tt_eat + self.tt_sleep:
            messages.append(ERR + _CHILDREN)
        if self.tt_die <= self.tt_eat * (2 + self.num_philo % 2):
            messages.append(_SACRIFICE)
        return messages


def parse_args(args: Sequence[str]) -> Settings:
    """Build settings from ``num_philo tt_die tt_eat tt_sleep [max_meal]``."""
    args = list(args)
    if len(args) not in (4, 5):
        raise ConfigError("bad number of args")
    not_a_number = False
    max_meal = -1
    if len(args) == 5:
        try:
            max_meal = parse_int_strict(args[4])
        except IntParseError:
            not_a_number = True
        else:
            if max_meal < 0:
                raise ConfigError("negative arg max_meal")
    values = []
    for text in args[:4]:
        try:
            values.append(parse_int_strict(text))
        except IntParseError:
            not_a_number = True
    if not_a_number:
        raise ConfigError("is that a number?")
    if any(value < 0 for value in values):
        raise ConfigError("negative arg")
    if values[0] == 0:
        raise ConfigError("Philosophers are an extinct race")
    num_philo, tt_die, tt_eat, tt_sleep = values
    return Settings(num_philo, tt_die, tt_eat, tt_sleep, max_meal)