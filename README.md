# philo

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread. The philosophers sit around a table and share a fork with
each neighbour. A philosopher takes two forks, eats, puts the forks back,
sleeps and then thinks. A watcher thread checks that no philosopher goes
longer than the allowed time without starting a meal.

## Installation

```
pip install .
```

## Usage

```
philo NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]
```

- All times are in milliseconds.
- If you leave out `MEALS`, the simulation stops at the first death.
- If you give `MEALS`, a philosopher leaves the table after eating that many
  times. The run ends when every philosopher has either left or starved.
- A lone philosopher has only one fork. It can never eat, so it starves.

Examples:

```
philo 4 500 249 251
philo 5 800 200 200 7
philo 1 1000 60 60
```

Each event is written to standard output on a line of its own, with
terminal colours. The line begins with the milliseconds since the start,
padded to four digits, and then the philosopher's number in parentheses.
When a philosopher takes a fork, the line also gives the hand (`right` or
`left`) and the fork's number. When a philosopher dies while holding forks,
a line is written for each fork it puts back on the table.

Odd-numbered philosophers pick up their right fork first. Even-numbered
philosophers wait one millisecond at the start and then pick up their left
fork first.

## Argument checks

The program rejects the following and prints an `Error - ` message:

- a number of arguments other than four or five;
- values that are not whole numbers, optionally signed;
- values that do not fit in a 32-bit int;
- negative values;
- zero philosophers.

On rejected input the program exits with status 0 and runs nothing.

The program prints a warning and then runs anyway in two cases. The first
is when `TIME_TO_DIE` is less than eating time plus sleeping time. The
second is when `TIME_TO_DIE` is at most `TIME_TO_EAT` times 2, or times 3
when the number of philosophers is odd.

## Library use

```python
from philo.config import parse_args
from philo.table import Table

settings = parse_args(["5", "800", "200", "200", "3"])
for warning in settings.warnings():
    print(warning)
Table(settings).run()
```

The modules:

- `philo.config`: `parse_args(args)` returns a frozen `Settings` or raises
  `ConfigError`. `Settings.warnings()` returns the warning texts.
  `Settings.tt_think` is a derived thinking time.
- `philo.table`:
  - `Table(settings, out=None)` lays the table. Output goes to `out`, or to
    standard output if `out` is not given.
  - `Table.run()` starts the philosopher threads and the watcher, and
    returns when all philosophers have stopped.
  - `format_line(elapsed_ms, index, message, hand=None, fork=None)` renders
    one log line.
  - `State` lists the three activities: `THINKING`, `EATING` and
    `SLEEPING`.
- `philo.cli`: `main(argv=None)` is the command-line entry point.
- `philo.numbers`: `parse_int_strict` raises `IntParseError` on bad input.
  `parse_int_lenient` parses an integer loosely. `int_abs` returns an
  absolute value clamped to the 32-bit range.
- `philo.textutils`: string helpers `find_str`, `same_str`, `index_in`,
  `span_until` and `split_any`.
- `philo.colors`: ANSI escape constants, plus `fg256(code)` and
  `cube_color(r, g, b)` for 256-colour foreground sequences.

## Tests

```
pip install .[test]
pytest
```