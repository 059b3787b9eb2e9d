# katas

Small, self-contained exercises collected in one package. Each one is a
separate module that you import and call on its own. The package needs
nothing outside the standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it does |
| --- | --- |
| `katas.acronym` | `abbreviate(phrase)` builds an acronym from a phrase |
| `katas.all_your_base` | `convert(digits, from_base, to_base)` re-bases a list of digits |
| `katas.allergies` | `Allergies` decodes an allergy score into `Allergen` members |
| `katas.alphametics` | `solve(puzzle)` solves letter-sum puzzles such as `SEND + MORE == MONEY`, or returns `None` |
| `katas.anagram` | `anagrams_for(word, candidates)` picks out anagrams, ignoring case |
| `katas.armstrong_numbers` | `is_armstrong_number(number)` |
| `katas.beer_song` | `verse(n)` and `sing(start, end)` |
| `katas.binary_search` | `find(array, key)` in a sorted sequence, returning an index or `None` |
| `katas.bob` | `reply(message)` gives a teenager's answer; `is_yelling(message)` |
| `katas.bowling` | `BowlingGame` with `roll(pins)` and `score()` |
| `katas.clock` | `Clock` without dates, with `hours`, `minutes`, `add_minutes` and `from_string` |
| `katas.collatz_conjecture` | `collatz(n)` counts the steps to reach 1 |
| `katas.difference_of_squares` | `square_of_sum`, `sum_of_squares`, `difference` |
| `katas.eliuds_eggs` | `egg_count(display_value)` counts set bits |
| `katas.etl` | `transform(legacy)` turns a score-to-letters map into letter-to-score |
| `katas.gigasecond` | `after(start)` adds 10^9 seconds to a datetime |
| `katas.grains` | `square(number)` and `total()` for the chessboard |
| `katas.hello_world` | `hello()` |
| `katas.high_scores` | `HighScores` with `latest`, `personal_best`, `personal_top_three` |
| `katas.kindergarten_garden` | `plants(diagram, student)` |
| `katas.leap` | `is_leap_year(year)` |
| `katas.luhn` | `is_valid(code)` checks a Luhn checksum |
| `katas.matching_brackets` | `brackets_are_balanced(text)` |
| `katas.minesweeper` | `annotate(minefield)` adds mine counts to a board |
| `katas.nth_prime` | `primes()` generator and `nth(n)` (zero-based) |
| `katas.paasio` | `ReadStats` and `WriteStats` count I/O calls and bytes passed through |
| `katas.prime_factors` | `factors(n)` |
| `katas.raindrops` | `raindrops(number)` |
| `katas.reverse_string` | `reverse(text)` |
| `katas.robot_simulator` | `Robot`, `Direction` and `Instruction` on a grid |
| `katas.run_length_encoding` | `encode(source)` and `decode(source)` |
| `katas.series` | `series(digits, length)` gives every run of consecutive characters |
| `katas.space_age` | `Planet.years_during(seconds)` |
| `katas.sublist` | `sublist(first, second)` returns a `Comparison` |
| `katas.sum_of_multiples` | `sum_of_multiples(limit, factors)` |

## Examples

```python
from katas.acronym import abbreviate
from katas.alphametics import solve
from katas.clock import Clock
from katas.robot_simulator import Direction, Robot

abbreviate("Portable Network Graphics")   # "PNG"
solve("I + BB == ILL")                    # {"I": 1, "B": 9, "L": 0}
str(Clock(23, 59).add_minutes(2))         # "00:01"

robot = Robot(7, 3, Direction.NORTH).instructions("RAALAL")
robot.position                            # (9, 4)
```

## Errors

Invalid input raises an exception rather than returning a status value.
For example, `convert` raises `InvalidInputBaseError`,
`InvalidOutputBaseError` or `InvalidDigitError` (all subclasses of
`BaseConversionError`, itself a `ValueError`); `square` raises `ValueError`
outside 1..64; `BowlingGame.roll` raises `NotEnoughPinsLeftError` or
`GameCompleteError`; `Instruction.from_char` raises `ValueError` for a
letter other than L, R or A.

## What it does not include

The package is a library only: it installs no command-line program, and each
module is used by importing it from Python code.