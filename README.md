# powerindex

Computes the Banzhaf power index of a weighted voting game.

A game is given by a quota and the weights of its voters. A winning coalition
is a group of voters whose weights add up to at least the quota. A voter is
*critical* in a winning coalition when the coalition would lose without them.
A voter's Banzhaf power index is the number of times that voter is critical,
divided by the number of critical occurrences over all voters.

The search is an exhaustive backtracking over coalitions. Voters are sorted
by weight, largest first, and every result refers to voters in that order.
A branch is cut when the weight still available can no longer reach the
quota. Games with 3 to 12 voters and a positive quota are supported; a quota
larger than the total weight gives an empty result.

## Installation

```
pip install .
```

Install with the test extra to run the test suite:

```
pip install .[test]
pytest
```

## Command line

```
powerindex QUOTA WEIGHT WEIGHT WEIGHT ...
```

For example `powerindex 2 1 1 1` prints:

- the model, as `Modelo: (2; 1, 1, 1)`;
- every winning coalition on its own line, numbered, with `-` for a voter
  who is not in it, a `*` after a critical voter's weight, and the coalition's
  total after `=`;
- one line per voter with its weight, its critical count over the total, and
  its power index to four decimals;
- a summary line with the number of coalitions found and the total number of
  critical votes.

A quota that is not positive, or fewer than 3 or more than 12 weights, prints
an error on standard error and exits with status 1. `powerindex --help` shows
the usage.

## Library use

```python
from powerindex.analysis import banzhaf
from powerindex.display import format_model, render_text, summary

result = banzhaf([1, 1, 1], 2)

print(result.solution_count())   # number of winning coalitions
print(result.total_critical())   # critical occurrences over all voters
print(result.power_index())      # one index per voter

print(format_model(2, [1, 1, 1]))
print(summary(result))
print(render_text(result))
```

`banzhaf(weights, quota)` raises `ValueError` for a voter count outside 3–12
or a quota that is not positive. It returns a `BanzhafResult` holding the
sorted `weights`, the `quota`, the winning `coalitions`, the per-voter
`critical_votes` and the number of search nodes visited (`total_nodes`).
`power_index()` sums to 1 when any voter is critical, and is all zeros
otherwise.

Each winning coalition is a `Coalition`. Its `votes` give each voter's weight
when the voter takes part and 0 otherwise, `critical` flags the critical
voters, `members()` gives the indices of the voters taking part and `total()`
their combined weight.

## Layout helpers

`powerindex.display` computes the geometry for drawing a coalition as a
horizontal bar:

- `coalition_segments(coalition, total_votes, width)` splits a bar of the
  given width into one `Segment` per member, proportional to its votes. A
  `Segment` has a `pixel_width` (at least one pixel) and `star(height)`, the
  outline of the marker for a critical voter.
- `color_for(index)` gives a voter's RGB colour; the palette repeats every
  six voters.
- `star_points(center_x, center_y, size)` gives the ten vertices of a
  five-pointed star.
- `ipb_label(power, critical, total_critical, pixel_width)` gives the text
  shown under a segment, or an empty string when the segment is 50 pixels
  wide or less.

## What it does not do

There is no graphical window. The package computes results, text reports and
bar geometry, but draws nothing itself; reports are printed as plain text.