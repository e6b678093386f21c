# contestkit

A collection of small, self-contained solutions to well-known programming-contest
problems. They are grouped by topic. Every function takes and returns plain Python
values: ints, strings and lists. Inputs that make no sense, such as an empty string
where a percentage is asked for or a node number outside the graph, raise
`ValueError`.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install .[test]
pytest
```

## Modules

- `contestkit.strings`: character frequencies, pattern matching, string partitioning
  and reordering: `are_occurrences_equal`, `number_of_ways`, `digit_count`,
  `largest_word_count`, `count_asterisks`, `minimum_recolors`, `equal_frequency`,
  `percentage_letter`, `can_change`, `repeated_character`, `smallest_number`,
  `partition_string`, `robot_with_string`.
- `contestkit.numbers`: arithmetic and bit tricks: `count_triples`, `sum_of_three`,
  `maximum_even_split`, `min_bit_flips`, `triangular_sum`, `maximum_xor`,
  `count_house_placements`, `find_array`.
- `contestkit.arrays`: counting, greedy and monotonic-stack problems:
  `can_see_persons_count`, `count_equal_divisible_pairs`, `best_hand`,
  `time_required_to_buy`, `maximum_bags`, `minimum_lines`, `total_strength`,
  `number_of_pairs`, `maximum_sum`, `smallest_trimmed_numbers`, `min_operations`,
  `min_number_of_hours`, `most_frequent_even`, `hardest_worker`.
- `contestkit.intervals`: sweep-line problems: `smallest_chair`, `split_painting`,
  `min_groups`.
- `contestkit.grids`: square-matrix problems: `check_x_matrix`, `equal_pairs`,
  `largest_local`.
- `contestkit.graphs`: `maximum_importance`, `count_unreachable_pairs`, `edge_score`.
- `contestkit.segment_tree`: `MaxSegmentTree`, a range-maximum tree over positions
  `0..size-1` with point updates (`update(pos, value)`, `query(lo, hi)` over an
  inclusive range), and `length_of_lis`, which finds the longest strictly increasing
  subsequence whose neighbouring values differ by at most `k`.
- `contestkit.food_ratings`: `FoodRatings`, which tracks ratings per cuisine
  (`change_rating`, `highest_rated`); among equal ratings the alphabetically
  smallest food is reported.

## Examples

```python
from contestkit.strings import smallest_number
from contestkit.numbers import maximum_even_split
from contestkit.segment_tree import length_of_lis
from contestkit.food_ratings import FoodRatings

smallest_number("IIIDIDDD")          # "123549876"
maximum_even_split(12)               # [2, 4, 6]
length_of_lis([4, 2, 1, 4, 3, 4, 5, 8, 15], 3)   # 5

ratings = FoodRatings(["kimchi", "ramen"], ["korean", "japanese"], [9, 14])
ratings.highest_rated("korean")      # "kimchi"
ratings.change_rating("kimchi", 16)
```

## What it does not do

contestkit is a library only. It has no command-line program and does not read
problem input from files or standard input; call the functions from your own code.