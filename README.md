# analgo

A collection of classic algorithms written as small, plain Python functions,
suited to studying how they behave and comparing iterative, recursive,
brute-force and divide-and-conquer versions of the same task.

The package has no runtime dependencies.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `analgo.sorting` | `bubble_sort`, `selection_sort`, `heap_sort`, `merge_sort`, `quick_sort` (random pivot, optional `rng`), `sort_with` (quicksort by a three-way `compare` function), input helpers `ascending`, `descending`, `read_numbers`, `write_numbers` |
| `analgo.guessing` | a number-guessing game that narrows a range knowing only the parity: `Parity`, `GuessStats`, `random_with_parity`, `play_round`, `summarize`, `main` |
| `analgo.recursion` | `factorial_iterative`, `factorial_recursive`, `fibonacci_iterative`, `fibonacci_recursive`, `hanoi_recursive`, `hanoi_iterative` |
| `analgo.isqrt` | integer square root three ways: `isqrt_linear`, `isqrt_binary`, `isqrt_recursive` |
| `analgo.partition` | book allocation and painter's partition: `is_possible`, `find_pages`, `find_pages_brute`, `painters_needed`, `painters_partition`, `random_books` |
| `analgo.frequency` | counting repeats in a sorted sequence: `frequencies_divide` (dict by value), `frequencies_linear` (list of runs) |
| `analgo.maxmin` | `max_min_recursive`, `max_min_iterative`, each returning `(maximum, minimum)` |
| `analgo.closest_pair` | closest pair of points: `Point`, `distance`, `brute_force`, `strip_closest`, `closest_distance`, `random_points` |
| `analgo.knapsack` | `knapsack_01` (table-based 0/1 knapsack with the chosen items), `fractional_knapsack` (greedy by profit per weight), `Item`, `KnapsackResult` |
| `analgo.hashing` | `ChainedHashTable` with separate chaining (`insert`, `get`, `remove`, `clear`, `buckets`, `render`, plus `in`, `len` and `[]`) and the hash functions `char_hash`, `int_hash`, `triple_hash` |
| `analgo.huffman` | `letter_frequencies`, `build_huffman_tree`, `huffman_codes`, `HuffmanNode`, `main` |
| `analgo.chocolate` | cutting a bar into pieces of given lengths: `possible_cuts`, `plan_cuts`, `min_cuts`, `CutPlan` |

Functions that take a sequence return new lists; their input is left untouched.
Invalid arguments, such as negative sizes or empty inputs where a value is
needed, raise `ValueError`.

## Examples

```python
from analgo.sorting import merge_sort
from analgo.recursion import factorial_iterative, hanoi_recursive
from analgo.isqrt import isqrt_binary

merge_sort([5, 3, 1, 4])   # [1, 3, 4, 5]
factorial_iterative(5)     # 120
isqrt_binary(17)           # 4
hanoi_recursive(2)         # [(1, 'A', 'B'), (2, 'A', 'C'), (1, 'B', 'C')]
```

```python
import random
from analgo.sorting import quick_sort

quick_sort([9, 2, 7, 2], random.Random(0))   # [2, 2, 7, 9]
```

```python
from analgo.hashing import ChainedHashTable, int_hash

table = ChainedHashTable(13, int_hash)
table.insert(12, 0)
table.get(12)        # 0
table.remove(12)     # True
```

## Commands

Two interactive programs are installed.

```
analgo-guess [--rounds N] [--seed S]
```

Think of a number between 0 and 100 and say whether it is odd (1) or even (2);
the program guesses, you answer 0 if it is right, 1 if your number is higher
or 2 if it is lower. After the rounds (5 by default) it reports the worst,
best and average number of changed guesses.

```
analgo-huffman [WORD]
```

Takes a word as argument, or asks for one, prints how often each letter
occurs (case is ignored), then prints the Huffman code of every letter.

## What the package does not do

It offers no search routines over sorted data, no maximum-subarray or
big-number multiplication functions and no travelling-salesman heuristic.
Apart from the two commands above there is no interface, and nothing is
timed or benchmarked: the functions only compute their results.