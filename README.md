# algokit

A collection of classic algorithms and small exercise programs, each
written as a plain Python function or class you can import and call.
It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module              | Contents |
|---------------------|----------|
| `algokit.sorting`   | `bubble_sort`, `insertion_sort_recursive` |
| `algokit.arrays`    | `push_dominoes`, `max_profit`, `find_unsorted_subarray`, `rotate_clockwise` |
| `algokit.numbers`   | `is_power_of_two`, `sqrt_bisect`, `is_prime`, `speed_winner`, `min_balls`, `or_pairs_xor`, `knapsack` |
| `algokit.strings`   | `are_anagrams`, `subsequences`, `to_base`, `is_palindrome`, `dual_palindromes`, `max_beads` |
| `algokit.graphs`    | `Graph` (`add_edge`, `dfs`), `dfs_undirected`, `dijkstra`, `topological_sort`, `max_area_of_island` |
| `algokit.bst`       | `TreeNode`, `delete_node` |
| `algokit.usaco`     | `is_leap_year`, `friday_counts`, `gift_balances` |
| `algokit.students`  | `Student`, `StudentRegistry` and a menu-driven console program |
| `algokit.tictactoe` | `Board`, `GameStatus` and a two-player console game |

The sorting functions return new lists and leave their input alone.
`subsequences` is a generator. `dijkstra` takes an adjacency matrix in
which a weight of 0 means "no edge" and reports unreachable vertices as
`math.inf`.

## Examples

```python
from algokit.numbers import is_prime, knapsack
from algokit.sorting import bubble_sort
from algokit.strings import are_anagrams, to_base

is_prime(11)                                    # True
knapsack(50, [10, 20, 30], [60, 100, 120])      # 220
are_anagrams("gram", "arm")                     # False
bubble_sort([5, 1, 4, 2, 8])                    # [1, 2, 4, 5, 8]
to_base(10, 2)                                  # '1010'
```

A directed graph traversed depth first:

```python
from algokit.graphs import Graph

g = Graph()
for v, w in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
    g.add_edge(v, w)
g.dfs(2)                                        # [2, 0, 1, 3]
```

Keeping a small register of students (at most 50 by default, each
taking exactly five courses):

```python
from algokit.students import Student, StudentRegistry

registry = StudentRegistry()
registry.add(Student("Ada", "Lovelace", 1, 9.1, (101, 102, 103, 104, 105)))
registry.find_by_roll(1)            # the Student above
registry.find_by_course(103)        # [the Student above]
registry.update(1, cgpa=9.4)        # 1 record changed
registry.remaining()                # 49
```

A tic-tac-toe board:

```python
from algokit.tictactoe import Board, GameStatus

board = Board()
for cell in (1, 2, 3):
    board.place(cell, "X")
board.status() is GameStatus.WIN    # True
print(board.render())
```

## Console programs

Two interactive programs are installed as commands:

```
algokit-students     # menu-driven student register
algokit-tictactoe    # tic-tac-toe for two players at one keyboard
```

Both read whitespace-separated input from standard input and print to
standard output.

## Limitations

The student register lives in memory only: nothing is saved to disk,
and its contents are gone when `algokit-students` exits.