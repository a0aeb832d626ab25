# algokit

A collection of classic algorithms, numeric routines and small data
structures, each written to be read as well as used. It has no runtime
dependencies beyond the standard library and supports Python 3.10 and later.

## What is inside

- `algokit.backtracking`
  - `knight_tour`: `knight_tour(size=8)` returns a board of move numbers for a
    tour starting at the corner; raises `NoSolutionError` when none exists.
  - `minimax`: `minimax(...)` and `optimal_value(scores)` for a complete binary
    game tree (the number of scores must be a power of two).
  - `n_queens`: `solve_n_queens(n)` returns every solution as a 0/1 board;
    `format_board` renders one.
  - `rat_maze`: `solve_maze(maze)` returns the right/down path as a 0/1 matrix,
    or `None`.
  - `subarray_sum`: `subarray_sum(target, values)` counts contiguous runs
    adding up to `target`.
  - `sudoku`: `solve_sudoku(grid)` returns a solved copy of a 9x9 grid (0 for
    empty cells) or `None`; `format_grid` highlights the filled-in cells.
  - `wildcard`: `wildcard_match(text, pattern)` with `?` and `*`.
- `algokit.numeric`
  - `roots`: `bisection(a, b)` on `10 - x*x` and `quadratic_formula(a, b, c)`.
  - `number_theory`: `is_factorial`, `is_prime`, `power_recursive`,
    `power_linear`, `fibonacci`, `is_even` (for a string of digits), and a
    Miller–Rabin test, `is_probable_prime(n, rounds=5, rng=None)`.
  - `calculus`: Taylor-series `cosine`, `factorial`, and finite-difference
    `derivative`, `poly_derivative`, `sum_derivative`, `product_derivative`,
    `chain_derivative`.
  - `conversions`: `radian_to_degree`, `degree_to_radian`,
    `radian_to_gradian`, `relu`.
  - `statistics`: `linear_regression` (returns intercept and slope), `mae`,
    `mape`, `mse`, `variance`.
  - `volume`: `volume_cube`, `volume_cuboid`, `volume_cone`,
    `volume_cylinder`, `volume_sphere`.
- `algokit.algorithms`
  - `bits`: `count_set_bits`, `count_bits_flip`, `bit_count`,
    `hamming_distance` (integers or equal-length strings).
  - `kadane`: `max_subarray_sum(values)`.
  - `text`: `string_split(text, delimiter)` and `format_sequence(items)`.
  - `huffman`: `build_tree` and `huffman_codes(symbols, frequencies)`.
  - `knapsack`: `Item` and `fractional_knapsack(capacity, items)`.
  - `sorting`: `bead_sort`, `bubble_sort`, `bucket_sort` (values in [0, 1))
    and `snail_sort` (clockwise spiral of a square matrix).
- `algokit.structures`
  - `linked_list`: `LinkedList` (append, iterate) and `DoublyLinkedList`
    (`push_front`, in-place `bubble_sort`).
  - `bst`: `BinarySearchTree` with `insert`, `remove` and the
    `breadth_first`, `preorder`, `inorder`, `postorder` traversals.
  - `hash_table`: `HashTable` with chained buckets, `insert`, `remove`,
    `in` and `format_table`.
- `algokit.oop`
  - `shapes`: `Shape`, `Rectangle` and `Triangle` with `area()`.
  - `calculators`: `SpeedCalculation`, `Accumulator` and `multiply(*args)`.

## Examples

```python
from algokit.backtracking.wildcard import wildcard_match
from algokit.backtracking.subarray_sum import subarray_sum
from algokit.numeric.number_theory import fibonacci, is_factorial
from algokit.algorithms.bits import count_bits_flip, hamming_distance
from algokit.algorithms.sorting import bubble_sort

wildcard_match("baaabab", "ba*ab")          # True
subarray_sum(0, [-7, -3, -2, 5, 8])         # 1
fibonacci(10)                               # 55
is_factorial(479001600)                     # True
count_bits_flip(10, 20)                     # 4
hamming_distance(11, 2)                     # 2
bubble_sort([5, 3, 8, 4, 6])                # [3, 4, 5, 6, 8]
```

Data structures behave like ordinary Python containers:

```python
from algokit.structures.hash_table import HashTable
from algokit.structures.bst import BinarySearchTree

table = HashTable()
table.insert(37)
37 in table          # True
table.remove(37)
37 in table          # False

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.inorder()       # [20, 30, 40, 50, 70]
tree.remove(30)
```

Invalid input raises an exception rather than returning a sentinel: for
instance `bisection` raises `ValueError` when the interval does not bracket a
root, and `BinarySearchTree.remove` raises `KeyError` for a missing value.

## What it does not do

The package is a library only. It has no command-line program and does not
prompt for input; every routine takes its arguments and returns its result
instead of printing it.

## Tests

The test suite uses pytest and is installed with the `test` extra.