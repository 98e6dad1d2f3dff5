# algoplay

A small collection of teaching material in plain Python:

* textbook algorithms and data structures: a binary max-heap, radix,
  insertion, merge, counting and quick sort, leader (majority element)
  search, and a linked queue and stack;
* solutions to short judge-style puzzles: reversed-number arithmetic, digit
  palindromes, the last digit of a power, GCD and LCM, matrix transposition,
  run-length text shortening and more;
* a falling-snow animation;
* a two-player ships game played with the mouse on a 10 × 10 grid.

The animation and the game open a window with `pygame`, which is installed
with the package.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `algoplay-heap [VALUES ...]`

Inserts the values (default `2 5 3 1 7`) into a max-heap one at a time,
printing the tree as `position : value` lines after each insertion, then
removes the root, prints the tree again, and finally prints the remaining
values from largest to smallest.

### `algoplay-sort ALGORITHM COUNT [--range N] [--seed S]`

Draws `COUNT` random numbers below `N`, prints them, sorts them and prints
the result. `ALGORITHM` is one of `counting`, `insertion`, `merge`, `quick`,
`radix`. Default ranges: 50, except 20 for `insertion` and 9000 for
`radix`. For `radix` the numbers are shifted up by 1000 and the time taken
is printed as well.

### `algoplay-leader COUNT [--seed S]`

Draws `COUNT` random zeros and ones, prints them and then either
`Leader is X` or `No leader`.

### `algoplay-spoj TASK [INPUT]`

Reads the task's input from the file `INPUT`, or from standard input, and
writes the answer. The tasks are:

| Task              | Input                                   | Output per case                               |
|-------------------|-----------------------------------------|-----------------------------------------------|
| `addrev`          | count, then pairs `a b`                 | reversed sum of the reversed numbers          |
| `adding-reversed` | count, then pairs `a b`                 | the same, stopping at zero digits             |
| `bfn1`            | count, then numbers                     | palindrome reached and number of additions    |
| `power`           | count, then pairs `base exponent`       | last digit of `base ** exponent`              |
| `flamaster`       | count, then words                       | runs of 3+ written as letter then length      |
| `runs`            | count, then pairs `length word`         | runs of 3+ written as length then letter      |
| `glutton`         | count, then `n box` and `n` times       | boxes of cookies needed for a day             |
| `nwd`             | count, then pairs `a b`                 | greatest common divisor by prime factors      |
| `przedszkolanka`  | count, then pairs `a b`                 | least common multiple                         |
| `latkarf`         | count, then pairs `a b`                 | larger of the two reversed numbers            |
| `sum`             | count, then `n` and `n` numbers         | their sum                                     |
| `trn`             | `rows cols` then the matrix             | the transposed matrix                         |
| `wow`             | a number `n`                            | `W`, `n` letters `o`, `w`                     |
| `bin`             | a number in binary digits               | its decimal value                             |
| `rownanie`        | triples `a b c` until the input ends    | number of real roots of `a·x² + b·x + c`      |

Example:

```
$ printf '2\n24 1\n4358 754\n' | algoplay-spoj addrev
34
1998
```

### `algoplay-snow [--seed S]`

Opens a 900 × 600 window. Press `2` to start the snow; `Escape` or closing
the window quits.

### `algoplay-ships`

Opens the game window. Each player in turn places a fleet of three
destroyers (2 cells), two cruisers (3), one battleship (4) and one carrier
(5) by clicking cells: the first cell of a ship may be any free cell, the
second must touch it across a side, and each further cell must extend one
end in the same direction. Then the players shoot in turn; a hit earns
another shot, a miss passes the turn. The first to hit all 21 cells of the
other fleet wins. After the game, press `a` or close the window to exit.

## Using the library

```python
from algoplay.heap import MaxHeap
from algoplay.sorting import merge_sort, quick_sort, counting_sort
from algoplay.leader import find_leader
from algoplay.linked import LinkedQueue, LinkedStack
from algoplay.numbers import reverse_digits, last_digit_of_power, lcm
from algoplay.text import compress_runs
from algoplay.spoj import solve

heap = MaxHeap()
for value in (2, 5, 3, 1, 7):
    heap.insert(value)
print(len(heap))                   # 5
print(list(heap.drain()))          # [7, 5, 3, 2, 1]

print(merge_sort([5, 2, 9, 1]))    # [1, 2, 5, 9]
print(counting_sort([3, 0, 2], 4)) # [0, 2, 3]
print(find_leader([1, 1, 0, 1]))   # 1

queue = LinkedQueue()
queue.enqueue(4)
queue.enqueue(8)
print(list(queue))                 # [4, 8]

stack = LinkedStack()
stack.push(4)
stack.push(8)
print(list(stack))                 # [8, 4]

print(reverse_digits(1200))        # 21
print(last_digit_of_power(2, 10))  # 4
print(lcm(4, 6))                   # 12
print(compress_runs("aaab"))       # a3b
print(solve("wow", "3"))           # Wooow
```

`MaxHeap` holds at most 5000 values; inserting more raises `OverflowError`,
and removing from an empty heap, queue or stack raises `IndexError`.

The ships game rules live in `algoplay.ships.board` (`Board`,
`FleetBuilder`, `Game`, `ShipKind`, `ShotResult`) and can be driven without
a window:

```python
from algoplay.ships.board import Board, FleetBuilder, Game, ShotResult

first, second = Board(), Board()
builder = FleetBuilder(first)
builder.click(0)
builder.click(1)      # first destroyer placed on cells 0 and 1
# ... place the rest of both fleets the same way ...
```

`algoplay.ships.ui` adds the pygame front end, with `cell_from_pixel` and
`cell_origin` converting between window pixels and cell numbers.

## Limitations

The snow animation and the ships game need a display; there is no
text-only mode for them. The ships game is for two players at one mouse:
there is no computer opponent and no network play.