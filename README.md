# cslabs

Small, self-contained data structures, puzzle solvers and a game, each
usable as a library module and, where it makes sense, as an interactive
command. No third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it provides |
| --- | --- |
| `cslabs.point` | `Point`, a frozen 2-D point (defaults to the origin) supporting `+`, `-`, equality and printing as `(x, y)`. |
| `cslabs.dcel` | A doubly connected edge list: `Vertex`, `Face`, `HalfEdge` and `DCEL`, plus `build_polygon` to build one from a ring of at least three points. |
| `cslabs.battle` | A party battle: the abstract `Character` and its kinds `Warrior`, `Elf` and `Wizard` (see `CharType`), with `sum_of_attack` and `fight`. |
| `cslabs.word_ladder` | `WordLadder`, which finds a shortest chain of five-letter words between two dictionary words, changing one letter at a time; `one_off` compares two words. |
| `cslabs.sentiment` | `WordEntry` and a chained `HashTable` for scoring words from rated reviews, with `load_reviews`, `review_sentiment` and `classify`. |
| `cslabs.bstree` | `BSTree`, an unbalanced binary search tree of strings that counts repeated insertions. |
| `cslabs.two_three_tree` | `TwoThreeTree`, a balanced 2-3 tree of strings. |
| `cslabs.jug` | `Jug`, which finds the cheapest moves that leave jug A empty and a goal amount in jug B. |

## Examples

Geometry and a DCEL:

```python
from cslabs.point import Point
from cslabs.dcel import build_polygon

print(Point(1, 4) + Point(2, 2))      # (3, 6)

dcel = build_polygon([(1, 4), (1, 8), (4, 10), (7, 8), (7, 4), (4, 2)])
inside, outside = dcel.faces
a, b = dcel.vertices[0], dcel.vertices[3]
edge = dcel.create_edge(a, b)         # splits the inside face in two
print(dcel.is_connected(a, b))        # True
print(len(dcel.faces))                # 3
```

`DCEL.create_edge` raises `ValueError` if the vertices are already joined,
are the same vertex, or share no face. `DCEL.insert_vertex(a, b, point)`
splits a shared face with a path through a new vertex;
`find_faces`, `adjacent_faces`, `boundary_vertices` and
`find_incident_edge` answer questions about the subdivision.

A battle:

```python
from cslabs.battle import Elf, Warrior, Wizard, fight

party1 = [Warrior("Brak", 100, 10, "North"), Wizard("Ilsa", 100, 8, 3)]
party2 = [Elf("Tavi", 100, 9, "Oak")]
result = fight(party1, party2)
print(result.winner)
print("\n".join(result.log))
```

Each `attack` changes the enemy's health and returns the lines that describe
it. `fight` raises `RuntimeError` if a full round changes nothing.

A word ladder:

```python
from cslabs.word_ladder import WordLadder

ladder = WordLadder("dictionary.txt")   # whitespace-separated five-letter words
print(ladder.find_ladder("stone", "money"))   # a list of words, or None
ladder.output_ladder("stone", "money", "ladder.txt")
```

A binary search tree:

```python
from cslabs.bstree import BSTree

tree = BSTree()
for word in ["m", "c", "x", "c"]:
    tree.insert(word)
print(tree.search("c"), tree.smallest(), tree.largest())   # True c x
print(tree.in_order())     # [('c', 2), ('m', 1), ('x', 1)]
tree.remove("c")           # removes one occurrence
print(tree.height("m"))    # 1
```

A 2-3 tree:

```python
from cslabs.two_three_tree import TwoThreeTree

tree = TwoThreeTree()
for title in ["Alien", "Brazil", "Casablanca", "Dune"]:
    tree.insert(title)
print(tree.search("Dune"))   # True
print(tree.in_order())
```

Sentiment of a review:

```python
from cslabs.sentiment import HashTable, classify, load_reviews, review_sentiment

table = HashTable(20071)
load_reviews(table, ["4 a delightful film", "0 a dull mess"])
value = review_sentiment(table, "delightful film")
print(value, classify(value))
```

Words never seen score the neutral 2.0.

The jug puzzle:

```python
from cslabs.jug import Jug

print(Jug(3, 5, 4, 1, 2, 3, 4, 5, 6).solve())
```

`solve` returns a `Solution` (its steps and cost, printed one step per line
followed by `success <cost>`), or `None` if the goal cannot be reached. It
raises `ValueError` for negative costs, an empty or oversized jug A, a goal
larger than jug B, or a jug B over 1000.

## Commands

| Command | Runs |
| --- | --- |
| `cslabs-battle` | Two players build parties from standard input and fight until one side falls. |
| `cslabs-word-ladder` | Asks for a dictionary file, two words and an output file, and writes the ladder. |
| `cslabs-sentiment [FILE]` | Learns word scores from a file of rated reviews (default `movieReviews.txt`), then rates reviews typed on standard input until an empty line. |
| `cslabs-bstree` | A menu for inserting, removing, searching, printing and measuring a binary search tree. |
| `cslabs-23tree` | A menu for inserting, searching and printing a 2-3 tree of movie titles. |
| `cslabs-jug` | Solves two sample jug puzzles and prints the steps and their cost. |

## What it does not do

- `TwoThreeTree` has no removal; the `cslabs-23tree` menu's "Remove" entry
  asks for a title and leaves the tree unchanged.
- Nothing is stored between runs: every command starts from an empty
  structure.
- The DCEL has no command and no geometric checks; it only keeps the
  topology that its methods are told to build.