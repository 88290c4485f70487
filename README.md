# labkit

A collection of small, self-contained algorithms from data-structures and
numerical-methods coursework, packaged as a Python library with a handful of
command-line tools. It has no dependencies beyond the standard library.

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

### Word statistics and word tables

`labkit.words` computes per-word statistics: `analyze_word` returns a
`WordStats` holding the frequency, length, vowel count, repeated-vowel count
and the number of characters that appear again later in the word.
`split_on_spaces` returns the space-terminated pieces of a line, and
`extract_letter_words` returns the runs of ASCII letters in a token.

Two tables store these statistics by word:

- `labkit.twothree.TwoThreeTree` — a balanced 2-3 search tree with `add`,
  `get`, `items`, `max_frequency`, `with_frequency`, `longest_length`,
  `with_length`, `with_length_and_repeats`, `max_distinct_vowels`,
  `shortest_with_distinct_vowels` and `with_distinct_vowels`.
- `labkit.sorted_vector.SortedVector` — a list kept sorted by key and
  searched by bisection, with `insert`, `find`, `add` and `items`.

In both, `add` stores a new word or counts one more occurrence of a known one.

```python
from labkit.twothree import TwoThreeTree
from labkit.words import analyze_word

tree = TwoThreeTree()
for word in "the cat saw the dog".split():
    tree.add(word, analyze_word(word))

print(tree.max_frequency())      # 2
print(tree.with_frequency(2))    # ['the']
```

### Numerical methods

- `labkit.fixedpoint.fixed_point` — fixed-point iteration for the roots of
  `e^x = 2x^2`, choosing the iteration map by the region of the start value.
- `labkit.integration` — Lagrange interpolation (`lagrange`,
  `table_function` over a built-in data table), the composite `trapezoid`
  and `simpson` rules, and Monte Carlo integration (`monte_carlo_1d` over
  [0, 1), `monte_carlo_2d` over the square [-1, 1]²), each taking an optional
  `random.Random`.

### Stacks

`labkit.stacks.is_mirrored` checks strings of the form `w c reverse(w)` with
`w` over `{a, b}`; `labkit.stacks.to_postfix` converts infix expressions over
letters and `+ - * /` to postfix, raising `ValueError` on an unmatched `)`.

### Regular expressions

`labkit.regex_translate.translate` rewrites extended syntax (`.`, `(group)+`,
`[a-z]`, `[abc]`, `[^abc]`) into plain parentheses, alternation and star; the
helpers `is_regex_symbol`, `any_char_group`, `range_group`, `set_group`,
`complement_group` and `expand_plus` are available on their own.

`labkit.regex_nfa.build_graph` builds an epsilon-transition graph
(`RegexGraph`, with `add_edge` and `reachable`) from a pattern, and
`recognizes` runs a text through it.

### Graphs

`labkit.graphs` provides `bfs_order`, `knight_graph`, `bfs_distances`,
`dijkstra` (returning distances and predecessors), `shortest_path`,
`find_source`, `is_path` and `follows_sequence`, all over adjacency lists
indexed by vertex number.

`labkit.assembly` reassembles DNA fragments: `overlaps` and `merge_overlap`
compare and join fragments, `read_fragments` loads a fragment file (a count
and an overlap length, then the fragments), and `FragmentGraph` builds the
overlap graph (`add_arc`, `has_path`, `remove_cycles`) and returns the
longest assembled string with `longest_path`.

## Command-line tools

| Command | What it does |
| --- | --- |
| `labkit-fixedpoint` | reads a count and that many numbers from standard input, printing the value reached from each |
| `labkit-integrate` | reads two sample counts from standard input and prints the trapezoid, Simpson and Monte Carlo results |
| `labkit-regex` | reads a pattern, a count and that many words from standard input, answering `S` or `N` for each |
| `labkit-assemble` | reads a fragment file (given as an argument, or its name from standard input) and prints the longest assembled sequence |

Each command is also available as `main()` in its module and accepts an
optional argument list.

## What it does not do

- There is no command that reads a text, fills a word table and answers
  frequency, length or vowel queries about it; the tables are available
  only as library classes.
- The word tables are limited to the 2-3 tree and the sorted list; there is
  no plain binary search tree, treap or red-black tree.
- Nothing in the package computes or plots basins of attraction of Newton's
  method, and no external program is started.