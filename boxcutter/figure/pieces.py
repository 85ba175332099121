#- Copyright 2014 GOTO 10.
#- Licensed under the Apache License, Version 2.0 (see LICENSE).

## # Pieces
##
## The entry points for cutting a figure into pieces. A figure can be given
## either as text or as an already built {{grid.py}}(grid). Either way the
## grid is built and checked before anything else happens so a malformed
## figure fails right away rather than when the first piece is requested.
##
## The results are single-pass iterators. They produce pieces as they are
## found and once they have run out they stay that way; to go again, call the
## function again.

from boxcutter.figure.grid import Grid
from boxcutter.figure.render import render_rectangle
from boxcutter.figure.scanner import DecompositionScanner


def to_grid(figure):
  if isinstance(figure, Grid):
    return figure
  return Grid.parse(figure)


# Returns an iterator over the elementary rectangles of the given figure.
def decompose(figure):
  return DecompositionScanner(to_grid(figure))


# Returns an iterator over the elementary rectangles of the given figure, each
# drawn as a newline-terminated block of text.
def get_figure_rectangles(figure):
  scanner = decompose(figure)
  def generate():
    for rectangle in scanner:
      yield render_rectangle(rectangle)
  return generate()


def get_unit_test_suite():
  import unittest
  from boxcutter.figure.dom import Rectangle
  from boxcutter.figure.errors import MalformedGridError
  from boxcutter.figure.render import overlay

  # Figures that are used by several tests along with the rectangles they are
  # made of.
  FIGURES = [
    ([
      "+--+",
      "|  |",
      "+--+",
    ], [(0, 0, 4, 3)]),
    ([
      "+--+--+",
      "|  |  |",
      "+--+--+",
    ], [(0, 0, 4, 3), (0, 3, 4, 3)]),
    ([
      "+------------+",
      "|            |",
      "|            |",
      "|            |",
      "+------+-----+",
      "|      |     |",
      "|      |     |",
      "+------+-----+",
    ], [(0, 0, 14, 5), (4, 0, 8, 4), (4, 7, 7, 4)]),
    ([
      "   +-----+     ",
      "   |     |     ",
      "+--+-----+----+",
      "|             |",
      "|             |",
      "+-------------+",
    ], [(0, 3, 7, 3), (2, 0, 15, 4)]),
    ([
      "+--+--+",
      "|  |  |",
      "+--+--+",
      "|  |  |",
      "+--+--+",
    ], [(0, 0, 4, 3), (0, 3, 4, 3), (2, 0, 4, 3), (2, 3, 4, 3)]),
    ([
      "                   ",
      " +------------+    ",
      " |            |    ",
      " +---+--------+    ",
      " |   |        |    ",
      " |   +--------+--+ ",
      " |   |           | ",
      " +---+-----------+ ",
      "                   ",
    ], [(1, 1, 14, 3), (3, 1, 5, 5), (3, 5, 10, 3), (5, 5, 13, 3)]),
    ([
      "++",
      "++",
    ], [(0, 0, 2, 2)]),
  ]

  class PiecesTest(unittest.TestCase):

    def test_decompose(self):
      for (lines, expected) in FIGURES:
        found = list(decompose("\n".join(lines) + "\n"))
        self.assertEqual([Rectangle(*r) for r in expected], found)

    def test_decompose_grid(self):
      grid = Grid([
        "+--+",
        "|  |",
        "+--+",
      ])
      self.assertEqual([Rectangle(0, 0, 4, 3)], list(decompose(grid)))

    def test_single_box(self):
      found = list(get_figure_rectangles("+--+\n|  |\n+--+\n"))
      self.assertEqual(["+--+\n|  |\n+--+\n"], found)

    def test_divider_gives_two_pieces(self):
      found = list(get_figure_rectangles("+--+--+\n|  |  |\n+--+--+\n"))
      self.assertEqual(["+--+\n|  |\n+--+\n"] * 2, found)

    def test_rendered_pieces(self):
      found = list(get_figure_rectangles("\n".join([
        "+------------+",
        "|            |",
        "|            |",
        "|            |",
        "+------+-----+",
        "|      |     |",
        "|      |     |",
        "+------+-----+",
      ])))
      self.assertEqual([
        "\n".join([
          "+------------+",
          "|            |",
          "|            |",
          "|            |",
          "+------------+",
        ]) + "\n",
        "\n".join([
          "+------+",
          "|      |",
          "|      |",
          "+------+",
        ]) + "\n",
        "\n".join([
          "+-----+",
          "|     |",
          "|     |",
          "+-----+",
        ]) + "\n",
      ], found)

    def test_labels_are_dropped(self):
      found = list(get_figure_rectangles("+-----+\n| foo |\n+-----+\n"))
      self.assertEqual(["+-----+\n|     |\n+-----+\n"], found)

    # Drawing the pieces back in place gives the borders of the figure.
    def test_round_trip(self):
      for (lines, expected) in FIGURES:
        grid = Grid(lines)
        pieces = list(decompose(grid))
        reassembled = overlay(pieces, grid.get_row_count(), grid.get_column_count())
        self.assertEqual(grid.get_borders(), reassembled)

    def test_no_duplicates(self):
      for (lines, expected) in FIGURES:
        pieces = list(decompose(Grid(lines)))
        self.assertEqual(len(pieces), len(set(pieces)))

    def test_malformed(self):
      jagged = "+--+\n|  |\n+--+--\n"
      self.assertRaises(MalformedGridError, decompose, jagged)
      # Fails on the call, not when the first piece is requested.
      self.assertRaises(MalformedGridError, get_figure_rectangles, jagged)

    def test_single_pass(self):
      pieces = get_figure_rectangles("+--+--+\n|  |  |\n+--+--+\n")
      self.assertEqual(2, len(list(pieces)))
      self.assertEqual([], list(pieces))
      # Asking again starts over.
      again = get_figure_rectangles("+--+--+\n|  |  |\n+--+--+\n")
      self.assertEqual(2, len(list(again)))

    def test_lazy(self):
      pieces = get_figure_rectangles("+--+--+\n|  |  |\n+--+--+\n")
      self.assertEqual("+--+\n|  |\n+--+\n", next(pieces))
      self.assertEqual("+--+\n|  |\n+--+\n", next(pieces))
      self.assertRaises(StopIteration, next, pieces)

    def test_empty(self):
      self.assertEqual([], list(get_figure_rectangles("")))
      self.assertEqual([], list(get_figure_rectangles("    \n    \n")))

  return PiecesTest
