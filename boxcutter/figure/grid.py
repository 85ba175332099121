#- Copyright 2014 GOTO 10.
#- Licensed under the Apache License, Version 2.0 (see LICENSE).

## # Grid
##
## The grid is a read-only view of a figure as a table of characters. It is
## built once, checked to be rectangular, and never changed after that, so any
## number of scanners can share one.

from boxcutter.figure import borders
from boxcutter.figure.errors import MalformedGridError, OutOfBoundsError


class Grid(object):

  def __init__(self, rows):
    self.rows = tuple(rows)
    if len(self.rows) == 0:
      self.column_count = 0
    else:
      self.column_count = len(self.rows[0])
    # All rows must be as long as the first.
    for (index, row) in enumerate(self.rows):
      if len(row) != self.column_count:
        raise MalformedGridError(index, self.column_count, len(row))

  # Builds a grid from a block of text. A trailing newline doesn't count as an
  # extra empty row.
  @staticmethod
  def parse(text):
    return Grid(text.splitlines())

  def get_row_count(self):
    return len(self.rows)

  def get_column_count(self):
    return self.column_count

  def get_rows(self):
    return self.rows

  # Returns true iff (row, column) is within the grid.
  def has_cell(self, row, column):
    return (0 <= row < len(self.rows)) and (0 <= column < self.column_count)

  # Returns the character at (row, column).
  def get_cell(self, row, column):
    if not self.has_cell(row, column):
      raise OutOfBoundsError(row, column, len(self.rows), self.column_count)
    return self.rows[row][column]

  # Returns the rows of this grid with everything but the border characters
  # blanked out.
  def get_borders(self):
    def strip_row(row):
      return "".join([(c if borders.is_border(c) else " ") for c in row])
    return [strip_row(row) for row in self.rows]

  def __str__(self):
    return "\n".join(self.rows)


def get_unit_test_suite():
  import unittest

  class GridTest(unittest.TestCase):

    def test_parse(self):
      def run_test(expected_rows, expected_columns, text):
        grid = Grid.parse(text)
        self.assertEqual(expected_rows, grid.get_row_count())
        self.assertEqual(expected_columns, grid.get_column_count())
      run_test(3, 4, "+--+\n|  |\n+--+\n")
      run_test(3, 4, "+--+\n|  |\n+--+")
      run_test(3, 4, "+--+\r\n|  |\r\n+--+\r\n")
      run_test(0, 0, "")
      run_test(2, 0, "\n\n")

    def test_malformed(self):
      def run_test(row, text):
        with self.assertRaises(MalformedGridError) as context:
          Grid.parse(text)
        self.assertEqual(row, context.exception.row)
      run_test(1, "+--+\n|  \n+--+\n")
      run_test(2, "+--+\n|  |\n+--+--+\n")
      run_test(1, "+\n\n+")

    def test_malformed_is_value_error(self):
      self.assertRaises(ValueError, Grid, ["+-+", "|"])

    def test_get_cell(self):
      grid = Grid([
        "+-+",
        "|a|",
        "+-+",
      ])
      self.assertEqual("+", grid.get_cell(0, 0))
      self.assertEqual("-", grid.get_cell(0, 1))
      self.assertEqual("|", grid.get_cell(1, 0))
      self.assertEqual("a", grid.get_cell(1, 1))
      self.assertEqual("+", grid.get_cell(2, 2))

    def test_out_of_bounds(self):
      grid = Grid([
        "+-+",
        "+-+",
      ])
      for (row, column) in [(2, 0), (0, 3), (-1, 0), (0, -1), (5, 5)]:
        self.assertFalse(grid.has_cell(row, column))
        self.assertRaises(OutOfBoundsError, grid.get_cell, row, column)
      self.assertRaises(IndexError, grid.get_cell, 2, 2)
      self.assertRaises(OutOfBoundsError, Grid([]).get_cell, 0, 0)

    def test_get_borders(self):
      grid = Grid([
        "+-----+",
        "| foo |",
        "+-----+",
      ])
      self.assertEqual([
        "+-----+",
        "|     |",
        "+-----+",
      ], grid.get_borders())

    def test_str(self):
      self.assertEqual("+-+\n+-+", str(Grid.parse("+-+\n+-+\n")))

  return GridTest
