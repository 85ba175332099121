#- Copyright 2014 GOTO 10.
#- Licensed under the Apache License, Version 2.0 (see LICENSE).

## # Decomposition scanner
##
## The scanner visits every cell of the grid in row-major order, top to bottom
## and left to right, and asks the {{finder.py}}(finder) for the rectangle that
## has each `+` as its top left corner. Rectangles are handed out one at a time
## as they are found.
##
## The scanner is an iterator with a cursor that only moves forward. It starts
## out `SCANNING` at (0, 0) and becomes `EXHAUSTED` when the cursor moves past
## the last row, after which it stays exhausted. To go over a figure again make
## a new scanner; they're cheap and any number of them can share a grid.
##
## Nothing is marked as visited along the way. The same `+` will often be a
## corner of several rectangles, for instance the middle `+` of
##
##     +--+--+
##     |  |  |
##     +--+--+
##
## is the top right corner of the left box and the top left corner of the right
## one, but it is only ever the top left corner of one rectangle so each
## rectangle is found exactly once.

import logging

from boxcutter.figure import borders
from boxcutter.figure.finder import find_rectangle_from


class DecompositionScanner(object):

  SCANNING = 'scanning'
  EXHAUSTED = 'exhausted'

  def __init__(self, grid):
    self.grid = grid
    self.row = 0
    self.column = 0
    if grid.get_row_count() == 0 or grid.get_column_count() == 0:
      self.state = DecompositionScanner.EXHAUSTED
    else:
      self.state = DecompositionScanner.SCANNING

  def get_state(self):
    return self.state

  def is_exhausted(self):
    return self.state == DecompositionScanner.EXHAUSTED

  # Returns the (row, column) of the next cell to visit or None if there are
  # no more.
  def get_cursor(self):
    if self.is_exhausted():
      return None
    return (self.row, self.column)

  # Moves the cursor to the next cell.
  def advance(self):
    self.column += 1
    if self.column >= self.grid.get_column_count():
      self.column = 0
      self.row += 1
      if self.row >= self.grid.get_row_count():
        self.state = DecompositionScanner.EXHAUSTED

  def __iter__(self):
    return self

  def __next__(self):
    while not self.is_exhausted():
      corner = self.get_cursor()
      self.advance()
      if not borders.is_corner(self.grid.get_cell(*corner)):
        continue
      result = find_rectangle_from(self.grid, corner)
      if not result is None:
        logging.debug("Found %s", result)
        return result
    raise StopIteration()


def get_unit_test_suite():
  import unittest
  from boxcutter.figure.dom import Rectangle
  from boxcutter.figure.grid import Grid

  class ScannerTest(unittest.TestCase):

    def test_scan(self):
      def run_test(expected, lines):
        found = list(DecompositionScanner(Grid(lines)))
        self.assertEqual([Rectangle(*r) for r in expected], found)

      run_test([(0, 0, 4, 3)], [
        "+--+",
        "|  |",
        "+--+",
      ])
      run_test([(0, 0, 4, 3), (0, 3, 4, 3)], [
        "+--+--+",
        "|  |  |",
        "+--+--+",
      ])
      run_test([(1, 1, 4, 3), (1, 6, 4, 3)], [
        "           ",
        " +--+ +--+ ",
        " |  | |  | ",
        " +--+ +--+ ",
        "           ",
      ])
      # Rectangles come out in the row-major order of their top left corners.
      run_test([
        (0, 0, 7, 3),
        (2, 0, 4, 3),
        (2, 3, 4, 3)
      ], [
        "+-----+",
        "|     |",
        "+--+--+",
        "|  |  |",
        "+--+--+",
      ])
      run_test([], [
        "      ",
        "  --  ",
        "      ",
      ])
      run_test([], [])
      run_test([], ["", ""])

    def test_state_machine(self):
      scanner = DecompositionScanner(Grid([
        "+-+",
        "| |",
        "+-+",
      ]))
      self.assertEqual(DecompositionScanner.SCANNING, scanner.get_state())
      self.assertEqual((0, 0), scanner.get_cursor())
      self.assertEqual(Rectangle(0, 0, 3, 3), next(scanner))
      self.assertEqual((0, 1), scanner.get_cursor())
      self.assertFalse(scanner.is_exhausted())
      self.assertRaises(StopIteration, next, scanner)
      self.assertTrue(scanner.is_exhausted())
      self.assertEqual(DecompositionScanner.EXHAUSTED, scanner.get_state())
      self.assertIsNone(scanner.get_cursor())
      # Exhausted is final.
      self.assertRaises(StopIteration, next, scanner)
      self.assertEqual([], list(scanner))

    def test_cursor_wraps_rows(self):
      scanner = DecompositionScanner(Grid(["ab", "cd"]))
      cursors = []
      while not scanner.is_exhausted():
        cursors.append(scanner.get_cursor())
        scanner.advance()
      self.assertEqual([(0, 0), (0, 1), (1, 0), (1, 1)], cursors)

    def test_empty_grid_starts_exhausted(self):
      self.assertTrue(DecompositionScanner(Grid([])).is_exhausted())
      self.assertTrue(DecompositionScanner(Grid(["", ""])).is_exhausted())

    def test_shared_grid(self):
      grid = Grid([
        "+--+--+",
        "|  |  |",
        "+--+--+",
      ])
      first = DecompositionScanner(grid)
      second = DecompositionScanner(grid)
      self.assertEqual(Rectangle(0, 0, 4, 3), next(first))
      self.assertEqual(Rectangle(0, 0, 4, 3), next(second))
      self.assertEqual(Rectangle(0, 3, 4, 3), next(first))
      self.assertEqual([Rectangle(0, 3, 4, 3)], list(second))

  return ScannerTest
