#- Copyright 2014 GOTO 10.
#- Licensed under the Apache License, Version 2.0 (see LICENSE).

## # Rectangle finder
##
## Given a `+` in the grid, the finder determines the elementary rectangle that
## has that `+` as its top left corner, if there is one. It walks down the left
## edge and, at each `+` it meets, tries that row as the bottom edge by walking
## right along it. Each `+` met on the bottom edge is a candidate bottom right
## corner which is accepted if it {{#is_closing_corner}}(closes) the rectangle.
##
##     (r0, c0) +-----+      <- top edge must be all - or +
##              |     |      <- nothing may run in through the right edge
##              |     |
##     (r1, c0) +-----+ (r1, c1)
##
## The search is greedy: candidates are tried nearest first and the first one
## that closes the rectangle wins. That is what makes the result elementary.
## In
##
##     +--+--+
##     |  |  |
##     +--+--+
##
## the walk along the bottom meets the `+` below the divider before it gets to
## the far corner so the rectangle found from the top left is the left half,
## never the whole thing. The same goes for horizontal dividers and the walk
## down the left edge.
##
## A candidate that doesn't close isn't the end of the search. In
##
##     +-----+
##     |     |
##     +--+--+
##     |  |  |
##     +--+--+
##
## the first `+` on the bottom of the top box has a `-` above it, so the walk
## carries on to the right and finds the actual corner.

from boxcutter.figure import borders
from boxcutter.figure.dom import Rectangle


# Returns the elementary rectangle whose top left corner is at the given
# (row, column), or None if that cell isn't the top left corner of anything.
def find_rectangle_from(grid, corner):
  (top, left) = corner
  if not borders.is_corner(grid.get_cell(top, left)):
    return None
  for bottom in range(top + 1, grid.get_row_count()):
    char = grid.get_cell(bottom, left)
    if borders.is_corner(char):
      result = find_closing_corner(grid, top, left, bottom)
      if not result is None:
        return result
    elif not borders.is_vertical_edge(char):
      # The left edge is broken.
      break
  return None


# Walks right along the given bottom row looking for the first corner that
# closes the rectangle. Returns None if the bottom edge ends before one is
# found.
def find_closing_corner(grid, top, left, bottom):
  for right in range(left + 1, grid.get_column_count()):
    char = grid.get_cell(bottom, right)
    if borders.is_corner(char):
      if is_closing_corner(grid, top, left, bottom, right):
        return Rectangle(top, left, right - left + 1, bottom - top + 1)
    elif not borders.is_horizontal_edge(char):
      break
  return None


# Does (bottom, right) close the rectangle that starts at (top, left)? The left
# and bottom edges have already been walked so only the top and right edges
# are left to check.
def is_closing_corner(grid, top, left, bottom, right):
  if not borders.is_corner(grid.get_cell(top, right)):
    return False
  for column in range(left + 1, right):
    if not borders.is_horizontal_edge(grid.get_cell(top, column)):
      return False
  for row in range(top + 1, bottom):
    char = grid.get_cell(row, right)
    if not borders.is_vertical_edge(char):
      return False
    # A + where something is attached on the outside is fine but one where a
    # line runs into the rectangle means it is divided.
    if borders.is_corner(char) and borders.is_horizontal_edge(grid.get_cell(row, right - 1)):
      return False
  return True


def get_unit_test_suite():
  import unittest
  from boxcutter.figure.grid import Grid

  class FinderTest(unittest.TestCase):

    # Runs the finder from each of the given corners and checks that the
    # results are as expected, None meaning no rectangle.
    def run_finder_test(self, expected, lines):
      grid = Grid(lines)
      for (corner, rect) in expected:
        found = find_rectangle_from(grid, corner)
        if rect is None:
          self.assertIsNone(found, "%s from %s" % (found, corner))
        else:
          self.assertEqual(Rectangle(*rect), found)

    def test_single_box(self):
      self.run_finder_test([
        ((0, 0), (0, 0, 4, 3)),
        ((0, 3), None),
        ((2, 0), None),
        ((2, 3), None),
        ((1, 0), None),
        ((1, 1), None),
      ], [
        "+--+",
        "|  |",
        "+--+",
      ])

    def test_smallest_box(self):
      self.run_finder_test([
        ((0, 0), (0, 0, 2, 2)),
        ((0, 1), None),
      ], [
        "++",
        "++",
      ])

    def test_vertical_divider(self):
      self.run_finder_test([
        ((0, 0), (0, 0, 4, 3)),
        ((0, 3), (0, 3, 4, 3)),
        ((0, 6), None),
        ((2, 3), None),
      ], [
        "+--+--+",
        "|  |  |",
        "+--+--+",
      ])

    def test_horizontal_divider(self):
      self.run_finder_test([
        ((0, 0), (0, 0, 5, 3)),
        ((2, 0), (2, 0, 5, 4)),
        ((0, 4), None),
        ((2, 4), None),
      ], [
        "+---+",
        "|   |",
        "+---+",
        "|   |",
        "|   |",
        "+---+",
      ])

    def test_skips_corners_that_dont_close(self):
      self.run_finder_test([
        ((0, 0), (0, 0, 7, 3)),
        ((2, 0), (2, 0, 4, 3)),
        ((2, 3), (2, 3, 4, 3)),
      ], [
        "+-----+",
        "|     |",
        "+--+--+",
        "|  |  |",
        "+--+--+",
      ])
      # Same thing going down the left edge.
      self.run_finder_test([
        ((0, 0), (0, 0, 4, 5)),
        ((2, 0), None),
      ], [
        "+--+",
        "|  |",
        "+  |",
        "|  |",
        "+--+",
      ])

    def test_open_figures(self):
      # Bottom edge broken.
      self.run_finder_test([
        ((0, 0), None),
      ], [
        "+--+",
        "|  |",
        "+- +",
      ])
      # Left edge broken.
      self.run_finder_test([
        ((0, 0), None),
      ], [
        "+--+",
        "   |",
        "+--+",
      ])
      # No top right corner.
      self.run_finder_test([
        ((0, 0), None),
      ], [
        "+---",
        "|  |",
        "+--+",
      ])
      # Right edge broken.
      self.run_finder_test([
        ((0, 0), None),
      ], [
        "+--+",
        "|   ",
        "+--+",
      ])
      # Runs off the bottom of the grid.
      self.run_finder_test([
        ((0, 0), None),
      ], [
        "+--+",
        "|  |",
      ])

    def test_top_edge_must_be_closed(self):
      self.run_finder_test([
        ((0, 0), (0, 0, 4, 3)),
        ((0, 3), None),
        ((0, 6), (0, 6, 4, 3)),
      ], [
        "+--+  +--+",
        "|  |  |  |",
        "+--+--+--+",
      ])

    def test_right_edge_branches(self):
      # Something attached to the outside of the right edge.
      self.run_finder_test([
        ((0, 0), (0, 0, 4, 5)),
        ((0, 3), (0, 3, 4, 3)),
        ((2, 3), (2, 3, 4, 3)),
      ], [
        "+--+--+",
        "|  |  |",
        "|  +--+",
        "|  |  |",
        "+--+--+",
      ])
      # A line running into the rectangle from the right edge.
      self.run_finder_test([
        ((0, 0), None),
        ((2, 3), (2, 3, 4, 3)),
      ], [
        "+-----+",
        "|     |",
        "|  +--+",
        "|  |  |",
        "+--+--+",
      ])

    def test_labels(self):
      self.run_finder_test([
        ((0, 0), (0, 0, 7, 3)),
      ], [
        "+-----+",
        "| foo |",
        "+-----+",
      ])

    def test_out_of_bounds(self):
      from boxcutter.figure.errors import OutOfBoundsError
      grid = Grid(["++", "++"])
      self.assertRaises(OutOfBoundsError, find_rectangle_from, grid, (2, 0))

  return FinderTest
