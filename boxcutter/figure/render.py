#- Copyright 2014 GOTO 10.
#- Licensed under the Apache License, Version 2.0 (see LICENSE).

## # Rendering
##
## Rectangles are drawn from scratch given just their width and height, so a
## 5 by 3 rectangle always comes out as
##
##     +---+
##     |   |
##     +---+
##
## regardless of what was written inside it in the original figure.

from boxcutter.figure.errors import InvalidDimensionError


# Returns the lines of a width by height rectangle.
def render_lines(width, height):
  if width < 2 or height < 2:
    raise InvalidDimensionError(width, height)
  edge = "+" + ("-" * (width - 2)) + "+"
  inside = "|" + (" " * (width - 2)) + "|"
  return [edge] + ([inside] * (height - 2)) + [edge]


# Returns a width by height rectangle as a newline-terminated block of text.
def render(width, height):
  return "\n".join(render_lines(width, height)) + "\n"


def render_rectangle(rectangle):
  return render(rectangle.get_width(), rectangle.get_height())


## ## Overlay
##
## Drawing every rectangle of a decomposition back at its position gives the
## borders of the original figure. Where rectangles share a border the shared
## corners may be drawn as `+` by one rectangle and as an edge by the other,
## for instance the middle of the bottom edge in
##
##     +-----+
##     |     |
##     +--+--+
##     |  |  |
##     +--+--+
##
## is an edge of the top box but a corner of the two below it. Corners always
## win.

def overlay(rectangles, row_count, column_count):
  canvas = [[" "] * column_count for row in range(0, row_count)]
  for rectangle in rectangles:
    (top, left) = rectangle.get_top_left()
    lines = render_lines(rectangle.get_width(), rectangle.get_height())
    for (dy, line) in enumerate(lines):
      row = canvas[top + dy]
      for (dx, char) in enumerate(line):
        if char == " ":
          continue
        if row[left + dx] != "+":
          row[left + dx] = char
  return ["".join(row) for row in canvas]


def get_unit_test_suite():
  import unittest
  from boxcutter.figure.dom import Rectangle

  class RenderTest(unittest.TestCase):

    def test_render(self):
      def run_test(expected, width, height):
        self.assertEqual("\n".join(expected) + "\n", render(width, height))
      run_test([
        "+--+",
        "|  |",
        "+--+",
      ], 4, 3)
      run_test([
        "++",
        "++",
      ], 2, 2)
      run_test([
        "+-----+",
        "+-----+",
      ], 7, 2)
      run_test([
        "++",
        "||",
        "||",
        "++",
      ], 2, 4)

    def test_single_box_example(self):
      self.assertEqual("+--+\n|  |\n+--+\n", render(4, 3))
      self.assertEqual("+--+\n|  |\n+--+\n", render_rectangle(Rectangle(5, 5, 4, 3)))

    def test_idempotent(self):
      self.assertEqual(render(6, 4), render(6, 4))
      self.assertEqual(render_lines(3, 5), render_lines(3, 5))

    def test_invalid_dimensions(self):
      for (width, height) in [(1, 3), (3, 1), (0, 0), (-2, 5)]:
        self.assertRaises(InvalidDimensionError, render, width, height)
        self.assertRaises(InvalidDimensionError, render_lines, width, height)

    def test_overlay(self):
      def run_test(expected, rectangles):
        found = overlay([Rectangle(*r) for r in rectangles],
          len(expected), len(expected[0]))
        self.assertEqual(expected, found)
      run_test([
        "      ",
        " +--+ ",
        " |  | ",
        " +--+ ",
      ], [(1, 1, 4, 3)])
      run_test([
        "+-----+",
        "|     |",
        "+--+--+",
        "|  |  |",
        "+--+--+",
      ], [(0, 0, 7, 3), (2, 0, 4, 3), (2, 3, 4, 3)])
      # Same thing, other order.
      run_test([
        "+-----+",
        "|     |",
        "+--+--+",
        "|  |  |",
        "+--+--+",
      ], [(2, 3, 4, 3), (2, 0, 4, 3), (0, 0, 7, 3)])
      run_test([
        "   ",
        "   ",
      ], [])

  return RenderTest
