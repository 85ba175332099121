#- Copyright 2014 GOTO 10.
#- Licensed under the Apache License, Version 2.0 (see LICENSE).

from boxcutter.figure.errors import InvalidDimensionError


## ## Rectangle
##
## A rectangle found in a figure, given by the position of its top left corner
## and its extent. The extent includes the borders so the smallest possible
## rectangle,
##
##     ++
##     ++
##
## is 2 by 2. Rectangles have no identity beyond their coordinates, two
## rectangles in the same place with the same extent are equal.

class Rectangle(object):

  def __init__(self, top, left, width, height):
    if width < 2 or height < 2:
      raise InvalidDimensionError(width, height)
    self.top = top
    self.left = left
    self.width = width
    self.height = height

  def get_top(self):
    return self.top

  def get_left(self):
    return self.left

  def get_width(self):
    return self.width

  def get_height(self):
    return self.height

  # Row of the bottom border.
  def get_bottom(self):
    return self.top + self.height - 1

  # Column of the right border.
  def get_right(self):
    return self.left + self.width - 1

  # Returns the (row, column) of the top left corner.
  def get_top_left(self):
    return (self.top, self.left)

  # Returns the (row, column) of the bottom right corner.
  def get_bottom_right(self):
    return (self.get_bottom(), self.get_right())

  # Returns the (width, height) of this rectangle.
  def get_extent(self):
    return (self.width, self.height)

  def __iter__(self):
    yield self.top
    yield self.left
    yield self.width
    yield self.height

  def __eq__(self, that):
    if not isinstance(that, Rectangle):
      return NotImplemented
    return tuple(self) == tuple(that)

  def __hash__(self):
    return hash(tuple(self))

  def __repr__(self):
    return "Rectangle(top=%i, left=%i, width=%i, height=%i)" % tuple(self)

  def __str__(self):
    return "r(%i, %i)+%ix%i" % tuple(self)


def get_unit_test_suite():
  import unittest

  class RectangleTest(unittest.TestCase):

    def test_derived(self):
      rect = Rectangle(1, 2, 4, 3)
      self.assertEqual(3, rect.get_bottom())
      self.assertEqual(5, rect.get_right())
      self.assertEqual((1, 2), rect.get_top_left())
      self.assertEqual((3, 5), rect.get_bottom_right())
      self.assertEqual((4, 3), rect.get_extent())
      self.assertEqual([1, 2, 4, 3], list(rect))

    def test_equality(self):
      self.assertEqual(Rectangle(0, 0, 4, 3), Rectangle(0, 0, 4, 3))
      self.assertNotEqual(Rectangle(0, 0, 4, 3), Rectangle(0, 1, 4, 3))
      self.assertNotEqual(Rectangle(0, 0, 4, 3), Rectangle(0, 0, 3, 4))
      self.assertNotEqual(Rectangle(0, 0, 4, 3), (0, 0, 4, 3))
      self.assertEqual(1, len(set([Rectangle(0, 0, 2, 2), Rectangle(0, 0, 2, 2)])))

    def test_invalid_dimensions(self):
      self.assertRaises(InvalidDimensionError, Rectangle, 0, 0, 1, 3)
      self.assertRaises(InvalidDimensionError, Rectangle, 0, 0, 3, 1)
      self.assertRaises(ValueError, Rectangle, 0, 0, 0, 0)

    def test_str(self):
      self.assertEqual("r(0, 3)+4x3", str(Rectangle(0, 3, 4, 3)))
      self.assertEqual("Rectangle(top=0, left=3, width=4, height=3)",
        repr(Rectangle(0, 3, 4, 3)))

  return RectangleTest
