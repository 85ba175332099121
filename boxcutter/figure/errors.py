#- Copyright 2014 GOTO 10.
#- Licensed under the Apache License, Version 2.0 (see LICENSE).

## # Errors
##
## Everything that can go wrong while cutting up a figure is reported through a
## subclass of `FigureError`. Each one also extends the closest builtin
## exception, `ValueError` or `IndexError`.


# Superclass of all the errors raised while processing a figure.
class FigureError(Exception):
  pass


# The rows of a figure don't all have the same length.
class MalformedGridError(FigureError, ValueError):

  def __init__(self, row, expected, found):
    super(MalformedGridError, self).__init__(
      "Grid malformed: row %i has length %i, expected %i" % (row, found, expected))
    self.row = row
    self.expected = expected
    self.found = found


# A rectangle was requested with a width or height too small to have borders.
class InvalidDimensionError(FigureError, ValueError):

  def __init__(self, width, height):
    super(InvalidDimensionError, self).__init__(
      "Invalid dimensions %ix%i, width and height must be at least 2" % (width, height))
    self.width = width
    self.height = height


# A cell was looked up outside the grid.
class OutOfBoundsError(FigureError, IndexError):

  def __init__(self, row, column, row_count, column_count):
    super(OutOfBoundsError, self).__init__(
      "Cell (%i, %i) is outside the %ix%i grid" % (row, column, row_count, column_count))
    self.row = row
    self.column = column
