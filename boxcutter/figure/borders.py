#- Copyright 2014 GOTO 10.
#- Licensed under the Apache License, Version 2.0 (see LICENSE).

## # Border characters
##
## A figure is drawn using three border characters,
##
##     +--+
##     |  |
##     +--+
##
## A `+` is a corner but also counts as part of the horizontal and vertical
## edges running through it, since a corner is where edges meet. Everything
## else, spaces and any labels written inside the boxes, is not a border.
##
## ## Border character registry
##
## The registry keeps track of which roles each character can play. The module
## level predicates {{#is_corner}}, {{#is_horizontal_edge}} and
## {{#is_vertical_edge}} ask the default registry.

CORNER = 'corner'
HORIZONTAL = 'horizontal'
VERTICAL = 'vertical'


class BorderCharacterRegistry(object):

  NO_ROLES = frozenset()

  def __init__(self):
    self.chars = {}

  def add_char(self, char, roles):
    assert len(char) == 1
    self.chars[char] = frozenset(roles)
    return self

  # Returns the set of roles the given character can play.
  def get_roles(self, char):
    return self.chars.get(char, BorderCharacterRegistry.NO_ROLES)

  def has_role(self, char, role):
    return role in self.get_roles(char)

  # Is this a character that plays any role in a border?
  def is_border(self, char):
    return len(self.get_roles(char)) > 0

  @staticmethod
  def get_default():
    return _DEFAULT_BORDER_CHARACTER_REGISTRY


# The default characters.
_DEFAULT_BORDER_CHARACTER_REGISTRY = (
  BorderCharacterRegistry()
    .add_char("+", [CORNER, HORIZONTAL, VERTICAL])
    .add_char("-", [HORIZONTAL])
    .add_char("|", [VERTICAL])
  )


def is_corner(char):
  return _DEFAULT_BORDER_CHARACTER_REGISTRY.has_role(char, CORNER)


def is_horizontal_edge(char):
  return _DEFAULT_BORDER_CHARACTER_REGISTRY.has_role(char, HORIZONTAL)


def is_vertical_edge(char):
  return _DEFAULT_BORDER_CHARACTER_REGISTRY.has_role(char, VERTICAL)


def is_border(char):
  return _DEFAULT_BORDER_CHARACTER_REGISTRY.is_border(char)


def get_unit_test_suite():
  import unittest

  class BordersTest(unittest.TestCase):

    def test_predicates(self):
      def run_test(expected, char):
        found = (is_corner(char), is_horizontal_edge(char), is_vertical_edge(char))
        self.assertEqual(expected, found)
      run_test((True, True, True), "+")
      run_test((False, True, False), "-")
      run_test((False, False, True), "|")
      run_test((False, False, False), " ")
      run_test((False, False, False), "x")
      run_test((False, False, False), "=")
      run_test((False, False, False), "/")

    def test_is_border(self):
      self.assertTrue(is_border("+"))
      self.assertTrue(is_border("-"))
      self.assertTrue(is_border("|"))
      self.assertFalse(is_border(" "))
      self.assertFalse(is_border("a"))

    def test_custom_registry(self):
      registry = (BorderCharacterRegistry()
        .add_char("=", [HORIZONTAL])
        .add_char("#", [CORNER, HORIZONTAL, VERTICAL]))
      self.assertTrue(registry.has_role("=", HORIZONTAL))
      self.assertFalse(registry.has_role("=", VERTICAL))
      self.assertTrue(registry.has_role("#", CORNER))
      self.assertFalse(registry.has_role("+", CORNER))
      self.assertEqual(BorderCharacterRegistry.NO_ROLES, registry.get_roles("-"))

  return BordersTest
