#- Copyright 2014 GOTO 10.
#- Licensed under the Apache License, Version 2.0 (see LICENSE).

## # HTML report
##
## Besides printing the pieces as plain text Boxcutter can write a small HTML
## page showing the figure and each of the pieces it was cut into. The page is
## built from two kinds of blocks: {{#TextBlock}}(text), which is markdown, and
## {{#DiagramBlock}}(diagrams), which are highlighted by pygments. Diagrams
## never go through markdown.

import re
import xml.etree.ElementTree as etree

import markdown
import markdown.extensions
import markdown.treeprocessors
import pygments
import pygments.formatters
import pygments.lexers

from boxcutter.figure.render import render_lines


_HTML_TEMPLATE = """\
<html>
  <head>
    <title>%(title)s</title>
    <style type="text/css">
%(style)s
    </style>
  </head>
  <body>
    <div class="container">
      <div class="page">
        %(contents)s
      </div>
    </div>
  </body>
</html>
"""


## ## Automatic anchor names
##
## Each piece gets its own header and this tree processor wraps the headers in
## named anchors so that you can link directly to, say, `#Piece3`.

class AutoAnchorProcessor(markdown.treeprocessors.Treeprocessor):

  TAGS_TO_ANCHOR = ['h1', 'h2', 'h3']

  # Recursively find all headers and interject anchor nodes around them.
  def extend_headers(self, node):
    if etree.iselement(node):
      child_index = 0
      while child_index < len(node):
        child = node[child_index]
        self.extend_headers(child)
        new_child = self.get_extended_header(child)
        if not new_child is child:
          node[child_index] = new_child
        child_index += 1

  # Given a node, if it is a header returns a replacement with an anchor
  # otherwise returns the node itself.
  def get_extended_header(self, node):
    if not node.tag in AutoAnchorProcessor.TAGS_TO_ANCHOR:
      return node
    text = AutoAnchorProcessor.get_node_text(node)
    name = AutoAnchorProcessor.header_to_anchor_name(text)
    anchor = etree.Element('a')
    anchor.set("name", name)
    anchor.append(node)
    return anchor

  # Given the raw text contents of a header returns the anchor name to use.
  @staticmethod
  def header_to_anchor_name(text):
    alnum = re.sub(r"\W", " ", text)
    raw_parts = re.split(r"\s+", alnum)
    cap_parts = [part.title() for part in raw_parts]
    return "".join(cap_parts)

  # Returns just the raw text contained in a given node.
  @staticmethod
  def get_node_text(node):
    result = []
    if not node.text is None:
      result.append(node.text)
    for child in node:
      result.append(AutoAnchorProcessor.get_node_text(child))
    if not node.tail is None:
      result.append(node.tail)
    return "".join(result)

  def run(self, root):
    self.extend_headers(root)
    return root


class BoxcutterExtension(markdown.extensions.Extension):

  def extendMarkdown(self, md):
    # Runs after the inline patterns so the header text is final.
    md.treeprocessors.register(AutoAnchorProcessor(md), 'autoanchor', 5)


## ## Blocks

# A chunk of markdown.
class TextBlock(object):

  def __init__(self, lines):
    self.lines = lines

  def is_empty(self):
    return False

  def to_html(self, report):
    return report.convert_markdown("\n".join(self.lines + [""]))


# A chunk of figure to be shown verbatim.
class DiagramBlock(object):

  def __init__(self, lines):
    self.lines = lines

  def is_empty(self):
    return len("".join(self.lines).strip()) == 0

  def to_html(self, report):
    highlighted = report.highlight("\n".join(self.lines))
    return "<div class=\"codehilite\">%s</div>" % highlighted


## ## Report

class Report(object):

  def __init__(self, style='default', title='Boxcutter'):
    self.title = title
    self.markdown = markdown.Markdown(extensions=[BoxcutterExtension()])
    self.formatter = pygments.formatters.HtmlFormatter(style=style)
    self.lexer = pygments.lexers.TextLexer()

  # Returns the blocks that make up the report for the given grid and the
  # rectangles it was cut into.
  def build_blocks(self, grid, rectangles):
    if len(rectangles) == 1:
      noun = "piece"
    else:
      noun = "pieces"
    blocks = [
      TextBlock([
        "# %s" % self.title,
        "",
        "A figure of %i rows by %i columns, cut into %i %s." % (
          grid.get_row_count(), grid.get_column_count(), len(rectangles), noun)
      ]),
      DiagramBlock(list(grid.get_rows()))
    ]
    for (index, rectangle) in enumerate(rectangles):
      (top, left) = rectangle.get_top_left()
      (width, height) = rectangle.get_extent()
      blocks.append(TextBlock([
        "## Piece %i" % (index + 1),
        "",
        "%i wide by %i high, top left corner at row %i, column %i." % (
          width, height, top, left)
      ]))
      blocks.append(DiagramBlock(render_lines(width, height)))
    return [block for block in blocks if not block.is_empty()]

  # Converts a grid and its rectangles into a complete html page.
  def convert(self, grid, rectangles):
    blocks = self.build_blocks(grid, list(rectangles))
    body = "".join([block.to_html(self) for block in blocks])
    return _HTML_TEMPLATE % {
      "title": self.title,
      "style": self.get_style_defs(),
      "contents": body
    }

  def convert_markdown(self, text):
    self.markdown.reset()
    return self.markdown.convert(text)

  def highlight(self, text):
    return pygments.highlight(text, self.lexer, self.formatter)

  def get_style_defs(self):
    return self.formatter.get_style_defs('.codehilite')


def get_unit_test_suite():
  import unittest
  from boxcutter.figure.dom import Rectangle
  from boxcutter.figure.grid import Grid

  class ReportTest(unittest.TestCase):

    def test_header_to_anchor_name(self):
      def run_test(expected, input):
        found = AutoAnchorProcessor.header_to_anchor_name(input)
        self.assertEqual(expected, found)
      run_test("Piece1", "Piece 1")
      run_test("Piece12", "  Piece 12 ")
      run_test("FooBarBaz", "Foo.bar.baz!")

    def test_anchors(self):
      html = Report().convert_markdown("## Piece 3\n")
      self.assertIn("name=\"Piece3\"", html)
      self.assertIn("Piece 3</h2>", html)

    def test_build_blocks(self):
      grid = Grid([
        "+--+--+",
        "|  |  |",
        "+--+--+",
      ])
      blocks = Report().build_blocks(grid, [Rectangle(0, 0, 4, 3), Rectangle(0, 3, 4, 3)])
      self.assertEqual(
        [TextBlock, DiagramBlock, TextBlock, DiagramBlock, TextBlock, DiagramBlock],
        [type(block) for block in blocks])
      self.assertEqual(["+--+", "|  |", "+--+"], blocks[3].lines)
      self.assertIn("cut into 2 pieces.", blocks[0].lines[-1])

    def test_empty_figure(self):
      blocks = Report().build_blocks(Grid([]), [])
      self.assertEqual([TextBlock], [type(block) for block in blocks])
      self.assertIn("cut into 0 pieces.", blocks[0].lines[-1])

    def test_convert(self):
      grid = Grid([
        "+--+",
        "|  |",
        "+--+",
      ])
      html = Report(title="Test").convert(grid, iter([Rectangle(0, 0, 4, 3)]))
      self.assertIn("<title>Test</title>", html)
      self.assertIn("cut into 1 piece.", html)
      self.assertIn("name=\"Piece1\"", html)
      self.assertIn("4 wide by 3 high, top left corner at row 0, column 0.", html)
      self.assertIn("<div class=\"codehilite\">", html)
      self.assertIn("+--+", html)
      self.assertIn(".codehilite", html)

  return ReportTest
