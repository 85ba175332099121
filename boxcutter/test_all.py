#- Copyright 2014 GOTO 10.
#- Licensed under the Apache License, Version 2.0 (see LICENSE).

## # Test collection
##
## The tests live next to the code in each module's `get_unit_test_suite`. This
## module makes them visible at toplevel so test runners that go looking for
## test modules, pytest or `python -m unittest`, find them too.

from boxcutter import main, report
from boxcutter.figure import borders, dom, finder, grid, pieces, render, scanner

BordersTest = borders.get_unit_test_suite()
GridTest = grid.get_unit_test_suite()
RectangleTest = dom.get_unit_test_suite()
FinderTest = finder.get_unit_test_suite()
ScannerTest = scanner.get_unit_test_suite()
RenderTest = render.get_unit_test_suite()
PiecesTest = pieces.get_unit_test_suite()
ReportTest = report.get_unit_test_suite()
BoxcutterTest = main.get_unit_test_suite()
