#- Copyright 2013 GOTO 10.
#- Licensed under the Apache License, Version 2.0 (see LICENSE).

import setuptools

setuptools.setup(
  name = "Boxcutter",
  version = "0.0.1",
  description = "Cuts ascii box figures into their elementary rectangles",
  author = "Christian Plesner Hansen",
  url = "http://c7n.p5r.org",
  packages = setuptools.find_packages(),
  entry_points = {
    'console_scripts': [
      'boxcutter = boxcutter.main:run',
    ]
  },
  install_requires = ['markdown>=3.0', 'pygments'],
  extras_require = {'test': ['pytest']},
  python_requires = '>=3.7',
  include_package_data = True
)
