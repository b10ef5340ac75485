"""Setup script.

This script is used for installation and generation of
redistributable packages.

@copyright: Copyright (c) 2010 Lewis Baker, Stuart McMahon.
@license: Licensed under the MIT license.
"""

import sys

def run():
  # Grab the __version__ defined in version.py
  import os.path
  sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))
  import buildpath.version

  from setuptools import setup, find_packages
  setup(
    name='BuildPath',
    version=buildpath.version.__version__,
    author="Lewis Baker, Stuart McMahon.",
    description="Path identity and compiler dependency-file parsing for build systems.",
    license="MIT",
    package_dir={'': 'src'},
    packages=find_packages('src', exclude=['*.test', '*.test.*']),
    python_requires='>=3.6',
    extras_require={
      'test': ['pytest'],
      },
    )
  return 0

if __name__ == "__main__":
  sys.exit(run())
