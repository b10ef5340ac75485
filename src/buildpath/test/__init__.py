"""Unit Tests.
"""

import unittest

_modules = [
  "buildpath.test.system",
  "buildpath.test.path",
  "buildpath.test.gnu",
  "buildpath.test.logging",
  "buildpath.test.dependencies",
  ]

def suite():
  loader = unittest.TestLoader()
  s = unittest.TestSuite()
  for name in _modules:
    s.addTests(loader.loadTestsFromName(name))
  return s

def run():
  s = suite()
  runner = unittest.TextTestRunner(verbosity=2)
  return runner.run(s)

if __name__ == "__main__":
  import sys
  sys.exit(not run().wasSuccessful())
