"""System Unit Tests.
"""

import unittest
import sys

class SystemTests(unittest.TestCase):

  def testPosix(self):
    from buildpath.system import POSIX
    self.assertFalse(POSIX.isWindows)
    self.assertEqual(POSIX.sep, "/")
    self.assertEqual(POSIX.exe, "")
    self.assertTrue(POSIX.isSeparator("/"))
    self.assertFalse(POSIX.isSeparator("\\"))
    self.assertFalse(POSIX.isSeparator("a"))
    self.assertEqual(POSIX.separators, frozenset(["/"]))

  def testWindows(self):
    from buildpath.system import WINDOWS
    self.assertTrue(WINDOWS.isWindows)
    self.assertEqual(WINDOWS.sep, "\\")
    self.assertEqual(WINDOWS.exe, "exe")
    self.assertTrue(WINDOWS.isSeparator("/"))
    self.assertTrue(WINDOWS.isSeparator("\\"))
    self.assertFalse(WINDOWS.isSeparator(":"))

  def testCygwin(self):
    from buildpath.system import CYGWIN
    self.assertFalse(CYGWIN.isWindows)
    self.assertEqual(CYGWIN.sep, "/")
    self.assertEqual(CYGWIN.exe, "exe")

  def testCurrentPlatform(self):
    from buildpath.system import currentPlatform, isWindows, isCygwin
    from buildpath.system import POSIX, WINDOWS, CYGWIN
    platform = currentPlatform()
    if isWindows():
      self.assertTrue(platform is WINDOWS)
    elif isCygwin():
      self.assertTrue(platform is CYGWIN)
    else:
      self.assertTrue(platform is POSIX)

  def testCustomPlatform(self):
    from buildpath.system import Platform
    from buildpath.path import normalise
    platform = Platform("test", "/", ":")
    self.assertEqual(repr(platform), "Platform('test')")
    self.assertEqual(normalise("aaa:bbb/..", platform), "aaa")

if __name__ == "__main__":
  suite = unittest.TestLoader().loadTestsFromTestCase(SystemTests)
  runner = unittest.TextTestRunner(verbosity=2)
  sys.exit(not runner.run(suite).wasSuccessful())
