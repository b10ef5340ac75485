"""System Utilities.

@copyright: Copyright (c) 2010 Lewis Baker, Stuart McMahon.
@license: Licensed under the MIT license.
"""

import platform as platty

_platform = platty.system()

# Some builds of Python can have platform.system() -> "Windows"
# while others have platform.system() -> "Microsoft".
# Make them all use "Windows" here.
_platformLower = _platform.lower()
if _platformLower.startswith('microsoft'):
  _platform, _platformLower = "Windows", "windows"

_isWindows = _platformLower.startswith('windows')
_isCygwin = _platformLower.startswith('cygwin')
del _platformLower

def platform():
  """Returns the current operating system (platform).
  """
  return _platform

def isWindows():
  """Returns True if the current platform is Windows.
  """
  return _isWindows

def isCygwin():
  """Returns True if the current platform is Cygwin.
  """
  return _isCygwin

class Platform(object):
  """The path conventions of an operating system.

  Path functions take one of these rather than querying the host so
  that the conventions of every platform can be exercised from any
  host.

  @ivar name: A short name for the platform, eg. 'posix'.
  @type name: string
  @ivar sep: The native path separator.
  @type sep: string
  @ivar altsep: An alternative separator also recognised on input, or
  None if the platform only has one.
  @type altsep: string or None
  @ivar exe: The extension of executables, without the leading dot.
  Empty on platforms that don't need one.
  @type exe: string
  """

  def __init__(self, name, sep, altsep=None, exe=""):
    self.name = name
    self.sep = sep
    self.altsep = altsep
    self.exe = exe
    self._separators = frozenset(s for s in (sep, altsep) if s)

  def __repr__(self):
    return "Platform(%r)" % self.name

  @property
  def isWindows(self):
    """True if paths use Windows conventions.

    This enables backslash output and treats a leading pair of
    separators as a UNC root.
    """
    return self.sep == '\\'

  @property
  def separators(self):
    """All characters recognised as a path separator.

    @rtype: frozenset of string
    """
    return self._separators

  def isSeparator(self, c):
    """Query if a character is a path separator on this platform.

    @param c: The character to check.
    @type c: string

    @return: True if the character is a separator, otherwise False.
    @rtype: bool
    """
    return c in self._separators

POSIX = Platform("posix", "/")
WINDOWS = Platform("windows", "\\", "/", exe="exe")
# Cygwin paths are posix style but executables still carry '.exe'.
CYGWIN = Platform("cygwin", "/", exe="exe")

def currentPlatform():
  """Returns the path conventions of the host.

  @rtype: L{Platform}
  """
  if _isWindows:
    return WINDOWS
  elif _isCygwin:
    return CYGWIN
  else:
    return POSIX
