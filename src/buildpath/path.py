"""Path Utilities.

Paths are used as the keys of a build graph, so two strings that refer
to the same file must compare equal. L{normalise} produces that canonical
form without touching the file system.

Every function takes an optional L{Platform<buildpath.system.Platform>}
describing the separator conventions to use. If not given the
conventions of the host are used.

@copyright: Copyright (c) 2010 Lewis Baker, Stuart McMahon.
@license: Licensed under the MIT license.
"""

import buildpath.system

exe = buildpath.system.currentPlatform().exe
"""The extension of executables on the host, 'exe' on Windows and ''
otherwise.

@type: string
"""

def _resolve(platform):
  """Return the given platform, or the host platform if None.
  """
  if platform is None:
    return buildpath.system.currentPlatform()
  return platform

def _split(path, platform):
  """Split a path into its non-empty components.
  """
  parts = []
  start = 0
  for i, c in enumerate(path):
    if platform.isSeparator(c):
      if i > start:
        parts.append(path[start:i])
      start = i + 1
  if start < len(path):
    parts.append(path[start:])
  return parts

def _collapse(parts):
  """Remove '.' parts and cancel '..' parts against the part before them.

  '..' parts that can't be cancelled are kept at the front.
  """
  stack = []
  rise = 0
  for part in parts:
    if part == '.':
      continue
    elif part == '..':
      if stack:
        stack.pop()
      else:
        rise += 1
    else:
      stack.append(part)
  return ['..'] * rise + stack

def _normalise(path, platform):
  isSep = platform.isSeparator
  leading = bool(path) and isSep(path[0])
  trailing = bool(path) and isSep(path[-1])

  parts = _collapse(_split(path, platform))
  if not parts:
    if leading and trailing:
      result = '/'
    elif leading:
      result = '/.'
    elif trailing:
      result = './'
    else:
      result = '.'
  else:
    result = '/'.join(parts)
    if leading:
      result = '/' + result
    if trailing:
      result = result + '/'

  return toNative(result, platform)

def normalise(path, platform=None):
  """Return the canonical form of a path.

  The canonical form:
   - uses only the native separator,
   - has no repeated separators,
   - has no '.' parts,
   - has each '..' cancelled against the part before it where there is
     one; any '..' left over stays at the start of the path.

  A leading or trailing separator is kept. A path with nothing left
  becomes '.'. On Windows a path beginning with two separators is a UNC
  path, and those two characters are kept as they are.

  Examples::
    normalise("aaa/../bbb") -> "bbb"
    normalise("aaa//./bbb") -> "aaa/bbb"
    normalise("../aaa/") -> "../aaa/"
    normalise("") -> "."

  @param path: The path to normalise.
  @type path: string
  @param platform: The conventions to normalise with. Defaults to the
  conventions of the host.
  @type platform: L{Platform<buildpath.system.Platform>} or None

  @return: The normalised path.
  @rtype: string
  """
  platform = _resolve(platform)
  isSep = platform.isSeparator
  if platform.isWindows and len(path) >= 2 and isSep(path[0]) and isSep(path[1]):
    # The second separator is kept as the root of the rest of the path.
    return path[:2] + _normalise(path[1:], platform)[1:]
  return _normalise(path, platform)

def dropDirectory1(path, platform=None):
  """Drop the first directory from a path.

  Should only be used on relative paths.

  Examples::
    dropDirectory1("aaa/bbb") -> "bbb"
    dropDirectory1("aaa/") -> ""
    dropDirectory1("aaa") -> ""

  @param path: The path to drop the first directory from.
  @type path: string

  @return: Everything after the first separator, or '' if there is no
  separator.
  @rtype: string
  """
  isSep = _resolve(platform).isSeparator
  for i, c in enumerate(path):
    if isSep(c):
      return path[i+1:]
  return ""

def takeDirectory1(path, platform=None):
  """Take the first directory of a path.

  Should only be used on relative paths.

  Examples::
    takeDirectory1("aaa/bbb") -> "aaa"
    takeDirectory1("aaa/") -> "aaa"
    takeDirectory1("aaa") -> "aaa"

  @param path: The path to take the first directory of.
  @type path: string

  @return: Everything before the first separator, or the whole path if
  there is no separator.
  @rtype: string
  """
  isSep = _resolve(platform).isSeparator
  for i, c in enumerate(path):
    if isSep(c):
      return path[:i]
  return path

def toNative(path, platform=None):
  """Convert '/' separators to the native separator.

  @param path: The path to convert.
  @type path: string

  @return: The path with native separators, eg. '\\' on Windows.
  @rtype: string
  """
  platform = _resolve(platform)
  if platform.sep == '/':
    return path
  return path.replace('/', platform.sep)

def toStandard(path, platform=None):
  """Convert native separators to '/'.

  @param path: The path to convert.
  @type path: string

  @return: The path with '/' separators.
  @rtype: string
  """
  platform = _resolve(platform)
  if platform.sep == '/':
    return path
  return path.replace(platform.sep, '/')

def _extensionStart(path, platform):
  """Return the index of the extension's dot, or -1 if there is none.
  """
  end = 0
  for sep in platform.separators:
    end = max(end, path.rfind(sep) + 1)
  # A leading run of dots (eg. '.bashrc' or '..') is part of the name.
  extStart = path.rfind(".", end)
  if extStart > end and path.count(".", end, extStart) != extStart - end:
    return extStart
  return -1

def extension(path, platform=None):
  """Get the file extension of the last part of a path.

  A file extension is any part after the last dot inclusively.

  @param path: The path to split.
  @type path: string

  @return: The extension part of the path.
  @rtype: string
  """
  extStart = _extensionStart(path, _resolve(platform))
  if extStart == -1:
    return ""
  return path[extStart:]

def hasExtension(path, platform=None):
  """Query if the last part of a path has a file extension.

  @param path: The path to check.
  @type path: string

  @return: True if the path has an extension, otherwise False.
  @rtype: bool
  """
  return _extensionStart(path, _resolve(platform)) != -1

def stripExtension(path, platform=None):
  """Return the part of the path before the extension.

  @param path: The path to split.
  @type path: string

  @return: The part of the path before the extension.
  @rtype: string
  """
  extStart = _extensionStart(path, _resolve(platform))
  if extStart == -1:
    return path
  return path[:extStart]

def replaceExtension(path, ext, platform=None):
  """Remove the current extension of a path and add another.

  Examples::
    replaceExtension("file.c", "o") -> "file.o"
    replaceExtension("file.c", ".o") -> "file.o"
    replaceExtension("bin/file", exe) -> "bin/file.exe" (on Windows)
    replaceExtension("file.c", "") -> "file"

  @param path: The path to change the extension of.
  @type path: string
  @param ext: The new extension, with or without a leading dot. If
  empty the extension is just removed.
  @type ext: string

  @return: The path with the new extension.
  @rtype: string
  """
  path = stripExtension(path, platform)
  if not ext:
    return path
  if ext.startswith('.'):
    return path + ext
  return path + '.' + ext
