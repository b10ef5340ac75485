"""Utilities for dealing with GNU tools.

Compilers such as gcc and clang can write the headers they include out as
a small Makefile (see the -M family of flags), eg::

  main.o: main.c include/config.h \\
   include/my\\ header.h

Only that subset of Makefile syntax is understood: rules of the form
'targets: dependencies'. Anything else, such as variables, recipes or
include directives, is skipped.

@copyright: Copyright (c) 2010 Lewis Baker, Stuart McMahon.
@license: Licensed under the MIT license.
"""

_NORMAL = 0
_ESCAPED = 1

# Characters that lose their special meaning when preceded by a backslash.
_escapable = frozenset(' \t\f\v:#')

def _hasContinuation(line):
  """Query if a line ends in an unescaped backslash.
  """
  count = len(line) - len(line.rstrip('\\'))
  return count % 2 == 1

def _logicalLines(text):
  """Yield the lines of the text with continuations joined.
  """
  pending = []
  for line in text.split('\n'):
    if line.endswith('\r'):
      line = line[:-1]
    if _hasContinuation(line):
      pending.append(line[:-1])
    else:
      pending.append(line)
      yield ' '.join(pending)
      pending = []
  if pending:
    yield ' '.join(pending)

def _parseLine(line):
  """Split a logical line into its targets and dependencies.

  @return: A (targets, dependencies) tuple, or None if the line has
  no ':' separator.
  @rtype: tuple(list of string, list of string) or None
  """
  targets = []
  dependencies = []
  tokens = targets
  token = []
  state = _NORMAL

  def endToken():
    if token:
      tokens.append(''.join(token))
      del token[:]

  for c in line:
    if state == _ESCAPED:
      state = _NORMAL
      if c in _escapable:
        token.append(c)
        continue
      if c == '\\':
        # An escaped backslash, as counted when joining continuations.
        token.append('\\\\')
        continue
      # Not an escape after all, eg. 'src\foo.h' on Windows.
      token.append('\\')

    if c == '\\':
      state = _ESCAPED
    elif c == '#':
      break
    elif c.isspace():
      endToken()
    elif c == ':' and tokens is targets:
      endToken()
      tokens = dependencies
    else:
      token.append(c)

  if state == _ESCAPED:
    token.append('\\')
  endToken()

  if tokens is targets:
    return None
  return targets, dependencies

def parseMakefile(text):
  """Extract the rules from the text of a Makefile.

  Example::
    parseMakefile("a: b c\\nd : e") -> [("a", ["b", "c"]), ("d", ["e"])]

  A line with more than one target produces a rule for each target, all
  sharing the same dependencies. Lines without a ':' are ignored.

  @param text: The text of the Makefile.
  @type text: string

  @return: A list of (target, dependencies) tuples in the order they
  appear in the text.
  @rtype: list of tuple(string, list of string)
  """
  rules = []
  for line in _logicalLines(text):
    parsed = _parseLine(line)
    if parsed is None:
      continue
    targets, dependencies = parsed
    for target in targets:
      rules.append((target, list(dependencies)))
  return rules

def readMakefile(path):
  """Read a Makefile and extract its rules.

  @param path: The path to the Makefile.
  @type path: string

  @return: A list of (target, dependencies) tuples.
  @rtype: list of tuple(string, list of string)

  @raise EnvironmentError: If the file could not be read.
  """
  # Decoding never fails: undecodable bytes round-trip as surrogates.
  f = open(path, 'rt', encoding='utf-8', errors='surrogateescape')
  try:
    text = f.read()
  finally:
    f.close()
  return parseMakefile(text)
