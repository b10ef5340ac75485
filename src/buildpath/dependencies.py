"""Registering dependencies listed in compiler-generated Makefiles.

@copyright: Copyright (c) 2010 Lewis Baker, Stuart McMahon.
@license: Licensed under the MIT license.
"""

from buildpath.gnu import readMakefile

def makefileDependencies(path, logger=None):
  """Read a Makefile and return the dependencies of all of its rules.

  The targets themselves are not included.

  @param path: The path to the Makefile.
  @type path: string
  @param logger: Logger used for 'scan' debug output and to report a
  file that can't be read.
  @type logger: L{Logger<buildpath.logging.Logger>} or None

  @return: The dependencies of every rule, in file order. Duplicates are
  kept.
  @rtype: list of string

  @raise EnvironmentError: If the file could not be read.
  """
  if logger is not None:
    logger.outputDebug("scan", "scan: %s\n" % path)

  try:
    rules = readMakefile(path)
  except EnvironmentError as e:
    if logger is not None:
      logger.outputError(
        "Failed to read dependency file '%s': %s\n" % (path, str(e)),
        )
    raise

  dependencies = []
  for _, deps in rules:
    dependencies.extend(deps)
  return dependencies

def needMakefileDependencies(engine, path):
  """Depend on the dependencies listed in a Makefile.

  The Makefile itself is not depended on. The dependencies are passed to
  the engine in a single L{Engine.need<buildpath.engine.Engine.need>}
  call, which builds them before the current task continues.

  @param engine: The engine to register the dependencies with.
  @type engine: L{Engine<buildpath.engine.Engine>}
  @param path: The path to the Makefile, typically a .d file written
  by the compiler.
  @type path: string
  """
  engine.need(makefileDependencies(path, engine.logger))

def neededMakefileDependencies(engine, path):
  """Depend on the dependencies listed in a Makefile that have already
  been used.

  Like L{needMakefileDependencies} except that the engine is told the
  files have already been built, via
  L{Engine.needed<buildpath.engine.Engine.needed>}.

  @param engine: The engine to register the dependencies with.
  @type engine: L{Engine<buildpath.engine.Engine>}
  @param path: The path to the Makefile.
  @type path: string
  """
  engine.needed(makefileDependencies(path, engine.logger))
