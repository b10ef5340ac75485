"""Engine-Level Classes.

The build engine itself lives outside this package. L{Engine} is the
interface it must provide so that dependencies discovered by tools can be
added to the build graph.

@copyright: Copyright (c) 2010 Lewis Baker, Stuart McMahon.
@license: Licensed under the MIT license.
"""

class BuildError(Exception):
  """Exception raised when a build fails.

  Raised by an engine when files passed to L{Engine.need} or
  L{Engine.needed} can't be registered, eg. because there is no rule to
  build one of them.
  """
  pass

class Engine(object):
  """Base class of the build engine that dependencies are registered with.

  @ivar logger: The object used to output build messages.
  @type logger: L{Logger<buildpath.logging.Logger>}
  """

  def __init__(self, logger):
    """Default Constructor.
    """
    self.logger = logger
    self.errors = []

  def raiseError(self, message):
    """Log an error and raise the BuildError exception.

    @param message: The error message to output.
    @type message: string

    @raise BuildError: Raises a build error that should cause the current
    task to fail.
    """
    self.logger.outputError(message)
    self.errors.append(message)
    raise BuildError(message)

  def need(self, paths):
    """Make sure the given files are built before the current task
    continues, and record them as dependencies of it.

    @param paths: The paths of the files, in order.
    @type paths: list of string
    """
    raise NotImplementedError()

  def needed(self, paths):
    """Record files as dependencies of the current task.

    Unlike L{need} this asserts that the files have already been built,
    for when a task has used them before telling the engine about it.

    @param paths: The paths of the files, in order.
    @type paths: list of string
    """
    raise NotImplementedError()
