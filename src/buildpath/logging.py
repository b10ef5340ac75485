"""Logging Utilities.

@copyright: Copyright (c) 2010 Lewis Baker, Stuart McMahon.
@license: Licensed under the MIT license.
"""

import sys
import threading

class Logger(object):
  """A class used to log build messages.

  Message output for each function is guaranteed to not intermingle
  with other messages output due to the use of a thread lock.

  @ivar quiet: If True no messages are output.
  @type quiet: bool
  """

  def __init__(self, stdout=None, stderr=None):
    """Construct a logger.

    @param stdout: Stream that informative messages are written to.
    Defaults to sys.stdout at the time of writing.
    @type stdout: file-like object or None
    @param stderr: Stream that errors and warnings are written to.
    Defaults to sys.stderr at the time of writing.
    @type stderr: file-like object or None
    """
    self._lock = threading.Lock()
    self._debugComponents = set()
    self._stdout = stdout
    self._stderr = stderr
    self.quiet = False

  def enableDebug(self, component):
    """Enable debugging for a given component, eg. 'scan'.

    @param component: The component to enable debugging of.
    @type component: string
    """
    self._debugComponents.add(component)

  def disableDebug(self, component):
    """Disable debugging for a given component.

    @param component: The component to disable debugging of.
    @type component: string
    """
    self._debugComponents.discard(component)

  def debugEnabled(self, component):
    """Returns True if currently debugging the given component.
    """
    return component in self._debugComponents

  def _write(self, stream, message):
    if self.quiet:
      return
    self._lock.acquire()
    try:
      stream.write(message)
      stream.flush()
    finally:
      self._lock.release()

  def outputError(self, message):
    """Output an error message.

    @param message: The message to output.
    @type message: string
    """
    self._write(self._stderr or sys.stderr, message)

  def outputWarning(self, message):
    """Output a warning message.

    Warnings go to the same stream as errors.

    @param message: The message to output.
    @type message: string
    """
    self.outputError(message)

  def outputInfo(self, message):
    """Output an informative message.

    @param message: The message to output.
    @type message: string
    """
    self._write(self._stdout or sys.stdout, message)

  def outputDebug(self, component, message):
    """Output a debug message.

    The message is only output if debugging of the component has been
    enabled with L{enableDebug}.

    @param component: The component this message relates to.
    @type component: string
    @param message: The message to output.
    @type message: string
    """
    if component in self._debugComponents:
      self.outputInfo(message)
