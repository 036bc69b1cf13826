# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import sys


class Error(Exception):
  """Base class for flagcheck exceptions."""

  def __init__(self, msg=''):
    super().__init__(msg)
    self._debugging_messages = []

  def AddDebuggingMessage(self, msg):
    """Adds a message to the description of the exception.

    Most flagcheck exceptions arise from failures in the application under
    test, which are hard to pinpoint from the harness side. This method lets
    harness classes append useful debugging information to the exception, and
    records the location from where it was called.
    """
    frame = sys._getframe(1)
    line_number = frame.f_lineno
    file_name = frame.f_code.co_filename
    function_name = frame.f_code.co_name
    call_site = '%s:%s %s' % (file_name, line_number, function_name)
    annotated_message = '(%s) %s' % (call_site, msg)

    self._debugging_messages.append(annotated_message)

  def _get_debugging_messages(self, base_output):
    divider = '\n' + '*' * 80 + '\n'
    output = base_output
    for message in self._debugging_messages:
      output += divider
      output += message
    return output

  def __str__(self):
    return self._get_debugging_messages(super().__str__())

  def __repr__(self):
    return self._get_debugging_messages(super().__repr__())


class FlagRegistryError(Error):
  """Represents misuse of a flag registry."""


class UnknownFlagError(FlagRegistryError):
  """Raised when querying a flag name that was never registered."""

  def __init__(self, flag_name):
    super().__init__('Unknown flag: %r' % flag_name)
    self.flag_name = flag_name


class DuplicateRegistrationError(FlagRegistryError):
  """Raised when a flag default is registered twice."""

  def __init__(self, flag_name):
    super().__init__('Flag %r is already registered' % flag_name)
    self.flag_name = flag_name


class InvalidOverrideError(FlagRegistryError):
  """Raised when an override value cannot be applied to a flag."""

  def __init__(self, msg, flag_name=None, value=None):
    super().__init__(msg)
    self.flag_name = flag_name
    self.value = value


class OptionsError(Error):
  """The harness was given options it cannot run with."""


class UnknownSwitchError(Error):
  """Raised when a launch configuration names a switch outside the
  allow-list."""

  def __init__(self, switch):
    super().__init__('Unknown command line switch: %s' % switch)
    self.switch = switch


class TimeoutException(Error):
  """The operation failed to complete because of a timeout.

  It is possible that waiting for a longer period of time would result in a
  successful operation.
  """


class LaunchTimeoutError(TimeoutException):
  """The application did not become ready within the startup timeout."""

  def __init__(self, msg, timeout=None):
    super().__init__(msg)
    self.timeout = timeout


class LaunchCancelledError(Error):
  """The launch was cancelled while waiting for the application."""


class LifecycleError(Error):
  """An operation was attempted in the wrong lifecycle state."""


class AppCrashException(Error):
  """The application exited before it could be used."""

  def __init__(self, msg='', returncode=None, output=''):
    super().__init__(msg)
    self.returncode = returncode
    self._app_output = output.splitlines() if output else []

  @property
  def app_output(self):
    return self._app_output

  def __str__(self):
    divider = '*' * 80
    debug_messages = []
    debug_messages.append(super().__str__())
    debug_messages.append('Exit code: %s' % self.returncode)
    debug_messages.append('Standard output:')
    debug_messages.append(divider)
    debug_messages.extend(('\t%s' % l) for l in self._app_output)
    debug_messages.append(divider)
    return '\n'.join(debug_messages)


class SetupFailedError(Error):
  """The setup phase of a test case did not complete."""

  def __init__(self, test_name, cause):
    super().__init__('Setup of %s failed: %s' % (test_name, cause))
    self.test_name = test_name
    self.cause = cause


class AssertionFailedError(Error, AssertionError):
  """A resolved flag value did not match the expected value."""

  def __init__(self, flag_name, expected, actual):
    super().__init__(
        'Flag %r: expected=%r, actual=%r' % (flag_name, expected, actual))
    self.flag_name = flag_name
    self.expected = expected
    self.actual = actual
