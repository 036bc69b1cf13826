# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import traceback

from flagcheck.core import exceptions
from flagcheck.core import exit_codes


class TestResult():
  """The outcome of running one test.

  |failure| is the exc_info tuple of the error that failed the test, or None.
  """

  def __init__(self, name, failure=None, duration=0):
    self.name = name
    self.failure = failure
    self.duration = duration

  def __repr__(self):
    return 'TestResult(%s, passed=%s)' % (self.name, self.passed)

  @property
  def passed(self):
    return self.failure is None

  @property
  def exception(self):
    return self.failure[1] if self.failure else None

  @property
  def setup_failed(self):
    return isinstance(self.exception, exceptions.SetupFailedError)

  def GetFailureMessage(self):
    if not self.failure:
      return ''
    return ''.join(traceback.format_exception(*self.failure))


class RunResults():
  """Results of a test table run, in run order."""

  def __init__(self):
    self._results = []

  def AddResult(self, result):
    self._results.append(result)

  @property
  def results(self):
    return list(self._results)

  @property
  def passed(self):
    return [r for r in self._results if r.passed]

  @property
  def failed(self):
    return [r for r in self._results if not r.passed]

  @property
  def all_passed(self):
    return not self.failed

  def GetExitCode(self):
    return exit_codes.SUCCESS if self.all_passed else exit_codes.TEST_FAILURE
