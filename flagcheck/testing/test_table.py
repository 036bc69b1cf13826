# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import collections
import logging
import re
import sys
import time

from flagcheck.core import exceptions
from flagcheck.testing import results as results_module

logger = logging.getLogger(__name__)

_Entry = collections.namedtuple('_Entry', ['set_up', 'body', 'tear_down'])


def _TearDownAfterFailure(name, entry):
  # The earlier failure is the one reported.
  try:
    entry.tear_down()
  except Exception:  # pylint: disable=broad-except
    logger.exception('Teardown of %s failed after an earlier failure', name)


class TestTable():
  """An explicit table of tests, keyed by name.

  Each entry holds the set_up, body and tear_down callables of one test.
  Tests run in registration order.
  """

  def __init__(self):
    self._entries = collections.OrderedDict()

  def __len__(self):
    return len(self._entries)

  def __contains__(self, name):
    return name in self._entries

  @property
  def names(self):
    return list(self._entries)

  def Register(self, name, set_up, body, tear_down):
    if name in self._entries:
      raise ValueError('Test %r is already registered' % name)
    self._entries[name] = _Entry(set_up, body, tear_down)

  def AddTestCase(self, test_case):
    """Registers a FlagTestCase under its name."""
    self.Register(test_case.name, test_case.SetUp, test_case.Body,
                  test_case.TearDown)

  def GetMatchingNames(self, name_filter=None):
    if not name_filter:
      return self.names
    pattern = re.compile(name_filter)
    return [n for n in self._entries if pattern.search(n)]

  def Run(self, name):
    """Runs test |name| and returns its TestResult.

    tear_down runs whether or not set_up and body succeeded. A set_up error
    fails the test with SetupFailedError; body never runs after it.
    """
    entry = self._entries[name]
    start_time = time.time()
    failure = None
    try:
      try:
        entry.set_up()
      except exceptions.SetupFailedError:
        raise
      except Exception as e:
        raise exceptions.SetupFailedError(name, e) from e
      entry.body()
    except Exception:  # pylint: disable=broad-except
      failure = sys.exc_info()
      logger.debug('Test %s failed', name, exc_info=True)
      _TearDownAfterFailure(name, entry)
    except BaseException:
      _TearDownAfterFailure(name, entry)
      raise
    else:
      try:
        entry.tear_down()
      except Exception:  # pylint: disable=broad-except
        failure = sys.exc_info()
        logger.debug('Teardown of %s failed', name, exc_info=True)
    return results_module.TestResult(
        name, failure=failure, duration=time.time() - start_time)

  def RunAll(self, reporter=None, name_filter=None):
    """Runs every test whose name matches the |name_filter| regex.

    Returns:
      A RunResults object.
    """
    run_results = results_module.RunResults()
    for name in self.GetMatchingNames(name_filter):
      if reporter:
        reporter.WillRunTest(name)
      result = self.Run(name)
      run_results.AddResult(result)
      if reporter:
        reporter.DidRunTest(result)
    if reporter:
      reporter.DidFinishAllTests(run_results)
    return run_results
