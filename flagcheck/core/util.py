# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import inspect
import os
import time

from flagcheck.core import exceptions


def GetFlagcheckDir():
  """Returns the directory containing the flagcheck package."""
  return os.path.normpath(
      os.path.join(os.path.dirname(__file__), os.pardir, os.pardir))


def GetConditionString(condition):
  if condition.__name__ == '<lambda>':
    try:
      return inspect.getsource(condition).strip()
    except (IOError, OSError, TypeError):
      pass
  return condition.__name__


def WaitFor(condition, timeout, min_poll_interval=0.1, max_poll_interval=5):
  """Waits for the given condition to be true.

  The condition is polled with an interval that grows with the elapsed time,
  bounded by |min_poll_interval| and |max_poll_interval|.

  Args:
    condition: A callable; its return value is checked for truthiness.
    timeout: Timeout in seconds.

  Returns:
    The first truthy value returned by |condition|.

  Raises:
    TimeoutException: |condition| was not truthy within |timeout| seconds.
  """
  assert timeout >= 0
  start_time = time.time()
  while True:
    res = condition()
    if res:
      return res
    now = time.time()
    elapsed_time = now - start_time
    if elapsed_time > timeout:
      raise exceptions.TimeoutException(
          'Timed out while waiting %ds for %s.' %
          (timeout, GetConditionString(condition)))
    poll_interval = min(max(elapsed_time / 10., min_poll_interval),
                        max_poll_interval)
    time.sleep(min(poll_interval, max(timeout - elapsed_time, 0) + 0.01))
