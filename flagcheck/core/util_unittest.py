# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import os
import unittest

import mock

from flagcheck.core import exceptions
from flagcheck.core import util


class WaitForTest(unittest.TestCase):

  def testReturnsFirstTruthyValue(self):
    values = iter([None, 0, 'ready'])
    self.assertEqual('ready', util.WaitFor(lambda: next(values), 5,
                                           min_poll_interval=0.01))

  def testTimeout(self):
    def NeverReady():
      return False
    with self.assertRaises(exceptions.TimeoutException) as cm:
      util.WaitFor(NeverReady, 0.1, min_poll_interval=0.01)
    self.assertIn('NeverReady', str(cm.exception))

  def testErrorsPropagate(self):
    condition = mock.Mock(side_effect=exceptions.AppCrashException('crashed'))
    with self.assertRaises(exceptions.AppCrashException):
      util.WaitFor(condition, 5)
    condition.assert_called_once_with()

  def testPollIntervalIsBounded(self):
    with mock.patch('time.sleep') as sleep:
      with mock.patch('time.time', side_effect=[0, 0, 100, 100, 200]):
        with self.assertRaises(exceptions.TimeoutException):
          util.WaitFor(lambda: False, 150, max_poll_interval=5)
    for call in sleep.call_args_list:
      self.assertLessEqual(call[0][0], 5)


class GetFlagcheckDirTest(unittest.TestCase):

  def testContainsPackage(self):
    self.assertTrue(os.path.isdir(
        os.path.join(util.GetFlagcheckDir(), 'flagcheck')))


if __name__ == '__main__':
  unittest.main()
