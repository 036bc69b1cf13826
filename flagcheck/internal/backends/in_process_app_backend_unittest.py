# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import unittest

import mock

from flagcheck.core import exceptions
from flagcheck.core import util
from flagcheck.flags import flag_list
from flagcheck.internal.backends import in_process_app_backend


class InProcessAppBackendTest(unittest.TestCase):

  def setUp(self):
    self._backend = in_process_app_backend.InProcessAppBackend()

  def tearDown(self):
    self._backend.Close()

  def testStartAndQuery(self):
    self.assertEqual('in-process', self._backend.app_type)
    self._backend.Start(['--disable-fre'])
    util.WaitFor(self._backend.IsAppReady, 5)
    self.assertTrue(self._backend.IsAppRunning())
    self.assertIs(False, self._backend.GetFlagValue(
        flag_list.TAB_GROUP_AUTO_CREATION))

  def testNeverReadyWithoutFirstRunDisabled(self):
    self._backend.Start([])
    with self.assertRaises(exceptions.TimeoutException):
      util.WaitFor(self._backend.IsAppReady, 0.3)
    self.assertTrue(self._backend.IsAppRunning())

  def testCloseUnblocksStartup(self):
    self._backend.Start([])
    self._backend.Close()
    self.assertFalse(self._backend.IsAppRunning())
    # Close() is safe to call again.
    self._backend.Close()

  def testStartupErrorIsRaisedByIsAppReady(self):
    self._backend.Start(
        ['--disable-fre', '--force-flag-values=tab-grid-layout'])
    with self.assertRaises(exceptions.InvalidOverrideError):
      util.WaitFor(self._backend.IsAppReady, 5)
    self.assertFalse(self._backend.IsAppRunning())

  def testQueryBeforeStart(self):
    with self.assertRaises(exceptions.LifecycleError):
      self._backend.GetFlagValue(flag_list.TAB_GROUP_AUTO_CREATION)
    self.assertFalse(self._backend.IsAppReady())

  def testCustomAppFactory(self):
    fake_app = mock.Mock()
    fake_app.IsReady.return_value = True
    fake_app.GetFlagValue.return_value = 'value'
    factory = mock.Mock(return_value=fake_app)
    backend = in_process_app_backend.InProcessAppBackend(app_factory=factory)
    backend.Start(['--a'])
    try:
      util.WaitFor(backend.IsAppReady, 5)
      self.assertEqual('value', backend.GetFlagValue('flag'))
    finally:
      backend.Close()
    factory.assert_called_once_with(['--a'])
    fake_app.Start.assert_called_once_with()
    fake_app.Shutdown.assert_called_once_with()


if __name__ == '__main__':
  unittest.main()
