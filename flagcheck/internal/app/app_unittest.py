# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import unittest

import mock

from flagcheck.core import launch_configuration
from flagcheck.internal.app import app as app_module


class AppTest(unittest.TestCase):

  def setUp(self):
    self._backend = mock.Mock()
    self._backend.app_type = 'fake'
    self._config = launch_configuration.Build(
        ['disable-fre', 'enable-features=foo'])

  def testStartPassesSortedSwitches(self):
    app = app_module.App(self._backend, self._config)
    self._backend.SetApp.assert_called_once_with(app)
    app.Start()
    self._backend.Start.assert_called_once_with(
        ['--disable-fre', '--enable-features=foo'])
    self.assertEqual('fake', app.app_type)
    self.assertEqual(self._config, app.launch_configuration)

  def testDelegatesToBackend(self):
    self._backend.IsAppReady.return_value = True
    self._backend.GetFlagValue.return_value = False
    app = app_module.App(self._backend, self._config)
    self.assertTrue(app.IsReady())
    self.assertIs(False, app.GetFlagValue('foo'))
    self._backend.GetFlagValue.assert_called_once_with('foo')

  def testIsRunningAndClose(self):
    self._backend.IsAppRunning.return_value = True
    app = app_module.App(self._backend, self._config)
    self.assertTrue(app.IsRunning())
    app.Close()
    self._backend.Close.assert_called_once_with()


if __name__ == '__main__':
  unittest.main()
