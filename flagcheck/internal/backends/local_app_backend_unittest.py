# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import json
import os
import shutil
import sys
import tempfile
import unittest

from flagcheck.core import exceptions
from flagcheck.core import util
from flagcheck.flags import flag_list
from flagcheck.internal.app import reference_app
from flagcheck.internal.backends import local_app_backend
from flagcheck.internal.util import ps_util

_STARTUP_TIMEOUT = 30


class LocalAppBackendTest(unittest.TestCase):

  def setUp(self):
    self._backend = local_app_backend.LocalAppBackend()

  def tearDown(self):
    self._backend.Close()

  def testStartQueryAndClose(self):
    self.assertEqual('local', self._backend.app_type)
    self._backend.Start(['--disable-fre'])
    util.WaitFor(self._backend.IsAppReady, _STARTUP_TIMEOUT)
    pid = self._backend.pid
    user_data_dir = self._backend.user_data_dir
    self.assertTrue(self._backend.IsAppRunning())
    self.assertIn(pid, ps_util.GetAllSubprocessIDs())
    self.assertIs(False, self._backend.GetFlagValue(
        flag_list.TAB_GROUP_AUTO_CREATION))
    self.assertIn('Ready (pid %d)' % pid, self._backend.GetStandardOutput())

    self._backend.Close()
    self.assertNotIn(pid, ps_util.GetAllSubprocessIDs())
    self.assertFalse(os.path.exists(user_data_dir))
    self.assertFalse(self._backend.IsAppRunning())

  def testOverridesReachTheApplication(self):
    self._backend.Start(['--disable-fre',
                         '--enable-features=tab-group-auto-creation',
                         '--force-flag-values=tab-grid-min-scale:0.25'])
    util.WaitFor(self._backend.IsAppReady, _STARTUP_TIMEOUT)
    self.assertIs(True, self._backend.GetFlagValue(
        flag_list.TAB_GROUP_AUTO_CREATION))
    self.assertEqual(0.25, self._backend.GetFlagValue(
        flag_list.TAB_GRID_MIN_SCALE))

  def testNeverReadyWithoutFirstRunDisabled(self):
    self._backend.Start([])
    with self.assertRaises(exceptions.TimeoutException):
      util.WaitFor(self._backend.IsAppReady, 1)
    self.assertTrue(self._backend.IsAppRunning())
    with self.assertRaises(exceptions.LifecycleError):
      self._backend.GetFlagValue(flag_list.TAB_GROUP_AUTO_CREATION)

  def testStartupFailureIsACrash(self):
    self._backend.Start(['--disable-fre', '--force-flag-values=bogus'])
    with self.assertRaises(exceptions.AppCrashException) as cm:
      util.WaitFor(self._backend.IsAppReady, _STARTUP_TIMEOUT)
    self.assertEqual(1, cm.exception.returncode)
    self.assertIn('Startup failed', '\n'.join(cm.exception.app_output))

  def testCloseBeforeStart(self):
    self._backend.Close()
    self.assertIsNone(self._backend.pid)


class LocalAppBackendUserDataDirTest(unittest.TestCase):

  def setUp(self):
    self._user_data_dir = tempfile.mkdtemp()

  def tearDown(self):
    shutil.rmtree(self._user_data_dir, ignore_errors=True)

  def testKeepsProvidedUserDataDir(self):
    stale_file = os.path.join(self._user_data_dir, reference_app.READY_FILE)
    with open(stale_file, 'w') as f:
      json.dump({'ui_attached': True, 'first_run_shown': False,
                 'flags': {flag_list.TAB_GROUP_AUTO_CREATION: True}}, f)

    backend = local_app_backend.LocalAppBackend()
    try:
      backend.Start(['--disable-fre',
                     '--user-data-dir=%s' % self._user_data_dir])
      self.assertEqual(self._user_data_dir, backend.user_data_dir)
      util.WaitFor(backend.IsAppReady, _STARTUP_TIMEOUT)
      # The stale file was replaced by the new instance.
      self.assertIs(False, backend.GetFlagValue(
          flag_list.TAB_GROUP_AUTO_CREATION))
    finally:
      backend.Close()
    self.assertTrue(os.path.isdir(self._user_data_dir))

  def testCustomExecutableCrash(self):
    backend = local_app_backend.LocalAppBackend(
        executable=[sys.executable, '-c',
                    'import sys; print("bye"); sys.exit(3)'])
    try:
      backend.Start(['--disable-fre',
                     '--user-data-dir=%s' % self._user_data_dir])
      with self.assertRaises(exceptions.AppCrashException) as cm:
        util.WaitFor(backend.IsAppReady, _STARTUP_TIMEOUT)
    finally:
      backend.Close()
    self.assertEqual(3, cm.exception.returncode)
    self.assertEqual(['bye'], cm.exception.app_output)


if __name__ == '__main__':
  unittest.main()
