# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import io
import json
import os
import threading
import unittest

import mock
from pyfakefs import fake_filesystem_unittest

from flagcheck.core import exceptions
from flagcheck.flags import flag_list
from flagcheck.internal.app import reference_app


class ReferenceAppTest(unittest.TestCase):

  def testReadyWithFirstRunDisabled(self):
    app = reference_app.ReferenceApp(['--disable-fre'])
    app.Start()
    self.assertTrue(app.IsReady())
    self.assertTrue(app.ui_attached)
    self.assertFalse(app.first_run_shown)
    self.assertIs(False, app.GetFlagValue(flag_list.TAB_GROUP_AUTO_CREATION))

  def testFirstRunBlocksUntilShutdown(self):
    app = reference_app.ReferenceApp([])
    thread = threading.Thread(target=app.Start)
    thread.start()
    try:
      self.assertFalse(app.WaitForShutdown(0.2))
      self.assertTrue(thread.is_alive())
      self.assertFalse(app.IsReady())
      self.assertTrue(app.first_run_shown)
    finally:
      app.Shutdown()
      thread.join(5)
    self.assertFalse(thread.is_alive())
    self.assertFalse(app.IsReady())

  def testFlagOverride(self):
    app = reference_app.ReferenceApp(
        ['--disable-fre', '--enable-features=tab-group-auto-creation'])
    app.Start()
    self.assertIs(True, app.GetFlagValue(flag_list.TAB_GROUP_AUTO_CREATION))

  def testInvalidOverrideFailsStartup(self):
    app = reference_app.ReferenceApp(
        ['--disable-fre', '--force-flag-values=tab-grid-min-scale:big'])
    with self.assertRaises(exceptions.InvalidOverrideError):
      app.Start()
    self.assertFalse(app.IsReady())

  def testUnknownFlag(self):
    app = reference_app.ReferenceApp(['--disable-fre'])
    app.Start()
    with self.assertRaises(exceptions.UnknownFlagError):
      app.GetFlagValue('no-such-flag')


class ReferenceAppFilesTest(fake_filesystem_unittest.TestCase):

  def setUp(self):
    self.setUpPyfakefs()

  def testExperimentConfig(self):
    self.fs.create_file('/study.json', contents=json.dumps(
        {'TabGroupsStudy': {'tab-group-auto-creation': True}}))
    app = reference_app.ReferenceApp(
        ['--disable-fre', '--experiment-config=/study.json'])
    app.Start()
    self.assertIs(True, app.GetFlagValue(flag_list.TAB_GROUP_AUTO_CREATION))

  def testWriteReadyFile(self):
    self.fs.create_dir('/profile')
    app = reference_app.ReferenceApp(['--disable-fre'])
    app.Start()
    path = app.WriteReadyFile('/profile')
    self.assertEqual(os.path.join('/profile', reference_app.READY_FILE), path)
    self.assertFalse(os.path.exists(path + '.tmp'))
    with open(path) as f:
      state = json.load(f)
    self.assertEqual(os.getpid(), state['pid'])
    self.assertTrue(state['ui_attached'])
    self.assertFalse(state['first_run_shown'])
    self.assertIs(False, state['flags'][flag_list.TAB_GROUP_AUTO_CREATION])

  def testMainWritesReadyFile(self):
    self.fs.create_dir('/profile')
    with mock.patch.object(reference_app.ReferenceApp, 'WaitForShutdown'):
      with mock.patch('sys.stdout', new_callable=io.StringIO) as stdout:
        self.assertEqual(
            0, reference_app.main(
                ['--disable-fre', '--user-data-dir=/profile']))
    self.assertIn('Ready (pid %d)' % os.getpid(), stdout.getvalue())
    self.assertTrue(
        os.path.exists(os.path.join('/profile', reference_app.READY_FILE)))

  def testMainStartupFailure(self):
    with mock.patch('sys.stdout', new_callable=io.StringIO) as stdout:
      self.assertEqual(
          1, reference_app.main(['--disable-fre',
                                 '--experiment-config=/missing.json']))
    self.assertIn('Startup failed', stdout.getvalue())


if __name__ == '__main__':
  unittest.main()
