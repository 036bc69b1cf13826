# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import subprocess
import sys
import unittest

import mock
import psutil

from flagcheck.internal.util import ps_util


class PsUtilTest(unittest.TestCase):

  def testTerminateProcessTree(self):
    proc = subprocess.Popen(
        [sys.executable, '-c', 'import time; time.sleep(60)'])
    try:
      self.assertIn(proc.pid, ps_util.GetAllSubprocessIDs())
      self.assertTrue(ps_util.TerminateProcessTree(proc.pid, timeout=5))
    finally:
      if proc.poll() is None:
        proc.kill()
        proc.wait()
    self.assertNotIn(proc.pid, ps_util.GetAllSubprocessIDs())

  def testTerminateMissingProcess(self):
    with mock.patch('psutil.Process', side_effect=psutil.NoSuchProcess(1)):
      self.assertTrue(ps_util.TerminateProcessTree(1))

  def testKillsProcessesIgnoringTerminate(self):
    process = mock.Mock()
    process.pid = 1234
    process.name.return_value = 'app'
    process.cmdline.return_value = ['app']
    parent = mock.Mock()
    parent.children.return_value = [process]
    with mock.patch('psutil.Process', return_value=parent), \
         mock.patch('psutil.wait_procs',
                    side_effect=[([parent], [process]), ([process], [])]):
      self.assertTrue(ps_util.TerminateProcessTree(1234, timeout=1))
    process.terminate.assert_called_once_with()
    process.kill.assert_called_once_with()
    parent.kill.assert_not_called()

  def testReportsSurvivors(self):
    process = mock.Mock()
    process.pid = 1234
    process.name.return_value = 'app'
    process.cmdline.return_value = ['app']
    parent = mock.Mock()
    parent.children.return_value = []
    with mock.patch('psutil.Process', return_value=parent), \
         mock.patch('psutil.wait_procs',
                    side_effect=[([], [process]), ([], [process])]):
      self.assertFalse(ps_util.TerminateProcessTree(1234, timeout=1))

  def testListAllSubprocesses(self):
    child = mock.Mock()
    child.pid = 42
    child.name.return_value = 'app'
    child.cmdline.return_value = ['app', '--disable-fre']
    with mock.patch.object(ps_util, '_GetAllSubprocesses',
                           return_value=[child]):
      with self.assertLogs(ps_util.logger, 'WARNING') as logs:
        self.assertEqual([child], ps_util.ListAllSubprocesses())
    self.assertIn('app (42)', logs.output[0])

  def testListAllSubprocessesWhenNone(self):
    with mock.patch.object(ps_util, '_GetAllSubprocesses', return_value=[]):
      self.assertEqual([], ps_util.ListAllSubprocesses())


if __name__ == '__main__':
  unittest.main()
