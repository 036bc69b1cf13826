# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import unittest

from flagcheck import flag_tests
from flagcheck.core import exceptions
from flagcheck.core import harness_options
from flagcheck.flag_tests import tab_group_flag_tests


class CreateTestTableTest(unittest.TestCase):

  def setUp(self):
    self._options = harness_options.HarnessOptions()
    self._options.startup_timeout = 10

  def testContainsEveryTest(self):
    table = flag_tests.CreateTestTable(self._options)
    self.assertEqual([name for name, _, _ in tab_group_flag_tests.TESTS],
                     table.names)

  def testBuiltInTestsPass(self):
    run_results = flag_tests.CreateTestTable(self._options).RunAll()
    self.assertEqual([], [r.GetFailureMessage() for r in run_results.failed])

  def testExtraSwitchesReachTheApplication(self):
    self._options.AppendExtraSwitches(
        '--enable-features=tab-group-auto-creation')
    run_results = flag_tests.CreateTestTable(self._options).RunAll(
        name_filter='TabGroupAutoCreationDefault')
    self.assertEqual(1, len(run_results.failed))
    error = run_results.failed[0].exception
    self.assertIsInstance(error, exceptions.AssertionFailedError)
    self.assertIs(True, error.actual)

  def testUnknownExtraSwitch(self):
    self._options.AppendExtraSwitches('--no-such-switch')
    with self.assertRaises(exceptions.UnknownSwitchError):
      flag_tests.CreateTestTable(self._options)
    self._options.strict_switches = False
    self.assertEqual(len(tab_group_flag_tests.TESTS),
                     len(flag_tests.CreateTestTable(self._options)))


if __name__ == '__main__':
  unittest.main()
