# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import io
import unittest

import mock

from flagcheck import run_flag_tests
from flagcheck.core import exit_codes
from flagcheck.testing import test_table


class RunFlagTestsTest(unittest.TestCase):

  def setUp(self):
    self._output_stream = io.StringIO()

  def _Main(self, argv):
    return run_flag_tests.main(argv + ['-q'], self._output_stream)

  def testList(self):
    self.assertEqual(exit_codes.SUCCESS, self._Main(['--list', 'Tab.*Default']))
    self.assertEqual(
        ['TabGroupAutoCreationDefault', 'TabGroupsAndroidDefault',
         'TabGridLayoutDefault'],
        self._output_stream.getvalue().split())

  def testRunAllPasses(self):
    self.assertEqual(exit_codes.SUCCESS,
                     self._Main(['--startup-timeout=10']))
    output = self._output_stream.getvalue()
    self.assertIn('[       OK ] TabGroupAutoCreationDefault', output)
    self.assertIn('[  PASSED  ] 3 tests.', output)

  def testOverrideFails(self):
    self.assertEqual(exit_codes.TEST_FAILURE, self._Main([
        'TabGroupAutoCreation',
        '--extra-switches=--enable-features=tab-group-auto-creation']))
    output = self._output_stream.getvalue()
    self.assertIn('expected=False, actual=True', output)
    self.assertIn('1 FAILED TEST', output)

  def testNoMatchingTest(self):
    self.assertEqual(exit_codes.NO_TESTS_RUN, self._Main(['NoSuchTest']))

  def testUnknownSwitchIsFatal(self):
    self.assertEqual(exit_codes.FATAL_ERROR,
                     self._Main(['--extra-switches=--no-such-switch']))

  def testPermissiveSwitches(self):
    self.assertEqual(exit_codes.SUCCESS, self._Main(
        ['--extra-switches=--no-such-switch', '--permissive-switches']))

  def testMissingExperimentConfigIsFatal(self):
    self.assertEqual(exit_codes.FATAL_ERROR, self._Main(
        ['--experiment-config=/no/such/dir/study.json']))
    self.assertEqual('', self._output_stream.getvalue())

  def testInvalidFilterIsFatal(self):
    self.assertEqual(exit_codes.FATAL_ERROR, self._Main(['Tab[']))
    self.assertEqual(exit_codes.FATAL_ERROR, self._Main(['--list', 'Tab[']))

  def testInterrupted(self):
    with mock.patch.object(test_table.TestTable, 'RunAll',
                           side_effect=KeyboardInterrupt()):
      self.assertEqual(exit_codes.FATAL_ERROR, self._Main([]))


if __name__ == '__main__':
  unittest.main()
