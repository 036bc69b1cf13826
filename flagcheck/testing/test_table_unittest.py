# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import unittest

import mock

from flagcheck.core import exceptions
from flagcheck.testing import test_table


class TestTableTest(unittest.TestCase):

  def setUp(self):
    self._table = test_table.TestTable()
    self._calls = []

  def _Register(self, name, set_up_error=None, body_error=None,
                tear_down_error=None):
    def _Step(step, error):
      def Run():
        self._calls.append('%s.%s' % (name, step))
        if error:
          raise error
      return Run
    self._table.Register(name, _Step('set_up', set_up_error),
                         _Step('body', body_error),
                         _Step('tear_down', tear_down_error))

  def testRegister(self):
    self._Register('b')
    self._Register('a')
    self.assertEqual(['b', 'a'], self._table.names)
    self.assertEqual(2, len(self._table))
    self.assertIn('a', self._table)
    with self.assertRaises(ValueError):
      self._Register('a')

  def testGetMatchingNames(self):
    for name in ('TabGroupsAndroidDefault', 'TabGridLayoutDefault',
                 'FirstRunVariant'):
      self._Register(name)
    self.assertEqual(3, len(self._table.GetMatchingNames()))
    self.assertEqual(['TabGroupsAndroidDefault', 'TabGridLayoutDefault'],
                     self._table.GetMatchingNames('^Tab'))
    self.assertEqual([], self._table.GetMatchingNames('Missing'))

  def testRunPasses(self):
    self._Register('a')
    result = self._table.Run('a')
    self.assertTrue(result.passed)
    self.assertEqual(['a.set_up', 'a.body', 'a.tear_down'], self._calls)

  def testBodyFailureStillTearsDown(self):
    self._Register('a', body_error=exceptions.AssertionFailedError(
        'f', False, True))
    result = self._table.Run('a')
    self.assertFalse(result.passed)
    self.assertIsInstance(result.exception, exceptions.AssertionFailedError)
    self.assertEqual(False, result.exception.expected)
    self.assertEqual(True, result.exception.actual)
    self.assertEqual(['a.set_up', 'a.body', 'a.tear_down'], self._calls)

  def testSetUpFailureSkipsBody(self):
    self._Register('a', set_up_error=RuntimeError('no app'))
    result = self._table.Run('a')
    self.assertTrue(result.setup_failed)
    self.assertIsInstance(result.exception.cause, RuntimeError)
    self.assertEqual(['a.set_up', 'a.tear_down'], self._calls)

  def testSetupFailedErrorIsNotWrappedAgain(self):
    error = exceptions.SetupFailedError('a', 'timeout')
    self._Register('a', set_up_error=error)
    self.assertIs(error, self._table.Run('a').exception)

  def testTearDownFailure(self):
    self._Register('a', tear_down_error=RuntimeError('leak'))
    result = self._table.Run('a')
    self.assertFalse(result.passed)
    self.assertEqual(['a.set_up', 'a.body', 'a.tear_down'], self._calls)

  def testTearDownFailureDoesNotHideBodyFailure(self):
    self._Register('a',
                   body_error=exceptions.AssertionFailedError('f', False, True),
                   tear_down_error=RuntimeError('leak'))
    with self.assertLogs(test_table.logger, 'ERROR'):
      result = self._table.Run('a')
    self.assertIsInstance(result.exception, exceptions.AssertionFailedError)
    self.assertEqual(['a.set_up', 'a.body', 'a.tear_down'], self._calls)

  def testTearDownFailureDoesNotHideSetUpFailure(self):
    self._Register('a', set_up_error=RuntimeError('no app'),
                   tear_down_error=RuntimeError('leak'))
    with self.assertLogs(test_table.logger, 'ERROR'):
      result = self._table.Run('a')
    self.assertTrue(result.setup_failed)
    self.assertEqual('no app', str(result.exception.cause))

  def testRunAllContinuesAfterFailure(self):
    self._Register('a', body_error=RuntimeError('boom'))
    self._Register('b')
    self._Register('c')
    reporter = mock.Mock()
    run_results = self._table.RunAll(reporter, name_filter='a|b')
    self.assertEqual(['a', 'b'], [r.name for r in run_results.results])
    self.assertEqual(['b'], [r.name for r in run_results.passed])
    self.assertEqual(1, run_results.GetExitCode())
    self.assertEqual(
        [mock.call.WillRunTest('a'), mock.call.DidRunTest(mock.ANY),
         mock.call.WillRunTest('b'), mock.call.DidRunTest(mock.ANY),
         mock.call.DidFinishAllTests(run_results)],
        reporter.mock_calls)

  def testKeyboardInterruptPropagates(self):
    self._Register('a', body_error=KeyboardInterrupt())
    with self.assertRaises(KeyboardInterrupt):
      self._table.RunAll()
    self.assertEqual(['a.set_up', 'a.body', 'a.tear_down'], self._calls)


if __name__ == '__main__':
  unittest.main()
