# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import io
import sys
import unittest

from flagcheck.core import exceptions
from flagcheck.testing import gtest_progress_reporter
from flagcheck.testing import results


def _FailureInfo(error):
  try:
    raise error
  except exceptions.Error:
    return sys.exc_info()


class GTestProgressReporterTest(unittest.TestCase):

  def setUp(self):
    self._output_stream = io.StringIO()
    self._reporter = gtest_progress_reporter.GTestProgressReporter(
        self._output_stream)

  def assertOutputEquals(self, expected):
    self.assertMultiLineEqual(expected, self._output_stream.getvalue())

  def _Report(self, *test_results):
    run_results = results.RunResults()
    for result in test_results:
      self._reporter.WillRunTest(result.name)
      run_results.AddResult(result)
      self._reporter.DidRunTest(result)
    self._reporter.DidFinishAllTests(run_results)

  def testSingleSuccessfulTest(self):
    self._Report(results.TestResult('TabGroupAutoCreationDefault',
                                    duration=0.007))
    expected = ('[ RUN      ] TabGroupAutoCreationDefault\n'
                '[       OK ] TabGroupAutoCreationDefault (7 ms)\n'
                '[  PASSED  ] 1 test.\n\n')
    self.assertOutputEquals(expected)

  def testSingleFailedTest(self):
    failure = _FailureInfo(exceptions.AssertionFailedError(
        'tab-group-auto-creation', False, True))
    self._Report(results.TestResult('TabGroupAutoCreationDefault',
                                    failure=failure))
    output = self._output_stream.getvalue()
    self.assertTrue(
        output.startswith('[ RUN      ] TabGroupAutoCreationDefault\n'))
    self.assertIn("Flag 'tab-group-auto-creation': expected=False, actual=True",
                  output)
    self.assertTrue(output.endswith(
        '[  FAILED  ] TabGroupAutoCreationDefault (0 ms)\n'
        '[  PASSED  ] 0 tests.\n'
        '[  FAILED  ] 1 test, listed below:\n'
        '[  FAILED  ]  TabGroupAutoCreationDefault\n\n'
        '1 FAILED TEST\n\n'))

  def testPassAndFailedTests(self):
    failure = _FailureInfo(exceptions.SetupFailedError(
        'b', exceptions.LaunchTimeoutError('not ready', timeout=1)))
    self._Report(results.TestResult('a', duration=0.009),
                 results.TestResult('b', failure=failure, duration=1.0),
                 results.TestResult('c', failure=failure),
                 results.TestResult('d'))
    output = self._output_stream.getvalue()
    self.assertIn('[       OK ] a (9 ms)\n', output)
    self.assertIn('[  FAILED  ] b (1000 ms)\n', output)
    self.assertTrue(output.endswith(
        '[  PASSED  ] 2 tests.\n'
        '[  FAILED  ] 2 tests, listed below:\n'
        '[  FAILED  ]  b\n'
        '[  FAILED  ]  c\n\n'
        '2 FAILED TESTS\n\n'))


class ResultsTest(unittest.TestCase):

  def testExitCode(self):
    run_results = results.RunResults()
    run_results.AddResult(results.TestResult('a'))
    self.assertTrue(run_results.all_passed)
    self.assertEqual(0, run_results.GetExitCode())

    failure = _FailureInfo(exceptions.SetupFailedError('b', 'cause'))
    run_results.AddResult(results.TestResult('b', failure=failure))
    self.assertFalse(run_results.all_passed)
    self.assertEqual(1, run_results.GetExitCode())
    self.assertEqual(['a'], [r.name for r in run_results.passed])
    self.assertTrue(run_results.failed[0].setup_failed)
    self.assertIn('Setup of b failed: cause',
                  run_results.failed[0].GetFailureMessage())


if __name__ == '__main__':
  unittest.main()
