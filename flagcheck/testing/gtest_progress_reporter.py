# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import sys


class GTestProgressReporter():
  """A progress reporter that outputs the progress report in gtest style."""

  def __init__(self, output_stream=None):
    self._output_stream = output_stream or sys.stdout

  @property
  def output_stream(self):
    return self._output_stream

  def _Print(self, *args):
    print(*args, file=self._output_stream)

  def WillRunTest(self, name):
    self._Print('[ RUN      ]', name)
    self._output_stream.flush()

  def DidRunTest(self, result):
    duration = '(%0.f ms)' % (result.duration * 1000)
    if result.passed:
      self._Print('[       OK ]', result.name, duration)
    else:
      self._Print(result.GetFailureMessage())
      self._Print('[  FAILED  ]', result.name, duration)
    self._output_stream.flush()

  def DidFinishAllTests(self, run_results):
    successful_runs = run_results.passed
    failed_runs = run_results.failed

    unit = 'test' if len(successful_runs) == 1 else 'tests'
    self._Print('[  PASSED  ]', '%d %s.' % (len(successful_runs), unit))
    if failed_runs:
      unit = 'test' if len(failed_runs) == 1 else 'tests'
      self._Print('[  FAILED  ]', '%d %s, listed below:' % (
          len(failed_runs), unit))
      for failed_run in failed_runs:
        self._Print('[  FAILED  ] ', failed_run.name)
      self._Print()
      count = len(failed_runs)
      unit = 'TEST' if count == 1 else 'TESTS'
      self._Print('%d FAILED %s' % (count, unit))
    self._Print()
    self._output_stream.flush()
