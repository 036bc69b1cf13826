#!/usr/bin/env python
# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
"""Launches the application under test and checks its flag values."""

import argparse
import logging
import re
import sys

from flagcheck import flag_tests
from flagcheck.core import exceptions
from flagcheck.core import exit_codes
from flagcheck.core import harness_options
from flagcheck.internal.util import ps_util
from flagcheck.testing import gtest_progress_reporter
from flagcheck.utils import logging_common
from flagcheck.utils import signal_handler


def CreateParser():
  parser = argparse.ArgumentParser(
      description='Check the resolved flag values of the application.')
  parser.add_argument(
      'test_filter', nargs='?',
      help='Only run the tests whose name matches this regex.')
  parser.add_argument(
      '--list', action='store_true', dest='list_tests',
      help='List the tests and exit.')
  logging_common.AddLoggingArguments(parser)
  harness_options.HarnessOptions.AddCommandLineArgs(parser)
  return parser


def _RunTests(args, output_stream):
  options = harness_options.HarnessOptions()
  try:
    options.UpdateFromParseResults(args)
  except exceptions.OptionsError as e:
    logging.critical('%s.', e)
    return exit_codes.FATAL_ERROR

  try:
    table = flag_tests.CreateTestTable(options)
  except exceptions.UnknownSwitchError as e:
    logging.critical('%s. Use --permissive-switches to pass it through.', e)
    return exit_codes.FATAL_ERROR

  try:
    names = table.GetMatchingNames(args.test_filter)
  except re.error as e:
    logging.critical('Invalid test filter %r: %s', args.test_filter, e)
    return exit_codes.FATAL_ERROR

  if args.list_tests:
    for name in names:
      print(name, file=output_stream)
    return exit_codes.SUCCESS

  if not names:
    logging.error('No test matches %r.', args.test_filter)
    return exit_codes.NO_TESTS_RUN

  reporter = gtest_progress_reporter.GTestProgressReporter(output_stream)
  try:
    # SIGTERM unwinds the running test so its teardown releases the app.
    with signal_handler.InterruptOnSignals():
      run_results = table.RunAll(reporter, name_filter=args.test_filter)
  except KeyboardInterrupt:
    logging.error('Interrupted; the running test was torn down.')
    return exit_codes.FATAL_ERROR
  finally:
    ps_util.ListAllSubprocesses()
  return run_results.GetExitCode()


def main(argv=None, output_stream=None):
  args = CreateParser().parse_args(argv)
  handlers = logging_common.InitializeLogging(args)
  try:
    return _RunTests(args, output_stream or sys.stdout)
  finally:
    logging_common.RemoveHandlers(handlers)


if __name__ == '__main__':
  sys.exit(main())
