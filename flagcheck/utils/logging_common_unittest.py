# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import argparse
import logging
import os
import shutil
import tempfile
import unittest

import mock

from flagcheck.utils import logging_common


def _ParseArgs(argv):
  parser = argparse.ArgumentParser()
  logging_common.AddLoggingArguments(parser)
  return parser.parse_args(argv)


class LoggingCommonTest(unittest.TestCase):

  def setUp(self):
    self._root = logging.getLogger()
    self._old_level = self._root.level
    self._handlers = []

  def tearDown(self):
    logging_common.RemoveHandlers(self._handlers)
    self._root.setLevel(self._old_level)

  def testGetLogLevel(self):
    cases = (
        ([], logging.WARNING),
        (['-v'], logging.INFO),
        (['-vv'], logging.DEBUG),
        (['-vvv'], logging.DEBUG),
        (['-q'], logging.ERROR),
        (['-qq'], logging.CRITICAL),
        (['-qqq'], logging.CRITICAL),
    )
    for argv, level in cases:
      self.assertEqual(level, logging_common.GetLogLevel(_ParseArgs(argv)))

  def testVerboseAndQuietAreExclusive(self):
    with self.assertRaises(SystemExit):
      _ParseArgs(['-v', '-q'])

  def testInitializeLogging(self):
    handler = logging.NullHandler()
    self._handlers = logging_common.InitializeLogging(
        _ParseArgs(['-v']), handler=handler)
    self.assertEqual([handler], self._handlers)
    self.assertEqual(logging.INFO, handler.level)
    self.assertEqual(logging.INFO, self._root.level)
    self.assertIn(handler, self._root.handlers)

  def testLogFileGetsDebugMessages(self):
    log_dir = tempfile.mkdtemp()
    try:
      log_file = os.path.join(log_dir, 'harness.log')
      self._handlers = logging_common.InitializeLogging(
          _ParseArgs(['--log-file', log_file]), handler=logging.NullHandler())
      self.assertEqual(logging.DEBUG, self._root.level)
      logging.getLogger('flagcheck.test').debug('resolved flags')
      logging_common.RemoveHandlers(self._handlers)
      self._handlers = []
      with open(log_file) as f:
        self.assertIn('resolved flags', f.read())
    finally:
      shutil.rmtree(log_dir, ignore_errors=True)


class HarnessFormatterTest(unittest.TestCase):

  def testFormat(self):
    with mock.patch('time.time', return_value=100.0):
      formatter = logging_common.HarnessFormatter()
    record = logging.LogRecord(
        'flagcheck.internal.lifecycle_controller', logging.INFO,
        '/src/flagcheck/internal/lifecycle_controller.py', 1,
        'Application is ready', None, None)
    record.threadName = 'MainThread'
    with mock.patch('time.time', return_value=101.5):
      self.assertEqual(
          'I    1.500s Main lifecycle_controller: Application is ready',
          formatter.format(record))


if __name__ == '__main__':
  unittest.main()
