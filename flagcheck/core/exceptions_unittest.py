# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import unittest

from flagcheck.core import exceptions


class ExceptionsTest(unittest.TestCase):

  def testAddDebuggingMessage(self):
    error = exceptions.LaunchTimeoutError('not ready', timeout=5)
    error.AddDebuggingMessage('Application output:\nshowing first run')
    message = str(error)
    self.assertTrue(message.startswith('not ready'))
    self.assertIn('testAddDebuggingMessage', message)
    self.assertIn('showing first run', message)

  def testAssertionFailedError(self):
    error = exceptions.AssertionFailedError(
        'tab-group-auto-creation', False, True)
    self.assertIsInstance(error, AssertionError)
    self.assertEqual(
        "Flag 'tab-group-auto-creation': expected=False, actual=True",
        str(error))

  def testRegistryErrors(self):
    for error in (exceptions.UnknownFlagError('f'),
                  exceptions.DuplicateRegistrationError('f'),
                  exceptions.InvalidOverrideError('bad', flag_name='f')):
      self.assertIsInstance(error, exceptions.FlagRegistryError)
      self.assertEqual('f', error.flag_name)

  def testAppCrashException(self):
    error = exceptions.AppCrashException(
        'Application exited', returncode=3, output='line 1\nline 2\n')
    self.assertEqual(['line 1', 'line 2'], error.app_output)
    message = str(error)
    self.assertIn('Exit code: 3', message)
    self.assertIn('\tline 2', message)


if __name__ == '__main__':
  unittest.main()
