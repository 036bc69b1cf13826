# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import argparse
import unittest

from pyfakefs import fake_filesystem_unittest

from flagcheck.core import exceptions
from flagcheck.core import harness_options
from flagcheck.internal import lifecycle_controller


def _ParseOptions(argv):
  parser = argparse.ArgumentParser()
  harness_options.HarnessOptions.AddCommandLineArgs(parser)
  args = parser.parse_args(argv)
  options = harness_options.HarnessOptions()
  options.UpdateFromParseResults(args)
  return options


class HarnessOptionsTest(unittest.TestCase):

  def testDefaults(self):
    options = _ParseOptions([])
    self.assertEqual(harness_options.IN_PROCESS_BACKEND, options.backend_type)
    self.assertEqual(lifecycle_controller.DEFAULT_STARTUP_TIMEOUT,
                     options.startup_timeout)
    self.assertTrue(options.strict_switches)
    self.assertIsNone(options.app_executable)
    self.assertIsNone(options.experiment_config)
    self.assertEqual(set(), options.extra_switches)

  def testParsesOptions(self):
    options = _ParseOptions([
        '--backend=local', '--startup-timeout=2.5', '--permissive-switches',
        '--app-executable=/usr/bin/app --verbose',
        '--extra-switches=--enable-features=foo --user-data-dir="/tmp/a b"'])
    self.assertEqual(harness_options.LOCAL_BACKEND, options.backend_type)
    self.assertEqual(2.5, options.startup_timeout)
    self.assertFalse(options.strict_switches)
    self.assertEqual(['/usr/bin/app', '--verbose'], options.app_executable)
    self.assertEqual(set(['--enable-features=foo', '--user-data-dir=/tmp/a b']),
                     options.extra_switches)

  def testRejectsUnknownBackend(self):
    parser = argparse.ArgumentParser()
    harness_options.HarnessOptions.AddCommandLineArgs(parser)
    with self.assertRaises(SystemExit):
      parser.parse_args(['--backend=android'])

  def testAppendExtraSwitches(self):
    options = harness_options.HarnessOptions()
    options.AppendExtraSwitches('--enable-logging')
    options.AppendExtraSwitches(['--disable-fre', '--enable-logging'])
    self.assertEqual(set(['--enable-logging', '--disable-fre']),
                     options.extra_switches)

  def testCopyIsIndependent(self):
    options = harness_options.HarnessOptions()
    options.AppendExtraSwitches('--enable-logging')
    copied = options.Copy()
    copied.AppendExtraSwitches('--disable-fre')
    self.assertEqual(set(['--enable-logging']), options.extra_switches)


class ExperimentConfigOptionTest(fake_filesystem_unittest.TestCase):

  def setUp(self):
    self.setUpPyfakefs()

  def testExperimentConfigAddsSwitch(self):
    self.fs.create_file('/configs/study.json', contents='{}')
    options = _ParseOptions(['--experiment-config=/configs/study.json'])
    self.assertEqual('/configs/study.json', options.experiment_config)
    self.assertEqual(set(['--experiment-config=/configs/study.json']),
                     options.extra_switches)

  def testMissingExperimentConfigRaises(self):
    with self.assertRaises(exceptions.OptionsError):
      _ParseOptions(['--experiment-config=/configs/missing.json'])


if __name__ == '__main__':
  unittest.main()
