# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import unittest

from flagcheck.core import exceptions
from flagcheck.core import launch_configuration


class BuildTest(unittest.TestCase):

  def testBuildNormalizesSwitches(self):
    config = launch_configuration.Build(['disable-fre'])
    self.assertEqual(['--disable-fre'], config.args)
    self.assertIn('--disable-fre', config)
    self.assertIn('disable-fre', config)
    self.assertTrue(config.HasSwitch('disable-fre'))

  def testDuplicatesCollapse(self):
    config = launch_configuration.Build(
        ['disable-fre', '--disable-fre', '-disable-fre'])
    self.assertEqual(1, len(config))

  def testOrderDoesNotMatter(self):
    a = launch_configuration.Build(
        ['--disable-fre', '--enable-features=foo', '--enable-features=bar'])
    b = launch_configuration.Build(
        ['--enable-features=bar,foo', 'disable-fre'])
    self.assertEqual(a, b)
    self.assertEqual(hash(a), hash(b))
    self.assertEqual(['--disable-fre', '--enable-features=bar,foo'], a.args)

  def testEmpty(self):
    config = launch_configuration.Build([])
    self.assertEqual(0, len(config))
    self.assertEqual([], config.args)

  def testStrictRejectsUnknownSwitch(self):
    with self.assertRaises(exceptions.UnknownSwitchError) as cm:
      launch_configuration.Build(['disable-fre', '--no-such-switch'])
    self.assertEqual('--no-such-switch', cm.exception.switch)

  def testEmptySwitchNameRejected(self):
    with self.assertRaises(exceptions.UnknownSwitchError):
      launch_configuration.Build(['--'], strict=False)
    with self.assertRaises(exceptions.UnknownSwitchError):
      launch_configuration.Build(['=value'], strict=False)

  def testPermissivePassesUnknownSwitchThrough(self):
    config = launch_configuration.Build(
        ['disable-fre', 'no-such-switch=1'], strict=False)
    self.assertEqual(['--disable-fre', '--no-such-switch=1'], config.args)

  def testCustomAllowList(self):
    config = launch_configuration.Build(
        ['custom'], allowed_switches=frozenset(['custom']))
    self.assertEqual(['--custom'], config.args)
    with self.assertRaises(exceptions.UnknownSwitchError):
      launch_configuration.Build(
          ['disable-fre'], allowed_switches=frozenset(['custom']))


class LaunchConfigurationTest(unittest.TestCase):

  def testImmutable(self):
    config = launch_configuration.Build(['disable-fre'])
    with self.assertRaises(AttributeError):
      config.switches.add('--enable-logging')
    args = config.args
    args.append('--enable-logging')
    self.assertEqual(['--disable-fre'], config.args)

  def testWithSwitchesReturnsNewConfiguration(self):
    config = launch_configuration.Build(['disable-fre'])
    extended = config.WithSwitches(['--enable-features=foo'])
    self.assertEqual(['--disable-fre'], config.args)
    self.assertEqual(['--disable-fre', '--enable-features=foo'],
                     extended.args)
    self.assertNotEqual(config, extended)

  def testWithSwitchesIsStrictByDefault(self):
    config = launch_configuration.Build(['disable-fre'])
    with self.assertRaises(exceptions.UnknownSwitchError):
      config.WithSwitches(['--unknown'])

  def testWithSwitchesKeepsPermissiveMode(self):
    config = launch_configuration.Build(['disable-fre', 'custom'], strict=False)
    self.assertFalse(config.strict)
    extended = config.WithSwitches(['--other'])
    self.assertEqual(['--custom', '--disable-fre', '--other'], extended.args)
    self.assertFalse(extended.strict)
    with self.assertRaises(exceptions.UnknownSwitchError):
      config.WithSwitches(['--enable-logging'], strict=True)

  def testWithSwitchesKeepsAllowList(self):
    allowed = frozenset(['custom', 'other'])
    config = launch_configuration.Build(['custom'], allowed_switches=allowed)
    self.assertEqual(allowed, config.allowed_switches)
    self.assertEqual(['--custom', '--other'],
                     config.WithSwitches(['other']).args)
    with self.assertRaises(exceptions.UnknownSwitchError):
      config.WithSwitches(['disable-fre'])

  def testDefaultsUseKnownSwitches(self):
    config = launch_configuration.LaunchConfiguration(['--disable-fre'])
    self.assertTrue(config.strict)
    self.assertIn('disable-fre', config.allowed_switches)
    self.assertEqual(['--disable-fre', '--enable-logging'],
                     config.WithSwitches(['enable-logging']).args)

  def testGetSwitchValues(self):
    config = launch_configuration.Build(
        ['--user-data-dir=/tmp/a', '--disable-fre'])
    self.assertEqual(['/tmp/a'], config.GetSwitchValues('user-data-dir'))
    self.assertEqual([None], config.GetSwitchValues('disable-fre'))
    self.assertEqual([], config.GetSwitchValues('enable-logging'))

  def testCommandLine(self):
    config = launch_configuration.Build(
        ['--user-data-dir=/tmp/some dir', 'disable-fre'])
    line = config.ToCommandLine('chrome')
    self.assertEqual('chrome --disable-fre --user-data-dir="/tmp/some dir"',
                     line)
    self.assertEqual(
        config, launch_configuration.LaunchConfiguration.FromCommandLine(line))

  def testFromCommandLineStrict(self):
    with self.assertRaises(exceptions.UnknownSwitchError):
      launch_configuration.LaunchConfiguration.FromCommandLine(
          'chrome --bogus')
    config = launch_configuration.LaunchConfiguration.FromCommandLine(
        'chrome --bogus', strict=False)
    self.assertEqual(['--bogus'], config.args)


if __name__ == '__main__':
  unittest.main()
