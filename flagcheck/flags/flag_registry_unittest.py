# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import unittest

from flagcheck.core import exceptions
from flagcheck.flags import flag_list
from flagcheck.flags import flag_registry


class FlagRegistryTest(unittest.TestCase):

  def setUp(self):
    self._registry = flag_registry.FlagRegistry()
    self._registry.RegisterDefault('tab-group-auto-creation', False)
    self._registry.RegisterDefault('start-surface-return-time-seconds', 28800)
    self._registry.RegisterDefault('first-run-variant', 'default')

  def testDefaults(self):
    self._registry.Resolve(['--disable-fre'])
    self.assertIs(False, self._registry.Get('tab-group-auto-creation'))
    self.assertEqual(28800,
                     self._registry.Get('start-surface-return-time-seconds'))
    self.assertEqual('default', self._registry.Get('first-run-variant'))

  def testNames(self):
    self.assertEqual(['first-run-variant', 'start-surface-return-time-seconds',
                      'tab-group-auto-creation'], self._registry.names)

  def testCommandLineOverrides(self):
    self._registry.Resolve([
        '--enable-features=tab-group-auto-creation',
        '--force-flag-values=start-surface-return-time-seconds:60,'
        'first-run-variant:compact'])
    self.assertIs(True, self._registry.Get('tab-group-auto-creation'))
    self.assertEqual(60,
                     self._registry.Get('start-surface-return-time-seconds'))
    self.assertEqual('compact', self._registry.Get('first-run-variant'))

  def testCommandLineBeatsExperiment(self):
    self._registry.Resolve(
        ['--disable-features=tab-group-auto-creation'],
        experiment_assignments={'tab-group-auto-creation': True,
                                'start-surface-return-time-seconds': 3600})
    self.assertIs(False, self._registry.Get('tab-group-auto-creation'))
    self.assertEqual(3600,
                     self._registry.Get('start-surface-return-time-seconds'))

  def testUnknownOverrideIsIgnored(self):
    with self.assertLogs(flag_registry.logger, 'WARNING'):
      self._registry.Resolve(['--enable-features=no-such-flag'],
                             experiment_assignments={'other-flag': 1})
    self.assertEqual(
        {'tab-group-auto-creation': False,
         'start-surface-return-time-seconds': 28800,
         'first-run-variant': 'default'},
        self._registry.AsDict())

  def testInvalidOverride(self):
    with self.assertRaises(exceptions.InvalidOverrideError):
      self._registry.Resolve(
          ['--force-flag-values=start-surface-return-time-seconds:soon'])
    self.assertFalse(self._registry.is_resolved)

  def testBoolSwitchOnTypedFlag(self):
    with self.assertRaises(exceptions.InvalidOverrideError):
      self._registry.Resolve(['--enable-features=first-run-variant'])

  def testUnknownFlag(self):
    with self.assertRaises(exceptions.UnknownFlagError) as cm:
      self._registry.Get('no-such-flag')
    self.assertEqual('no-such-flag', cm.exception.flag_name)
    with self.assertRaises(exceptions.UnknownFlagError):
      self._registry.GetDefault('no-such-flag')

  def testDuplicateRegistration(self):
    with self.assertRaises(exceptions.DuplicateRegistrationError):
      self._registry.RegisterDefault('tab-group-auto-creation', True)
    # Registering the same value again is still a duplicate.
    with self.assertRaises(exceptions.DuplicateRegistrationError):
      self._registry.RegisterDefault('tab-group-auto-creation', False)
    self.assertIs(False, self._registry.GetDefault('tab-group-auto-creation'))

  def testUnsupportedDefaultType(self):
    with self.assertRaises(TypeError):
      self._registry.RegisterDefault('tab-list', ['a'])

  def testGetResolvesOnFirstQuery(self):
    self.assertFalse(self._registry.is_resolved)
    self.assertIs(False, self._registry.Get('tab-group-auto-creation'))
    self.assertTrue(self._registry.is_resolved)
    with self.assertRaises(exceptions.FlagRegistryError):
      self._registry.Resolve(['--enable-features=tab-group-auto-creation'])
    self.assertIs(False, self._registry.Get('tab-group-auto-creation'))

  def testReadOnlyOnceResolved(self):
    self._registry.Resolve([])
    with self.assertRaises(exceptions.FlagRegistryError):
      self._registry.RegisterDefault('tab-grid-layout', True)
    values = self._registry.AsDict()
    values['tab-group-auto-creation'] = True
    self.assertIs(False, self._registry.Get('tab-group-auto-creation'))

  def testAsDictRequiresResolve(self):
    with self.assertRaises(exceptions.FlagRegistryError):
      self._registry.AsDict()

  def testFromResolvedValues(self):
    registry = flag_registry.FlagRegistry.FromResolvedValues(
        {'tab-group-auto-creation': True})
    self.assertTrue(registry.is_resolved)
    self.assertIs(True, registry.Get('tab-group-auto-creation'))


class FlagListTest(unittest.TestCase):

  def testTabGroupAutoCreationDefaultsToFalse(self):
    registry = flag_list.CreateFlagRegistry()
    registry.Resolve(['--disable-fre'])
    self.assertIs(False, registry.Get(flag_list.TAB_GROUP_AUTO_CREATION))

  def testEveryDeclaredFlagIsRegistered(self):
    registry = flag_list.CreateFlagRegistry()
    self.assertEqual(sorted(name for name, _ in flag_list.DEFAULT_FLAGS),
                     registry.names)


if __name__ == '__main__':
  unittest.main()
