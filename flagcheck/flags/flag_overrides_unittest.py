# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import unittest

from flagcheck.core import exceptions
from flagcheck.flags import flag_overrides


class GetOverridesFromCommandLineTest(unittest.TestCase):

  def testNoOverrides(self):
    self.assertEqual({}, flag_overrides.GetOverridesFromCommandLine(
        ['--disable-fre']))

  def testEnableDisableFeatures(self):
    overrides = flag_overrides.GetOverridesFromCommandLine(
        ['--enable-features=a,b', '--disable-features=c'])
    self.assertEqual({'a': True, 'b': True, 'c': False}, overrides)

  def testForceFlagValues(self):
    overrides = flag_overrides.GetOverridesFromCommandLine(
        ['--force-flag-values=count:3,name:a:b'])
    self.assertEqual({'count': '3', 'name': 'a:b'}, overrides)

  def testIdenticalDuplicatesAreTolerated(self):
    overrides = flag_overrides.GetOverridesFromCommandLine(
        ['--enable-features=a', '--enable-features=a,b'])
    self.assertEqual({'a': True, 'b': True}, overrides)

  def testConflictingOverrides(self):
    with self.assertRaises(exceptions.InvalidOverrideError) as cm:
      flag_overrides.GetOverridesFromCommandLine(
          ['--enable-features=a', '--disable-features=a'])
    self.assertEqual('a', cm.exception.flag_name)

  def testMalformedEntries(self):
    for args in (['--enable-features=a,,b'],
                 ['--enable-features'],
                 ['--force-flag-values=count'],
                 ['--force-flag-values=:3']):
      with self.assertRaises(exceptions.InvalidOverrideError):
        flag_overrides.GetOverridesFromCommandLine(args)


class ConvertOverrideTest(unittest.TestCase):

  def testBool(self):
    self.assertIs(True, flag_overrides.ConvertOverride('f', False, True))
    self.assertIs(True, flag_overrides.ConvertOverride('f', False, 'TRUE'))
    self.assertIs(False, flag_overrides.ConvertOverride('f', True, 'false'))
    for value in ('yes', '1', 1, None):
      with self.assertRaises(exceptions.InvalidOverrideError):
        flag_overrides.ConvertOverride('f', False, value)

  def testInt(self):
    self.assertEqual(3600, flag_overrides.ConvertOverride('f', 28800, '3600'))
    self.assertEqual(7, flag_overrides.ConvertOverride('f', 28800, 7))
    for value in ('soon', '1.5', True, 1.5):
      with self.assertRaises(exceptions.InvalidOverrideError):
        flag_overrides.ConvertOverride('f', 28800, value)

  def testFloat(self):
    self.assertEqual(0.25, flag_overrides.ConvertOverride('f', 0.5, '0.25'))
    value = flag_overrides.ConvertOverride('f', 0.5, 1)
    self.assertIsInstance(value, float)
    self.assertEqual(1.0, value)
    with self.assertRaises(exceptions.InvalidOverrideError):
      flag_overrides.ConvertOverride('f', 0.5, 'half')

  def testString(self):
    self.assertEqual('compact',
                     flag_overrides.ConvertOverride('f', 'default', 'compact'))
    for value in (True, 3):
      with self.assertRaises(exceptions.InvalidOverrideError) as cm:
        flag_overrides.ConvertOverride('f', 'default', value)
      self.assertEqual('f', cm.exception.flag_name)


if __name__ == '__main__':
  unittest.main()
