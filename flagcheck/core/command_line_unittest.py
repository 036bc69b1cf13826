# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import unittest

from flagcheck.core import command_line


class SwitchTest(unittest.TestCase):

  def testMakeSwitch(self):
    self.assertEqual('--disable-fre', command_line.MakeSwitch('disable-fre'))
    self.assertEqual('--enable-features=a,b',
                     command_line.MakeSwitch('enable-features', 'a,b'))
    self.assertEqual('--user-data-dir=',
                     command_line.MakeSwitch('user-data-dir', ''))

  def testSplitSwitch(self):
    self.assertEqual(('disable-fre', None),
                     command_line.SplitSwitch('--disable-fre'))
    self.assertEqual(('disable-fre', None),
                     command_line.SplitSwitch('disable-fre'))
    self.assertEqual(('force-flag-values', 'a:1=2'),
                     command_line.SplitSwitch('--force-flag-values=a:1=2'))

  def testNormalizeSwitch(self):
    self.assertEqual('--disable-fre',
                     command_line.NormalizeSwitch('disable-fre'))
    self.assertEqual('--disable-fre',
                     command_line.NormalizeSwitch('-disable-fre'))
    self.assertEqual('--enable-features=foo',
                     command_line.NormalizeSwitch('enable-features=foo'))

  def testGetSwitchValues(self):
    args = ['--enable-features=a', '--disable-fre', '--enable-features=b',
            '--enable-features']
    self.assertEqual(['a', 'b', None],
                     command_line.GetSwitchValues(args, 'enable-features'))
    self.assertEqual([None],
                     command_line.GetSwitchValues(args, 'disable-fre'))
    self.assertEqual([], command_line.GetSwitchValues(args, 'missing'))

  def testHasSwitch(self):
    args = ['--disable-fre', '--enable-features=a']
    self.assertTrue(command_line.HasSwitch(args, 'disable-fre'))
    self.assertTrue(command_line.HasSwitch(args, 'enable-features'))
    self.assertFalse(command_line.HasSwitch(args, 'disable'))


class ConsolidateListSwitchTest(unittest.TestCase):

  def testMergesEntries(self):
    args = ['--enable-features=foo', '--disable-fre',
            '--enable-features=bar']
    self.assertEqual(
        ['--disable-fre', '--enable-features=bar,foo'],
        command_line.ConsolidateListSwitch(args, 'enable-features'))

  def testDeduplicatesEntries(self):
    args = ['--enable-features=foo,bar', '--enable-features=foo']
    self.assertEqual(
        ['--enable-features=bar,foo'],
        command_line.ConsolidateListSwitch(args, 'enable-features'))

  def testWithoutSwitch(self):
    args = ['--disable-fre']
    self.assertEqual(
        ['--disable-fre'],
        command_line.ConsolidateListSwitch(args, 'enable-features'))


class ParseSerializeTest(unittest.TestCase):

  def _AssertParses(self, line, expected_flags):
    self.assertEqual(expected_flags, command_line.ParseCommandLine(line))

  def testParseCommandLine(self):
    self._AssertParses('', [])
    self._AssertParses('chrome', [])
    self._AssertParses('chrome --disable-fre', ['--disable-fre'])
    self._AssertParses('chrome   --foo   --bar=1  ', ['--foo', '--bar=1'])

  def testParseQuotedValues(self):
    self._AssertParses('_ --foo="with space" --bar=\'single\'',
                       ['--foo=with space', '--bar=single'])
    self._AssertParses('_ --foo="with \\"escaped\\" quote"',
                       ['--foo=with "escaped" quote'])
    self._AssertParses('_ --empty=""', ['--empty='])
    self._AssertParses('_ "" --foo', ['', '--foo'])

  def testQuoteSwitch(self):
    self.assertEqual('--disable-fre', command_line.QuoteSwitch('--disable-fre'))
    self.assertEqual('--foo=bar', command_line.QuoteSwitch('--foo=bar'))
    self.assertEqual('--foo="a b"', command_line.QuoteSwitch('--foo=a b'))
    self.assertEqual('--foo=""', command_line.QuoteSwitch('--foo='))
    self.assertEqual('""', command_line.QuoteSwitch(''))

  def testSerializeCommandLine(self):
    self.assertEqual(
        '_ --a --b="x y"',
        command_line.SerializeCommandLine(['--b=x y', '--a']))
    self.assertEqual('chrome', command_line.SerializeCommandLine([], 'chrome'))

  def testSerializedLineParsesBack(self):
    flags = ['--disable-fre', '--enable-features=a,b',
             '--user-data-dir=/tmp/some dir', '--quote="x"']
    line = command_line.SerializeCommandLine(flags)
    self.assertEqual(sorted(flags), command_line.ParseCommandLine(line))


if __name__ == '__main__':
  unittest.main()
