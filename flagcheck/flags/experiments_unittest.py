# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import json
import unittest

from pyfakefs import fake_filesystem_unittest

from flagcheck.core import exceptions
from flagcheck.flags import experiments


class ParseExperimentConfigTest(unittest.TestCase):

  def testFlattensExperiments(self):
    config = {
        'TabGroupsStudy': {'tab-group-auto-creation': True},
        'StartSurfaceStudy': {'start-surface-return-time-seconds': 3600},
    }
    self.assertEqual(
        {'tab-group-auto-creation': True,
         'start-surface-return-time-seconds': 3600},
        experiments.ParseExperimentConfig(config))

  def testEmptyConfig(self):
    self.assertEqual({}, experiments.ParseExperimentConfig({}))

  def testRejectsMalformedConfig(self):
    for config in ([], 'study', {'Study': ['tab-grid-layout']}):
      with self.assertRaises(exceptions.InvalidOverrideError):
        experiments.ParseExperimentConfig(config)

  def testRejectsFlagAssignedTwice(self):
    config = {
        'A': {'tab-grid-layout': True},
        'B': {'tab-grid-layout': False},
    }
    with self.assertRaises(exceptions.InvalidOverrideError) as cm:
      experiments.ParseExperimentConfig(config)
    self.assertEqual('tab-grid-layout', cm.exception.flag_name)


class LoadExperimentConfigTest(fake_filesystem_unittest.TestCase):

  def setUp(self):
    self.setUpPyfakefs()

  def testLoad(self):
    self.fs.create_file(
        '/study.json',
        contents=json.dumps({'Study': {'tab-grid-min-scale': 0.75}}))
    self.assertEqual({'tab-grid-min-scale': 0.75},
                     experiments.LoadExperimentConfig('/study.json'))

  def testMissingFile(self):
    with self.assertRaises(exceptions.InvalidOverrideError):
      experiments.LoadExperimentConfig('/missing.json')

  def testInvalidJson(self):
    self.fs.create_file('/study.json', contents='{not json')
    with self.assertRaises(exceptions.InvalidOverrideError):
      experiments.LoadExperimentConfig('/study.json')


if __name__ == '__main__':
  unittest.main()
