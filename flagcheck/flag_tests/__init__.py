# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
"""The built-in flag test suite."""

import functools

from flagcheck.core import launch_configuration
from flagcheck.flag_tests import tab_group_flag_tests
from flagcheck.internal.backends import backend_finder
from flagcheck.testing import flag_test_case
from flagcheck.testing import test_table

_TEST_MODULES = (tab_group_flag_tests,)


def CreateTestTable(options):
  """Returns a TestTable holding every built-in test, configured by
  |options|."""
  table = test_table.TestTable()
  controller_factory = functools.partial(
      backend_finder.CreateController, options)
  for module in _TEST_MODULES:
    config = launch_configuration.Build(
        list(module.LAUNCH_SWITCHES) + sorted(options.extra_switches),
        strict=options.strict_switches)
    for name, flag_name, expected_value in module.TESTS:
      table.AddTestCase(flag_test_case.FlagValueTest(
          name, flag_name, expected_value, config, controller_factory))
  return table
