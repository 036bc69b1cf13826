# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import functools
import unittest

import mock

from flagcheck.core import exceptions
from flagcheck.core import launch_configuration
from flagcheck.flags import flag_list
from flagcheck.internal import lifecycle_controller
from flagcheck.internal.backends import in_process_app_backend
from flagcheck.testing import flag_test_case
from flagcheck.testing import test_table


class RecordingControllerFactory():
  """Creates in-process controllers and remembers them."""

  def __init__(self, startup_timeout=10):
    self.controllers = []
    self._startup_timeout = startup_timeout

  def __call__(self):
    controller = lifecycle_controller.LifecycleController(
        in_process_app_backend.InProcessAppBackend,
        startup_timeout=self._startup_timeout)
    self.controllers.append(controller)
    return controller


class FlagValueTestTest(unittest.TestCase):

  def _CreateTest(self, switch_args, expected_value=False,
                  startup_timeout=10):
    factory = RecordingControllerFactory(startup_timeout)
    test = flag_test_case.FlagValueTest(
        'TabGroupAutoCreationDefault', flag_list.TAB_GROUP_AUTO_CREATION,
        expected_value, launch_configuration.Build(switch_args), factory)
    return test, factory

  def testDefaultIsFalse(self):
    test, factory = self._CreateTest(['disable-fre'])
    test.Run()
    self.assertEqual(1, len(factory.controllers))
    self.assertEqual(lifecycle_controller.TERMINATED,
                     factory.controllers[0].state)

  def testOverrideFailsAssertion(self):
    test, factory = self._CreateTest(
        ['disable-fre', 'enable-features=tab-group-auto-creation'])
    with self.assertRaises(exceptions.AssertionFailedError) as cm:
      test.Run()
    self.assertEqual(flag_list.TAB_GROUP_AUTO_CREATION, cm.exception.flag_name)
    self.assertIs(False, cm.exception.expected)
    self.assertIs(True, cm.exception.actual)
    self.assertEqual(lifecycle_controller.TERMINATED,
                     factory.controllers[0].state)

  def testNeverReadyFailsSetup(self):
    test, factory = self._CreateTest([], startup_timeout=0.5)
    with mock.patch.object(test, 'Body') as body:
      with self.assertRaises(exceptions.SetupFailedError) as cm:
        test.Run()
    body.assert_not_called()
    self.assertIsInstance(cm.exception.cause, exceptions.LaunchTimeoutError)
    self.assertEqual('TabGroupAutoCreationDefault', cm.exception.test_name)
    self.assertEqual(lifecycle_controller.FAILED, factory.controllers[0].state)

  def testTearDownRunsAfterSetupFailure(self):
    test, _ = self._CreateTest([], startup_timeout=0.5)
    with mock.patch.object(test, 'TearDown') as tear_down:
      with self.assertRaises(exceptions.SetupFailedError):
        test.Run()
    tear_down.assert_called_once_with()

  def testEachRunUsesANewController(self):
    test, factory = self._CreateTest(['disable-fre'])
    test.Run()
    test.Run()
    self.assertEqual(2, len(factory.controllers))
    self.assertIsNot(factory.controllers[0], factory.controllers[1])

  def testTypeMismatchFails(self):
    test, _ = self._CreateTest(['disable-fre'], expected_value=0)
    with self.assertRaises(exceptions.AssertionFailedError):
      test.Run()


class FlagTestCaseTest(unittest.TestCase):

  def testStopFailureDoesNotHideAssertion(self):
    controller = mock.Mock()
    controller.Start.return_value.GetFlagValue.return_value = True
    controller.Stop.side_effect = exceptions.LifecycleError('stuck')
    test = flag_test_case.FlagValueTest(
        'TabGroupAutoCreationDefault', flag_list.TAB_GROUP_AUTO_CREATION,
        False, launch_configuration.Build(['disable-fre']), lambda: controller)
    with self.assertLogs(flag_test_case.logger, 'ERROR'):
      with self.assertRaises(exceptions.AssertionFailedError) as cm:
        test.Run()
    self.assertIs(True, cm.exception.actual)
    controller.Stop.assert_called_once_with(controller.Start.return_value)

  def testStopFailureAfterPassingBodyIsRaised(self):
    controller = mock.Mock()
    controller.Start.return_value.GetFlagValue.return_value = False
    controller.Stop.side_effect = exceptions.LifecycleError('stuck')
    test = flag_test_case.FlagValueTest(
        'TabGroupAutoCreationDefault', flag_list.TAB_GROUP_AUTO_CREATION,
        False, launch_configuration.Build(['disable-fre']), lambda: controller)
    with self.assertRaises(exceptions.LifecycleError):
      test.Run()


  def testQueryWithoutApplication(self):
    test = flag_test_case.FlagTestCase(
        'NoApp', launch_configuration.Build([]), mock.Mock())
    with self.assertRaises(exceptions.LifecycleError):
      test.GetFlagValue(flag_list.TAB_GROUP_AUTO_CREATION)
    # TearDown() before SetUp() does nothing.
    test.TearDown()

  def testBodyMustBeOverridden(self):
    controller = mock.Mock()
    test = flag_test_case.FlagTestCase(
        'Base', launch_configuration.Build([]), lambda: controller)
    with self.assertRaises(NotImplementedError):
      test.Run()
    controller.Stop.assert_called_once_with(controller.Start.return_value)

  def testInTestTable(self):
    factory = functools.partial(
        lifecycle_controller.LifecycleController,
        in_process_app_backend.InProcessAppBackend, startup_timeout=0.5)
    table = test_table.TestTable()
    for name, switch_args in (('Ready', ['disable-fre']),
                              ('NeverReady', [])):
      table.AddTestCase(flag_test_case.FlagValueTest(
          name, flag_list.TAB_GROUP_AUTO_CREATION, False,
          launch_configuration.Build(switch_args), factory))
    run_results = table.RunAll()
    self.assertEqual(['Ready'], [r.name for r in run_results.passed])
    self.assertEqual(['NeverReady'], [r.name for r in run_results.failed])
    self.assertTrue(run_results.failed[0].setup_failed)


if __name__ == '__main__':
  unittest.main()
