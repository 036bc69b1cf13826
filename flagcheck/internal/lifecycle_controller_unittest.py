# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import threading
import unittest

import mock

from flagcheck.core import exceptions
from flagcheck.core import launch_configuration
from flagcheck.flags import flag_list
from flagcheck.internal import lifecycle_controller
from flagcheck.internal.backends import app_backend
from flagcheck.internal.backends import in_process_app_backend


class FakeAppBackend(app_backend.AppBackend):

  def __init__(self, ready=True, start_error=None, ready_error=None):
    super().__init__('fake')
    self.ready = ready
    self.start_error = start_error
    self.ready_error = ready_error
    self.startup_args = None
    self.close_count = 0
    self.polled = threading.Event()

  def Start(self, startup_args):
    self.startup_args = startup_args
    if self.start_error:
      raise self.start_error

  def IsAppReady(self):
    self.polled.set()
    if self.ready_error:
      raise self.ready_error
    return self.ready

  def IsAppRunning(self):
    return self.startup_args is not None and not self.close_count

  def GetFlagValue(self, name):
    return 'value of %s' % name

  def GetStandardOutput(self):
    return 'fake output'

  def Close(self):
    self.close_count += 1


class LifecycleControllerTest(unittest.TestCase):

  def setUp(self):
    self._config = launch_configuration.Build(['disable-fre'])

  def _CreateController(self, backend, startup_timeout=5):
    return lifecycle_controller.LifecycleController(
        lambda: backend, startup_timeout=startup_timeout)

  def testStartAndStop(self):
    backend = FakeAppBackend()
    controller = self._CreateController(backend)
    self.assertEqual(lifecycle_controller.NOT_STARTED, controller.state)

    handle = controller.Start(self._config)
    self.assertEqual(lifecycle_controller.READY, controller.state)
    self.assertEqual(lifecycle_controller.READY, handle.state)
    self.assertEqual(['--disable-fre'], backend.startup_args)
    self.assertEqual(self._config, handle.launch_configuration)
    self.assertEqual('value of foo', handle.GetFlagValue('foo'))

    controller.Stop(handle)
    self.assertEqual(lifecycle_controller.TERMINATED, controller.state)
    self.assertEqual(1, backend.close_count)

  def testStopWarnsWhenAppAlreadyExited(self):
    backend = FakeAppBackend()
    controller = self._CreateController(backend)
    handle = controller.Start(self._config)
    backend.startup_args = None
    with self.assertLogs(lifecycle_controller.logger, 'WARNING') as cm:
      controller.Stop(handle)
    self.assertIn('exited before it was stopped', cm.output[0])
    self.assertEqual(1, backend.close_count)

  def testStopIsIdempotent(self):
    backend = FakeAppBackend()
    controller = self._CreateController(backend)
    handle = controller.Start(self._config)
    controller.Stop(handle)
    controller.Stop(handle)
    controller.Stop()
    self.assertEqual(lifecycle_controller.TERMINATED, controller.state)
    self.assertEqual(1, backend.close_count)

  def testQueryAfterStop(self):
    controller = self._CreateController(FakeAppBackend())
    handle = controller.Start(self._config)
    controller.Stop(handle)
    with self.assertRaises(exceptions.LifecycleError):
      handle.GetFlagValue('foo')

  def testStopBeforeStart(self):
    backend = FakeAppBackend()
    controller = self._CreateController(backend)
    controller.Stop()
    self.assertEqual(lifecycle_controller.TERMINATED, controller.state)
    self.assertEqual(0, backend.close_count)

  def testStopWithForeignHandle(self):
    controller = self._CreateController(FakeAppBackend())
    other = self._CreateController(FakeAppBackend())
    other_handle = other.Start(self._config)
    controller.Start(self._config)
    with self.assertRaises(exceptions.LifecycleError):
      controller.Stop(other_handle)
    self.assertEqual(lifecycle_controller.READY, controller.state)
    other.Stop(other_handle)
    controller.Stop()

  def testSecondStartFails(self):
    controller = self._CreateController(FakeAppBackend())
    handle = controller.Start(self._config)
    with self.assertRaises(exceptions.LifecycleError):
      controller.Start(self._config)
    controller.Stop(handle)
    with self.assertRaises(exceptions.LifecycleError):
      controller.Start(self._config)

  def testTimeout(self):
    backend = FakeAppBackend(ready=False)
    controller = self._CreateController(backend, startup_timeout=0.2)
    with self.assertRaises(exceptions.LaunchTimeoutError) as cm:
      controller.Start(self._config)
    self.assertEqual(0.2, cm.exception.timeout)
    self.assertIn('fake output', str(cm.exception))
    self.assertEqual(lifecycle_controller.FAILED, controller.state)
    self.assertEqual(1, backend.close_count)

    # Stop() after a failed start does nothing.
    controller.Stop()
    self.assertEqual(lifecycle_controller.FAILED, controller.state)
    self.assertEqual(1, backend.close_count)

  def testBackendErrorDuringStart(self):
    backend = FakeAppBackend(start_error=OSError('no such file'))
    controller = self._CreateController(backend)
    with self.assertRaises(OSError):
      controller.Start(self._config)
    self.assertEqual(lifecycle_controller.FAILED, controller.state)
    self.assertEqual(1, backend.close_count)

  def testCrashWhileWaiting(self):
    backend = FakeAppBackend(
        ready_error=exceptions.AppCrashException('crashed', returncode=3))
    controller = self._CreateController(backend)
    with self.assertRaises(exceptions.AppCrashException):
      controller.Start(self._config)
    self.assertEqual(lifecycle_controller.FAILED, controller.state)
    self.assertEqual(1, backend.close_count)

  def testKeyboardInterruptTerminates(self):
    backend = FakeAppBackend(ready_error=KeyboardInterrupt())
    controller = self._CreateController(backend)
    with self.assertRaises(KeyboardInterrupt):
      controller.Start(self._config)
    self.assertEqual(lifecycle_controller.TERMINATED, controller.state)
    self.assertEqual(1, backend.close_count)

  def testCancelFromAnotherThread(self):
    backend = FakeAppBackend(ready=False)
    controller = self._CreateController(backend, startup_timeout=30)

    def CancelWhenPolled():
      backend.polled.wait(5)
      controller.Cancel()

    thread = threading.Thread(target=CancelWhenPolled)
    thread.start()
    try:
      with self.assertRaises(exceptions.LaunchCancelledError):
        controller.Start(self._config)
    finally:
      thread.join(5)
    self.assertEqual(lifecycle_controller.TERMINATED, controller.state)
    self.assertEqual(1, backend.close_count)

  def testCancelAfterReady(self):
    backend = FakeAppBackend()
    controller = self._CreateController(backend)
    handle = controller.Start(self._config)
    controller.Cancel()
    self.assertEqual(lifecycle_controller.TERMINATED, handle.state)
    self.assertEqual(1, backend.close_count)
    controller.Cancel()
    self.assertEqual(1, backend.close_count)

  def testCancelBeforeStart(self):
    controller = self._CreateController(FakeAppBackend())
    controller.Cancel()
    with self.assertRaises(exceptions.LaunchCancelledError):
      controller.Start(self._config)
    self.assertEqual(lifecycle_controller.TERMINATED, controller.state)

  def testBackendFactoryCalledPerStart(self):
    factory = mock.Mock(return_value=FakeAppBackend())
    controller = lifecycle_controller.LifecycleController(factory)
    controller.Start(self._config)
    controller.Stop()
    factory.assert_called_once_with()


class InProcessLifecycleTest(unittest.TestCase):

  def _CreateController(self, startup_timeout=10):
    return lifecycle_controller.LifecycleController(
        in_process_app_backend.InProcessAppBackend,
        startup_timeout=startup_timeout)

  def testTabGroupAutoCreationDefault(self):
    controller = self._CreateController()
    handle = controller.Start(launch_configuration.Build(['disable-fre']))
    try:
      self.assertIs(False,
                    handle.GetFlagValue(flag_list.TAB_GROUP_AUTO_CREATION))
    finally:
      controller.Stop(handle)

  def testFirstRunExperienceTimesOut(self):
    controller = self._CreateController(startup_timeout=0.5)
    with self.assertRaises(exceptions.LaunchTimeoutError):
      controller.Start(launch_configuration.Build([]))
    self.assertEqual(lifecycle_controller.FAILED, controller.state)


if __name__ == '__main__':
  unittest.main()
