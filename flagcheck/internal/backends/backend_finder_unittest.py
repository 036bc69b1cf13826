# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import unittest

from flagcheck.core import harness_options
from flagcheck.internal import lifecycle_controller
from flagcheck.internal.backends import backend_finder
from flagcheck.internal.backends import in_process_app_backend
from flagcheck.internal.backends import local_app_backend


class BackendFinderTest(unittest.TestCase):

  def setUp(self):
    self._options = harness_options.HarnessOptions()

  def testInProcessBackend(self):
    factory = backend_finder.GetBackendFactory(self._options)
    self.assertIsInstance(factory(), in_process_app_backend.InProcessAppBackend)

  def testLocalBackend(self):
    self._options.backend_type = harness_options.LOCAL_BACKEND
    self._options.app_executable = ['/usr/bin/app']
    backend = backend_finder.GetBackendFactory(self._options)()
    self.assertIsInstance(backend, local_app_backend.LocalAppBackend)
    self.assertEqual('local', backend.app_type)

  def testUnknownBackend(self):
    self._options.backend_type = 'android'
    with self.assertRaises(ValueError):
      backend_finder.GetBackendFactory(self._options)

  def testCreateController(self):
    self._options.startup_timeout = 3
    controller = backend_finder.CreateController(self._options)
    self.assertIsInstance(controller, lifecycle_controller.LifecycleController)
    self.assertEqual(3, controller.startup_timeout)
    self.assertEqual(lifecycle_controller.NOT_STARTED, controller.state)


if __name__ == '__main__':
  unittest.main()
