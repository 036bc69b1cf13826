# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import logging

from flagcheck.core import exceptions

logger = logging.getLogger(__name__)


class FlagTestCase():
  """A named test that starts an application and checks its flags.

  Run() goes through three phases. SetUp() starts the application with the
  test's launch configuration and blocks until it is ready; Body() queries
  and asserts; TearDown() stops the application and always runs, whatever
  happened before it.

  Subclasses override Body().
  """

  def __init__(self, name, launch_configuration, controller_factory):
    """
    Args:
      name: The name the test is reported under.
      launch_configuration: The LaunchConfiguration to start the app with.
      controller_factory: A callable returning a new LifecycleController.
    """
    self._name = name
    self._launch_configuration = launch_configuration
    self._controller_factory = controller_factory
    self._controller = None
    self._handle = None

  def __repr__(self):
    return '%s(%s)' % (type(self).__name__, self._name)

  @property
  def name(self):
    return self._name

  @property
  def launch_configuration(self):
    return self._launch_configuration

  @property
  def handle(self):
    return self._handle

  def SetUp(self):
    self._handle = None
    self._controller = self._controller_factory()
    try:
      self._handle = self._controller.Start(self._launch_configuration)
    except Exception as e:
      raise exceptions.SetupFailedError(self._name, e) from e

  def Body(self):
    raise NotImplementedError()

  def TearDown(self):
    if self._controller is None:
      return
    self._controller.Stop(self._handle)

  def Run(self):
    """Runs the three phases. TearDown() always runs; when SetUp() or Body()
    failed, an error from TearDown() is logged and the first failure is the
    one raised."""
    try:
      self.SetUp()
      self.Body()
    except BaseException:
      try:
        self.TearDown()
      except Exception:  # pylint: disable=broad-except
        logger.exception('%s: teardown failed after an earlier failure',
                         self._name)
      raise
    self.TearDown()

  def GetFlagValue(self, flag_name):
    if self._handle is None:
      raise exceptions.LifecycleError(
          '%s has no running application' % self._name)
    return self._handle.GetFlagValue(flag_name)

  def AssertFlagValue(self, flag_name, expected_value):
    """Raises AssertionFailedError unless |flag_name| resolved to
    |expected_value|. A value of another type never matches, so False does not
    match 0."""
    actual_value = self.GetFlagValue(flag_name)
    logger.info('%s: %s = %r', self._name, flag_name, actual_value)
    if (type(actual_value) is not type(expected_value) or
        actual_value != expected_value):
      raise exceptions.AssertionFailedError(
          flag_name, expected_value, actual_value)


class FlagValueTest(FlagTestCase):
  """Asserts that one flag resolves to an expected value."""

  def __init__(self, name, flag_name, expected_value, launch_configuration,
               controller_factory):
    super().__init__(name, launch_configuration, controller_factory)
    self._flag_name = flag_name
    self._expected_value = expected_value

  @property
  def flag_name(self):
    return self._flag_name

  @property
  def expected_value(self):
    return self._expected_value

  def Body(self):
    self.AssertFlagValue(self._flag_name, self._expected_value)
