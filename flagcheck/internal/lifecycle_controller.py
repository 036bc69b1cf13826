# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
"""Starts an application instance and waits until it is ready.

States move NOT_STARTED -> STARTING -> READY -> TERMINATED. A startup that
does not finish moves STARTING -> FAILED. Cancel() forces TERMINATED from any
state that is not final.
"""

import logging
import threading

from flagcheck.core import exceptions
from flagcheck.core import util
from flagcheck.internal.app import app as app_module

logger = logging.getLogger(__name__)

NOT_STARTED = 'not-started'
STARTING = 'starting'
READY = 'ready'
TERMINATED = 'terminated'
FAILED = 'failed'

FINAL_STATES = (TERMINATED, FAILED)

DEFAULT_STARTUP_TIMEOUT = 60


class AppHandle():
  """A handle on the application instance started by a LifecycleController."""

  def __init__(self, controller, app):
    self._controller = controller
    self._app = app

  def __repr__(self):
    return 'AppHandle(app_type=%s, state=%s)' % (self._app.app_type,
                                                 self.state)

  @property
  def state(self):
    return self._controller.state

  @property
  def app(self):
    return self._app

  @property
  def launch_configuration(self):
    return self._app.launch_configuration

  def GetFlagValue(self, name):
    if self.state != READY:
      raise exceptions.LifecycleError(
          'Cannot query flag %r: application is %s' % (name, self.state))
    return self._app.GetFlagValue(name)


class LifecycleController():
  """Controls the lifecycle of one application instance.

  Only one instance may be live per controller. Callers running several
  controllers against the same physical target must serialize them.

    controller = LifecycleController(in_process_app_backend.InProcessAppBackend)
    handle = controller.Start(launch_configuration.Build(['disable-fre']))
    try:
      handle.GetFlagValue('tab-group-auto-creation')
    finally:
      controller.Stop(handle)
  """

  def __init__(self, backend_factory,
               startup_timeout=DEFAULT_STARTUP_TIMEOUT):
    """
    Args:
      backend_factory: A callable returning a new AppBackend.
      startup_timeout: Seconds to wait for the application to become ready.
    """
    self._backend_factory = backend_factory
    self._startup_timeout = startup_timeout
    self._state = NOT_STARTED
    self._app = None
    self._handle = None
    self._lock = threading.Lock()
    self._cancelled = threading.Event()

  @property
  def state(self):
    return self._state

  @property
  def startup_timeout(self):
    return self._startup_timeout

  def _SetState(self, state):
    logger.debug('Application state: %s -> %s', self._state, state)
    self._state = state

  def Start(self, launch_configuration):
    """Launches the application and blocks until it is ready.

    Returns:
      An AppHandle bound to the running instance.

    Raises:
      LaunchTimeoutError: The application was not ready in time.
      LaunchCancelledError: Cancel() or Stop() was called while waiting.
      LifecycleError: The controller was already used.
      Any error raised by the backend while starting.
    """
    with self._lock:
      if self._cancelled.is_set():
        raise exceptions.LaunchCancelledError(
            'Launch cancelled before it started')
      if self._state != NOT_STARTED:
        raise exceptions.LifecycleError(
            'Cannot start application: controller is %s' % self._state)
      self._SetState(STARTING)
      app = app_module.App(self._backend_factory(), launch_configuration)
      self._app = app

    logger.info('Starting %s application with %s', app.app_type,
                launch_configuration)

    def IsAppReady():
      if self._cancelled.is_set():
        raise exceptions.LaunchCancelledError(
            'Launch cancelled while waiting for the application')
      return app.IsReady()

    try:
      app.Start()
      util.WaitFor(IsAppReady, self._startup_timeout)
    except exceptions.LaunchCancelledError:
      self._ReleaseApp(TERMINATED)
      raise
    except exceptions.TimeoutException as e:
      output = app.GetStandardOutput()
      self._ReleaseApp(FAILED)
      error = exceptions.LaunchTimeoutError(
          'Application did not become ready within %ss' % self._startup_timeout,
          timeout=self._startup_timeout)
      if output:
        error.AddDebuggingMessage('Application output:\n%s' % output)
      raise error from e
    except Exception:
      self._ReleaseApp(FAILED)
      raise
    except BaseException:
      # KeyboardInterrupt and SystemExit cancel the launch.
      self._ReleaseApp(TERMINATED)
      raise

    with self._lock:
      if self._cancelled.is_set():
        self._ReleaseApp(TERMINATED, locked=True)
        raise exceptions.LaunchCancelledError(
            'Launch cancelled while the application became ready')
      self._SetState(READY)
      self._handle = AppHandle(self, app)
    logger.info('Application is ready')
    return self._handle

  def _ReleaseApp(self, final_state, locked=False):
    if not locked:
      with self._lock:
        self._ReleaseApp(final_state, locked=True)
      return
    app = self._app
    self._app = None
    if self._state not in FINAL_STATES:
      self._SetState(final_state)
    if app is not None:
      app.Close()

  def _Terminate(self):
    """Moves to TERMINATED unless the state is final. Requires the lock."""
    if self._state == STARTING:
      # The thread blocked in Start() notices and releases the application.
      self._cancelled.set()
    elif self._state not in FINAL_STATES or self._app is not None:
      self._ReleaseApp(TERMINATED, locked=True)

  def Stop(self, handle=None):
    """Terminates the application. Safe to call more than once.

    Args:
      handle: The handle returned by Start(), or None when Start() failed.
    """
    if handle is not None and handle is not self._handle:
      raise exceptions.LifecycleError(
          '%r does not belong to this controller' % handle)
    with self._lock:
      if self._state == READY:
        if not self._app.IsRunning():
          logger.warning('Application exited before it was stopped')
        logger.info('Stopping application')
      self._Terminate()

  def Cancel(self):
    """Forces TERMINATED from any state that is not final.

    May be called from another thread, e.g. by a suite-level watchdog. A
    Start() blocked waiting for readiness raises LaunchCancelledError once it
    notices.
    """
    with self._lock:
      if self._state not in FINAL_STATES:
        logger.warning('Application cancelled in state %s', self._state)
      self._cancelled.set()
      self._Terminate()
