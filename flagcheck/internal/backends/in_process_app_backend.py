# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import logging
import threading

from flagcheck.core import exceptions
from flagcheck.internal.app import reference_app
from flagcheck.internal.backends import app_backend

logger = logging.getLogger(__name__)

_JOIN_TIMEOUT = 10


class InProcessAppBackend(app_backend.AppBackend):
  """Runs the application object in the harness process.

  Startup runs on a worker thread so that a hung startup can be observed and
  abandoned. An exception raised by the application's startup is re-raised on
  the caller's thread by IsAppReady().
  """

  def __init__(self, app_factory=reference_app.ReferenceApp):
    super().__init__('in-process')
    self._app_factory = app_factory
    self._instance = None
    self._thread = None
    self._startup_error = None

  def Start(self, startup_args):
    assert not self._thread, 'Must call Close() before Start()'
    self._startup_error = None
    self._instance = self._app_factory(startup_args)
    self._thread = threading.Thread(
        target=self._RunStartup, name='app-startup')
    self._thread.daemon = True
    self._thread.start()

  def _RunStartup(self):
    try:
      self._instance.Start()
    except Exception as e:  # pylint: disable=broad-except
      logger.error('Application startup failed: %s', e)
      self._startup_error = e

  def IsAppReady(self):
    if self._startup_error is not None:
      raise self._startup_error
    return self._instance is not None and self._instance.IsReady()

  def IsAppRunning(self):
    return self._instance is not None and self._startup_error is None

  def GetFlagValue(self, name):
    if self._instance is None:
      raise exceptions.LifecycleError('Application is not running')
    return self._instance.GetFlagValue(name)

  def Close(self):
    if self._instance is not None:
      self._instance.Shutdown()
    if self._thread is not None:
      self._thread.join(_JOIN_TIMEOUT)
      if self._thread.is_alive():
        logger.warning('Application startup thread did not exit after %ds.',
                       _JOIN_TIMEOUT)
    self._thread = None
    self._instance = None
