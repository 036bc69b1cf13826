# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.


class AppBackend():
  """Controls one application instance on one kind of target.

  Subclasses launch the application, report readiness and answer flag queries
  for it. Start() must not block until the application is ready; the
  lifecycle controller polls IsAppReady() for that.
  """

  def __init__(self, app_type):
    self._app = None
    self._app_type = app_type

  def SetApp(self, app):
    self._app = app

  @property
  def app(self):
    return self._app

  @property
  def app_type(self):
    return self._app_type

  def Start(self, startup_args):
    raise NotImplementedError()

  def IsAppReady(self):
    """Returns True once the application can be queried.

    Raises if the application failed in a way that waiting cannot fix.
    """
    raise NotImplementedError()

  def IsAppRunning(self):
    raise NotImplementedError()

  def GetFlagValue(self, name):
    raise NotImplementedError()

  def GetStandardOutput(self):
    return ''

  def Close(self):
    """Releases the application. Must be safe to call more than once, and
    after a partial Start()."""
    raise NotImplementedError()
