# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.


class App():
  """An application instance bound to one launch configuration.

  The instance owns its flag state: values are read through GetFlagValue(),
  which the backend answers from the registry the application resolved at
  startup.
  """
  def __init__(self, app_backend, launch_configuration):
    self._app_backend = app_backend
    self._launch_configuration = launch_configuration
    self._app_backend.SetApp(self)

  @property
  def app_type(self):
    return self._app_backend.app_type

  @property
  def launch_configuration(self):
    return self._launch_configuration

  def Start(self):
    """Launches the application. Does not wait for readiness."""
    self._app_backend.Start(self._launch_configuration.args)

  def IsReady(self):
    return self._app_backend.IsAppReady()

  def IsRunning(self):
    return self._app_backend.IsAppRunning()

  def GetFlagValue(self, name):
    return self._app_backend.GetFlagValue(name)

  def GetStandardOutput(self):
    return self._app_backend.GetStandardOutput()

  def Close(self):
    self._app_backend.Close()
