# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import json
import logging
import os
import shutil
import subprocess
import sys
import tempfile

from flagcheck.core import command_line
from flagcheck.core import exceptions
from flagcheck.core import switches
from flagcheck.core import util
from flagcheck.flags import flag_registry
from flagcheck.internal.app import reference_app
from flagcheck.internal.backends import app_backend
from flagcheck.internal.util import ps_util

logger = logging.getLogger(__name__)

_TERMINATE_TIMEOUT = 10


def GetDefaultExecutable():
  """Returns the command that runs the reference application."""
  return [sys.executable, '-m', 'flagcheck.internal.app.reference_app']


class LocalAppBackend(app_backend.AppBackend):
  """The backend for an application running as a local process.

  The application receives the launch switches on its command line, plus
  --user-data-dir pointing at a directory owned by this backend unless the
  switches already name one. Readiness is published by the application as a
  JSON file in that directory, which also carries the resolved flag values.
  """

  def __init__(self, executable=None, show_stdout=False):
    super().__init__('local')
    self._executable = list(executable) if executable else (
        GetDefaultExecutable())
    self._show_stdout = show_stdout

    # Initialize fields so that an explosion during Start doesn't break Close.
    self._proc = None
    self._tmp_output_file = None
    self._user_data_dir = None
    self._owns_user_data_dir = False
    self._registry = None

  @property
  def user_data_dir(self):
    return self._user_data_dir

  @property
  def pid(self):
    return self._proc.pid if self._proc else None

  def _GetReadyFilePath(self):
    return os.path.join(self._user_data_dir, reference_app.READY_FILE)

  def Start(self, startup_args):
    assert not self._proc, 'Must call Close() before Start()'
    startup_args = list(startup_args)

    values = command_line.GetSwitchValues(startup_args, switches.USER_DATA_DIR)
    if values and values[-1]:
      self._user_data_dir = values[-1]
      self._owns_user_data_dir = False
    else:
      self._user_data_dir = tempfile.mkdtemp(prefix='flagcheck-profile-')
      self._owns_user_data_dir = True
      startup_args.append(command_line.MakeSwitch(
          switches.USER_DATA_DIR, self._user_data_dir))

    ready_file = self._GetReadyFilePath()
    if os.path.exists(ready_file):
      logger.warning('Removing stale ready file %s', ready_file)
      os.remove(ready_file)

    cmd = self._executable + startup_args
    env = os.environ.copy()
    python_path = [util.GetFlagcheckDir()]
    if env.get('PYTHONPATH'):
      python_path.append(env['PYTHONPATH'])
    env['PYTHONPATH'] = os.pathsep.join(python_path)

    logger.info('Starting application: %s', ' '.join(cmd))
    if not self._show_stdout:
      self._tmp_output_file = tempfile.NamedTemporaryFile('w')
      self._proc = subprocess.Popen(
          cmd, stdout=self._tmp_output_file, stderr=subprocess.STDOUT,
          env=env)
    else:
      self._proc = subprocess.Popen(cmd, env=env)

  def _ReadReadyFile(self):
    path = self._GetReadyFilePath()
    if not os.path.isfile(path):
      return None
    try:
      with open(path) as f:
        return json.load(f)
    except ValueError:
      # The caller will retry.
      return None

  def IsAppReady(self):
    if self._proc is None:
      return False
    if self._proc.poll() is not None:
      raise exceptions.AppCrashException(
          'Application exited during startup',
          returncode=self._proc.returncode,
          output=self.GetStandardOutput())
    state = self._ReadReadyFile()
    if not state:
      return False
    if not state.get('ui_attached') or state.get('first_run_shown'):
      return False
    self._registry = flag_registry.FlagRegistry.FromResolvedValues(
        state.get('flags', {}))
    return True

  def IsAppRunning(self):
    return self._proc is not None and self._proc.poll() is None

  def GetFlagValue(self, name):
    if self._registry is None:
      raise exceptions.LifecycleError('Application is not ready')
    return self._registry.Get(name)

  def GetStandardOutput(self):
    if not self._tmp_output_file:
      if self._show_stdout:
        return 'Stdout is not available when it is displayed directly.'
      return ''
    self._tmp_output_file.flush()
    with open(self._tmp_output_file.name) as f:
      return f.read()

  def Close(self):
    if self._proc is not None:
      if not ps_util.TerminateProcessTree(
          self._proc.pid, timeout=_TERMINATE_TIMEOUT):
        logger.warning('Application process %d may have leaked.',
                       self._proc.pid)
      self._proc.poll()
      self._proc = None

    if self._tmp_output_file is not None:
      self._tmp_output_file.close()
      self._tmp_output_file = None

    if self._owns_user_data_dir and self._user_data_dir:
      shutil.rmtree(self._user_data_dir, ignore_errors=True)
    self._user_data_dir = None
    self._owns_user_data_dir = False
    self._registry = None
