# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
"""A minimal application that resolves its flags the way the browser does.

It is the default target of the harness. It can run in the harness process
(see InProcessAppBackend) or as its own process:

  python -m flagcheck.internal.app.reference_app --disable-fre \\
      --user-data-dir=/tmp/profile

Startup resolves the flags from the command line, then shows the first-run
experience unless --disable-fre is given. The first-run flow waits for user
input that never comes in a test, so the application only becomes ready with
--disable-fre. Once ready, a process instance writes READY_FILE into its user
data directory.
"""

import json
import logging
import os
import sys
import threading

from flagcheck.core import command_line
from flagcheck.core import exceptions
from flagcheck.core import switches
from flagcheck.flags import experiments
from flagcheck.flags import flag_list

logger = logging.getLogger(__name__)

READY_FILE = 'FlagcheckReady'


def _GetLastSwitchValue(args, name):
  values = command_line.GetSwitchValues(args, name)
  if not values:
    return None
  if values[-1] is None:
    raise exceptions.InvalidOverrideError('--%s requires a value' % name)
  return values[-1]


class ReferenceApp():

  def __init__(self, args):
    self._args = list(args)
    self._registry = flag_list.CreateFlagRegistry()
    self._ui_attached = False
    self._first_run_shown = False
    self._shutdown_event = threading.Event()

  @property
  def args(self):
    return list(self._args)

  @property
  def ui_attached(self):
    return self._ui_attached

  @property
  def first_run_shown(self):
    return self._first_run_shown

  def Start(self):
    """Runs startup. Blocks while the first-run experience is showing."""
    experiment_assignments = None
    config_path = _GetLastSwitchValue(self._args, switches.EXPERIMENT_CONFIG)
    if config_path:
      experiment_assignments = experiments.LoadExperimentConfig(config_path)
    self._registry.Resolve(self._args, experiment_assignments)

    if not command_line.HasSwitch(
        self._args, switches.DISABLE_FIRST_RUN_EXPERIENCE):
      self._first_run_shown = True
      logger.info('Showing the first-run experience')
      self._shutdown_event.wait()
      return

    self._ui_attached = True
    logger.info('Main UI attached')

  def IsReady(self):
    return self._ui_attached and not self._first_run_shown

  def GetFlagValue(self, name):
    return self._registry.Get(name)

  def GetReadyState(self):
    return {
        'pid': os.getpid(),
        'ui_attached': self._ui_attached,
        'first_run_shown': self._first_run_shown,
        'flags': self._registry.AsDict(),
    }

  def WriteReadyFile(self, user_data_dir):
    """Publishes the ready state. The file appears atomically."""
    path = os.path.join(user_data_dir, READY_FILE)
    tmp_path = path + '.tmp'
    with open(tmp_path, 'w') as f:
      json.dump(self.GetReadyState(), f, sort_keys=True)
    os.replace(tmp_path, path)
    return path

  def WaitForShutdown(self, timeout=None):
    return self._shutdown_event.wait(timeout)

  def Shutdown(self):
    self._ui_attached = False
    self._shutdown_event.set()


def main(argv=None):
  args = sys.argv[1:] if argv is None else argv
  if command_line.HasSwitch(args, switches.ENABLE_LOGGING):
    logging.basicConfig(level=logging.INFO, stream=sys.stdout)

  app = ReferenceApp(args)
  try:
    user_data_dir = _GetLastSwitchValue(args, switches.USER_DATA_DIR)
    app.Start()
  except exceptions.Error as e:
    print('Startup failed: %s' % e)
    return 1

  print('Ready (pid %d)' % os.getpid())
  sys.stdout.flush()
  if user_data_dir:
    app.WriteReadyFile(user_data_dir)
  # Runs until the harness terminates the process.
  app.WaitForShutdown()
  return 0


if __name__ == '__main__':
  sys.exit(main())
