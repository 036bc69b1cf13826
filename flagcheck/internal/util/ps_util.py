# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import logging
import os

import psutil

logger = logging.getLogger(__name__)


def _GetProcessDescription(process):
  try:
    return '%s (%s) - %s' % (process.name(), process.pid, process.cmdline())
  except (psutil.NoSuchProcess, psutil.ZombieProcess, psutil.AccessDenied
         ) as e:
    return 'unknown (%s): %r' % (
        process.pid, e)


def _GetAllSubprocesses():
  parent = psutil.Process(os.getpid())
  return parent.children(recursive=True)


def ListAllSubprocesses():
  """Logs every process started by the harness that is still alive."""
  children = _GetAllSubprocesses()
  if children:
    processes_info = []
    for p in children:
      processes_info.append(_GetProcessDescription(p))
    logger.warning('Running sub processes (%i processes):\n%s',
                   len(children), '\n'.join(processes_info))
  return children


def GetAllSubprocessIDs():
  return [p.pid for p in _GetAllSubprocesses()]


def TerminateProcessTree(pid, timeout=10):
  """Terminates process |pid| and all its descendants.

  Processes still alive |timeout| seconds after SIGTERM are killed.

  Returns:
    True if every process is gone.
  """
  try:
    parent = psutil.Process(pid)
    processes = parent.children(recursive=True) + [parent]
  except psutil.NoSuchProcess:
    return True

  for p in processes:
    try:
      p.terminate()
    except psutil.NoSuchProcess:
      pass
  _, alive = psutil.wait_procs(processes, timeout=timeout)
  if alive:
    logger.warning('Killing processes that ignored SIGTERM: %s',
                   ', '.join(_GetProcessDescription(p) for p in alive))
    for p in alive:
      try:
        p.kill()
      except psutil.NoSuchProcess:
        pass
    _, alive = psutil.wait_procs(alive, timeout=timeout)
  if alive:
    logger.warning(
        'Failed to terminate/kill processes %s after %d seconds.',
        [p.pid for p in alive], 2 * timeout)
  return not alive
