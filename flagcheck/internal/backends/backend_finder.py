# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
"""Finds the backend matching the harness options."""

import functools

from flagcheck.core import harness_options
from flagcheck.internal import lifecycle_controller
from flagcheck.internal.backends import in_process_app_backend
from flagcheck.internal.backends import local_app_backend


def GetBackendFactory(options):
  """Returns a callable creating a new AppBackend for |options|."""
  if options.backend_type == harness_options.IN_PROCESS_BACKEND:
    return in_process_app_backend.InProcessAppBackend
  if options.backend_type == harness_options.LOCAL_BACKEND:
    return functools.partial(
        local_app_backend.LocalAppBackend,
        executable=options.app_executable,
        show_stdout=options.show_stdout)
  raise ValueError('Unknown backend type: %s' % options.backend_type)


def CreateController(options):
  """Returns a new LifecycleController for |options|."""
  return lifecycle_controller.LifecycleController(
      GetBackendFactory(options), startup_timeout=options.startup_timeout)
