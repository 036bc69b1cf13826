# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
"""Flags declared by the application under test, with their defaults."""

from flagcheck.flags import flag_registry

TAB_GROUP_AUTO_CREATION = 'tab-group-auto-creation'
TAB_GROUPS_ANDROID = 'tab-groups-android'
TAB_GRID_LAYOUT = 'tab-grid-layout'
START_SURFACE_RETURN_TIME_SECONDS = 'start-surface-return-time-seconds'
TAB_GRID_MIN_SCALE = 'tab-grid-min-scale'
FIRST_RUN_VARIANT = 'first-run-variant'

DEFAULT_FLAGS = (
    (TAB_GROUP_AUTO_CREATION, False),
    (TAB_GROUPS_ANDROID, True),
    (TAB_GRID_LAYOUT, True),
    (START_SURFACE_RETURN_TIME_SECONDS, 28800),
    (TAB_GRID_MIN_SCALE, 0.5),
    (FIRST_RUN_VARIANT, 'default'),
)


def CreateFlagRegistry():
  """Returns an unresolved registry with every declared flag registered."""
  registry = flag_registry.FlagRegistry()
  for name, default_value in DEFAULT_FLAGS:
    registry.RegisterDefault(name, default_value)
  return registry
