# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
"""Experiment assignments loaded from a JSON config.

The config assigns flag values per experiment:

  {
    "TabGroupsStudy": {"tab-group-auto-creation": true},
    "StartSurfaceStudy": {"start-surface-return-time-seconds": 3600}
  }

Assignments rank above compiled-in defaults and below command line switches.
"""

import json
import logging

from flagcheck.core import exceptions

logger = logging.getLogger(__name__)


def ParseExperimentConfig(config):
  """Flattens a parsed experiment config into {flag_name: value}.

  Raises:
    InvalidOverrideError: the config is not a mapping of experiment names to
        mappings, or two experiments assign the same flag.
  """
  if not isinstance(config, dict):
    raise exceptions.InvalidOverrideError(
        'Experiment config must be a JSON object, got %s' %
        type(config).__name__)
  assignments = {}
  owners = {}
  for experiment_name in sorted(config):
    flags = config[experiment_name]
    if not isinstance(flags, dict):
      raise exceptions.InvalidOverrideError(
          'Experiment %r must map flag names to values' % experiment_name)
    for flag_name, value in flags.items():
      if flag_name in assignments:
        raise exceptions.InvalidOverrideError(
            'Flag %r is assigned by both %r and %r' %
            (flag_name, owners[flag_name], experiment_name),
            flag_name=flag_name, value=value)
      assignments[flag_name] = value
      owners[flag_name] = experiment_name
  return assignments


def LoadExperimentConfig(path):
  """Reads the experiment config at |path|. See ParseExperimentConfig()."""
  logger.info('Loading experiment config from %s', path)
  try:
    with open(path) as f:
      config = json.load(f)
  except (IOError, OSError) as e:
    raise exceptions.InvalidOverrideError(
        'Cannot read experiment config %s: %s' % (path, e))
  except ValueError as e:
    raise exceptions.InvalidOverrideError(
        'Experiment config %s is not valid JSON: %s' % (path, e))
  return ParseExperimentConfig(config)
