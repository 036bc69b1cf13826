# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import logging

from flagcheck.core import exceptions
from flagcheck.flags import flag_overrides

logger = logging.getLogger(__name__)

_SUPPORTED_TYPES = (bool, int, float, str)


class FlagRegistry():
  """Maps flag names to their resolved values for one application instance.

  Defaults are registered first, then Resolve() computes every value exactly
  once from the command line and the experiment assignments:

    registry = FlagRegistry()
    registry.RegisterDefault('tab-group-auto-creation', False)
    registry.Resolve(['--enable-features=tab-group-auto-creation'])
    registry.Get('tab-group-auto-creation')  # True

  Once resolved, the registry is read-only.
  """

  def __init__(self):
    self._defaults = {}
    self._resolved = None

  @classmethod
  def FromResolvedValues(cls, values):
    """Returns a resolved registry holding |values| as they are.

    Used for values reported by an application that resolved them itself.
    """
    registry = cls()
    for name, value in values.items():
      registry.RegisterDefault(name, value)
    registry.Resolve([])
    return registry

  @property
  def is_resolved(self):
    return self._resolved is not None

  @property
  def names(self):
    return sorted(self._defaults)

  def RegisterDefault(self, name, default_value):
    if self.is_resolved:
      raise exceptions.FlagRegistryError(
          'Cannot register %r: flags were already resolved' % name)
    if name in self._defaults:
      raise exceptions.DuplicateRegistrationError(name)
    if not isinstance(default_value, _SUPPORTED_TYPES):
      raise TypeError('Default of flag %r has unsupported type %s' %
                      (name, type(default_value).__name__))
    self._defaults[name] = default_value

  def GetDefault(self, name):
    if name not in self._defaults:
      raise exceptions.UnknownFlagError(name)
    return self._defaults[name]

  def Resolve(self, args, experiment_assignments=None):
    """Resolves every registered flag.

    Precedence: command line override, then experiment assignment, then the
    registered default.

    Args:
      args: The command line switches of the application instance.
      experiment_assignments: Optional dict of flag name to assigned value.

    Raises:
      InvalidOverrideError: an override is malformed or has the wrong type.
      FlagRegistryError: the registry was already resolved.
    """
    if self.is_resolved:
      raise exceptions.FlagRegistryError('Flags were already resolved')

    switch_overrides = flag_overrides.GetOverridesFromCommandLine(args)
    experiment_assignments = experiment_assignments or {}
    for source, overrides in (('command line', switch_overrides),
                              ('experiment', experiment_assignments)):
      for name in sorted(overrides):
        if name not in self._defaults:
          logger.warning('Ignoring %s override of unknown flag %r',
                         source, name)

    resolved = {}
    for name, default_value in self._defaults.items():
      if name in switch_overrides:
        value = flag_overrides.ConvertOverride(
            name, default_value, switch_overrides[name])
      elif name in experiment_assignments:
        value = flag_overrides.ConvertOverride(
            name, default_value, experiment_assignments[name])
      else:
        value = default_value
      if value != default_value:
        logger.info('Flag %s overridden: %r -> %r', name, default_value, value)
      resolved[name] = value
    self._resolved = resolved

  def Get(self, name):
    """Returns the resolved value of flag |name|.

    If Resolve() was not called yet, the flags are resolved without any
    override first, so a value never changes after it was observed.
    """
    if name not in self._defaults:
      raise exceptions.UnknownFlagError(name)
    if not self.is_resolved:
      logger.debug('Resolving flags without overrides on first query')
      self.Resolve([])
    return self._resolved[name]

  def AsDict(self):
    if not self.is_resolved:
      raise exceptions.FlagRegistryError('Flags are not resolved yet')
    return dict(self._resolved)
