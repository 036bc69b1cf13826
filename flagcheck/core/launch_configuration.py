# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import logging

from flagcheck.core import command_line
from flagcheck.core import exceptions
from flagcheck.core import switches as switches_module

logger = logging.getLogger(__name__)


class LaunchConfiguration():
  """The immutable set of switches an application instance is started with.

  Create instances with Build(), which normalizes and validates the switches.
  """

  def __init__(self, switch_args, strict=True,
               allowed_switches=switches_module.KNOWN_SWITCHES):
    self._switches = frozenset(switch_args)
    # How the switches were validated; reused by WithSwitches().
    self._strict = strict
    self._allowed_switches = frozenset(allowed_switches)

  def __repr__(self):
    return 'LaunchConfiguration(%s)' % ', '.join(self.args)

  def __eq__(self, other):
    return (isinstance(other, LaunchConfiguration) and
            self._switches == other.switches)

  def __ne__(self, other):
    return not self == other

  def __hash__(self):
    return hash(self._switches)

  def __contains__(self, arg):
    return command_line.NormalizeSwitch(arg) in self._switches

  def __len__(self):
    return len(self._switches)

  @property
  def switches(self):
    return self._switches

  @property
  def args(self):
    """The switches as a sorted list, ready to append to a command line."""
    return sorted(self._switches)

  def HasSwitch(self, name):
    return command_line.HasSwitch(self._switches, name)

  def GetSwitchValues(self, name):
    return sorted(command_line.GetSwitchValues(self._switches, name),
                  key=lambda v: (v is not None, v or ''))

  @property
  def strict(self):
    return self._strict

  @property
  def allowed_switches(self):
    return self._allowed_switches

  def WithSwitches(self, switch_args, strict=None, allowed_switches=None):
    """Returns a new configuration with |switch_args| added.

    |strict| and |allowed_switches| default to the ones this configuration was
    built with.
    """
    if strict is None:
      strict = self._strict
    if allowed_switches is None:
      allowed_switches = self._allowed_switches
    return Build(list(self._switches) + list(switch_args), strict=strict,
                 allowed_switches=allowed_switches)

  def ToCommandLine(self, program_name='_'):
    return command_line.SerializeCommandLine(self._switches, program_name)

  @classmethod
  def FromCommandLine(cls, line, strict=True,
                      allowed_switches=switches_module.KNOWN_SWITCHES):
    """Builds a configuration from a command line that starts with the program
    name, e.g. 'chrome --disable-fre'."""
    return Build(command_line.ParseCommandLine(line), strict=strict,
                 allowed_switches=allowed_switches)


def Build(switch_args, strict=True,
          allowed_switches=switches_module.KNOWN_SWITCHES):
  """Builds a LaunchConfiguration.

  Args:
    switch_args: An iterable of switches, with or without leading dashes, e.g.
        ['disable-fre', '--enable-features=foo'].
    strict: If True, switches outside |allowed_switches| raise
        UnknownSwitchError. Otherwise they are passed through unvalidated.
    allowed_switches: Switch names (without dashes) accepted in strict mode.

  Returns:
    A LaunchConfiguration.
  """
  normalized = set()
  for arg in switch_args:
    name, _ = command_line.SplitSwitch(arg)
    if not name:
      raise exceptions.UnknownSwitchError(arg)
    if name not in allowed_switches:
      if strict:
        raise exceptions.UnknownSwitchError(arg)
      logger.debug('Passing through unrecognized switch %s', arg)
    normalized.add(command_line.NormalizeSwitch(arg))

  args = list(normalized)
  for name in switches_module.LIST_SWITCHES:
    args = command_line.ConsolidateListSwitch(args, name)
  return LaunchConfiguration(args, strict=strict,
                             allowed_switches=allowed_switches)
