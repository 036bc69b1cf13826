# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
"""Extraction and conversion of flag overrides from a command line."""

from flagcheck.core import command_line
from flagcheck.core import exceptions
from flagcheck.core import switches

_TRUE_STRINGS = ('true',)
_FALSE_STRINGS = ('false',)


def _SplitList(switch_name, value):
  if value is None:
    raise exceptions.InvalidOverrideError(
        '--%s requires a value' % switch_name, value=value)
  entries = value.split(',')
  for entry in entries:
    if not entry.strip():
      raise exceptions.InvalidOverrideError(
          'Empty entry in --%s=%s' % (switch_name, value), value=value)
  return [e.strip() for e in entries]


def GetOverridesFromCommandLine(args):
  """Returns the flag overrides requested by |args|.

  --enable-features and --disable-features map flag names to True and False.
  --force-flag-values maps flag names to the raw string after the ':'.

  Returns:
    A dict mapping flag names to a bool or a raw string value.

  Raises:
    InvalidOverrideError: an entry is malformed, or two entries give the same
        flag different values.
  """
  overrides = {}

  def _Add(name, value, source):
    if name in overrides and overrides[name] == value:
      return
    if name in overrides:
      raise exceptions.InvalidOverrideError(
          'Flag %r is overridden more than once (last by --%s)' %
          (name, source), flag_name=name, value=value)
    overrides[name] = value

  for switch_name, forced in ((switches.ENABLE_FEATURES, True),
                              (switches.DISABLE_FEATURES, False)):
    for value in command_line.GetSwitchValues(args, switch_name):
      for name in _SplitList(switch_name, value):
        _Add(name, forced, switch_name)

  for value in command_line.GetSwitchValues(args, switches.FORCE_FLAG_VALUES):
    for entry in _SplitList(switches.FORCE_FLAG_VALUES, value):
      if ':' not in entry:
        raise exceptions.InvalidOverrideError(
            'Expected name:value in --%s, got %r' %
            (switches.FORCE_FLAG_VALUES, entry), value=entry)
      name, raw_value = entry.split(':', 1)
      if not name:
        raise exceptions.InvalidOverrideError(
            'Missing flag name in --%s entry %r' %
            (switches.FORCE_FLAG_VALUES, entry), value=entry)
      _Add(name, raw_value, switches.FORCE_FLAG_VALUES)

  return overrides


def ConvertOverride(flag_name, default_value, value):
  """Converts an override to the type of |default_value|.

  |value| may be a bool (from enable/disable switches), a string (from
  --force-flag-values) or an already typed value (from experiment configs).

  Raises:
    InvalidOverrideError: |value| cannot represent a value of that type.
  """
  def _Fail(reason):
    return exceptions.InvalidOverrideError(
        'Invalid override %r for flag %r: %s' % (value, flag_name, reason),
        flag_name=flag_name, value=value)

  value_type = type(default_value)
  if value_type is bool:
    if isinstance(value, bool):
      return value
    if isinstance(value, str):
      lowered = value.strip().lower()
      if lowered in _TRUE_STRINGS:
        return True
      if lowered in _FALSE_STRINGS:
        return False
    raise _Fail('expected true or false')

  if isinstance(value, bool):
    raise _Fail('flag is not a boolean feature')

  if value_type is str:
    if not isinstance(value, str):
      raise _Fail('expected a string')
    return value

  if isinstance(value, str):
    try:
      return value_type(value.strip())
    except ValueError:
      raise _Fail('expected %s' % value_type.__name__)
  if value_type is int and not isinstance(value, int):
    raise _Fail('expected int')
  if value_type is float and not isinstance(value, (int, float)):
    raise _Fail('expected float')
  return value_type(value)
