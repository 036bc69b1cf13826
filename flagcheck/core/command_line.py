# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import logging
import re

logger = logging.getLogger(__name__)


_SWITCH_PREFIX = '--'
_RE_NEEDS_QUOTING = re.compile(r'[^\w-]')  # Not in: alphanumeric or hyphens.
_QUOTES = '"\''  # Either a single or a double quote.
_ESCAPE = '\\'  # A backslash.


def MakeSwitch(name, value=None):
  """Returns the command line argument for switch |name|.

  Example: MakeSwitch('enable-features', 'a,b') -> '--enable-features=a,b'
  """
  if value is None:
    return _SWITCH_PREFIX + name
  return '%s%s=%s' % (_SWITCH_PREFIX, name, value)


def SplitSwitch(arg):
  """Splits an argument into its switch name and value.

  Leading dashes are removed from the name. The value is None when the
  argument has no '='.
  """
  if '=' in arg:
    key, value = arg.split('=', 1)
  else:
    key, value = arg, None
  return key.lstrip('-'), value


def NormalizeSwitch(arg):
  """Returns |arg| in the canonical '--name[=value]' form."""
  name, value = SplitSwitch(arg)
  return MakeSwitch(name, value)


def GetSwitchValues(args, name):
  """Returns the values of every instance of switch |name| in |args|.

  Instances without a value are reported as None.
  """
  return [value for key, value in (SplitSwitch(a) for a in args)
          if key == name]


def HasSwitch(args, name):
  return any(SplitSwitch(a)[0] == name for a in args)


def ConsolidateListSwitch(args, name):
  """Merges every instance of a comma-separated list switch into one.

  As a concrete example, --enable-features can only be read once by the
  application. If |args| contains ['--enable-features=foo',
  '--enable-features=bar'], the result contains the single argument
  '--enable-features=bar,foo' instead. Entries are deduplicated and sorted so
  the result does not depend on the order of |args|.

  Returns:
    A new list of arguments.
  """
  consolidated_args = []
  found_entries = set()
  for arg in args:
    key, value = SplitSwitch(arg)
    if key == name and value is not None:
      found_entries.update(value.split(','))
    else:
      consolidated_args.append(arg)

  if found_entries:
    consolidated_args.append(
        MakeSwitch(name, ','.join(sorted(found_entries))))
  return consolidated_args


def ParseCommandLine(line):
  """Parse the string containing the command line into a list of switches.

  The first token is assumed to be the (unused) program name and stripped off
  from the list of switches.

  Args:
    line: A string containing the entire command line.

  Returns:
     A list of switches, with quoting removed.
  """
  flags = []
  current_quote = None
  current_flag = None

  for c in line:
    # Detect start or end of quote block.
    if (current_quote is None and c in _QUOTES) or c == current_quote:
      if current_flag and current_flag[-1] == _ESCAPE:
        # Last char was a backslash; pop it, and treat c as a literal.
        current_flag = current_flag[:-1] + c
      else:
        current_quote = c if current_quote is None else None
        if current_flag is None:
          current_flag = ''
    elif current_quote is None and c.isspace():
      if current_flag is not None:
        flags.append(current_flag)
        current_flag = None
    else:
      if current_flag is None:
        current_flag = ''
      current_flag += c

  if current_flag is not None:
    if current_quote is not None:
      logger.warning('Unterminated quoted argument: %s', current_flag)
    flags.append(current_flag)

  # Return everything but the program name.
  return flags[1:]


def SerializeCommandLine(flags, program_name='_'):
  """Serialize a sequence of switches into a command line string.

  Switches are written in sorted order, after |program_name|.
  """
  args = [program_name]
  args.extend(QuoteSwitch(f) for f in sorted(flags))
  return ' '.join(args)


def QuoteSwitch(flag):
  """Quote a single switch so that ParseCommandLine() reads it back intact."""
  if '=' in flag:
    key, value = flag.split('=', 1)
  else:
    key, value = flag, None

  if not flag or _RE_NEEDS_QUOTING.search(key):
    # Probably not a valid switch, but quote the whole thing so it can be
    # parsed back correctly.
    return '"%s"' % flag.replace('"', r'\"')

  if value is None:
    return key
  if not value or _RE_NEEDS_QUOTING.search(value):
    value = '"%s"' % value.replace('"', r'\"')
  return '='.join([key, value])
