# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import logging
import sys
import time

_LEVELS_BY_VERBOSITY = (logging.WARNING, logging.INFO, logging.DEBUG)
_LEVELS_BY_QUIETNESS = (logging.WARNING, logging.ERROR, logging.CRITICAL)


def AddLoggingArguments(parser):
  """Adds the harness logging flags to |parser|.

  Pass the parsed args to InitializeLogging() afterwards.
  """
  group = parser.add_argument_group('Logging options')
  verbosity = group.add_mutually_exclusive_group()
  verbosity.add_argument(
      '-v', '--verbose', action='count', default=0,
      help='Log more. Use twice to include debug messages.')
  verbosity.add_argument(
      '-q', '--quiet', action='count', default=0,
      help='Log less. Use twice to only log critical errors.')
  group.add_argument(
      '--log-file',
      help=('Also write every log message, including debug messages, to this '
            'file.'))


def GetLogLevel(args):
  if args.quiet:
    return _LEVELS_BY_QUIETNESS[min(args.quiet, len(_LEVELS_BY_QUIETNESS) - 1)]
  return _LEVELS_BY_VERBOSITY[
      min(args.verbose, len(_LEVELS_BY_VERBOSITY) - 1)]


def InitializeLogging(args, handler=None):
  """Attaches the harness handlers to the root logger.

  Console output goes to |handler|, or to stderr when None, at the level given
  by -v/-q. --log-file adds a debug-level file handler.

  Returns:
    The list of handlers added, for the caller to remove when done.
  """
  console_level = GetLogLevel(args)
  if not handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(HarnessFormatter())
  handler.setLevel(console_level)
  handlers = [handler]

  log_file = getattr(args, 'log_file', None)
  if log_file:
    file_handler = logging.FileHandler(log_file, mode='w')
    file_handler.setFormatter(HarnessFormatter())
    file_handler.setLevel(logging.DEBUG)
    handlers.append(file_handler)

  root = logging.getLogger()
  root.setLevel(min(h.level for h in handlers))
  for h in handlers:
    root.addHandler(h)
  return handlers


def RemoveHandlers(handlers):
  root = logging.getLogger()
  for h in handlers:
    root.removeHandler(h)
    h.close()


class HarnessFormatter(logging.Formatter):
  """Prefixes messages with the level letter, the seconds since the harness
  started, the thread and the last component of the logger name."""

  # override
  def __init__(self, fmt='%(threadName)-4s %(module)s: %(message)s'):
    super().__init__(fmt=fmt)
    self._creation_time = time.time()

  # override
  def format(self, record):
    msg = super().format(record)
    if msg.startswith('MainThread'):
      msg = 'Main' + msg[len('MainThread'):]
    elapsed = time.time() - self._creation_time
    return '%s %8.3fs %s' % (record.levelname[0], elapsed, msg)
