# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import copy
import logging
import os
import shlex
import sys

from flagcheck.core import command_line
from flagcheck.core import exceptions
from flagcheck.core import switches
from flagcheck.internal import lifecycle_controller

IN_PROCESS_BACKEND = 'in-process'
LOCAL_BACKEND = 'local'
BACKEND_TYPES = (IN_PROCESS_BACKEND, LOCAL_BACKEND)


class HarnessOptions():
  """Options used to launch the application under test."""

  def __init__(self):
    self.backend_type = IN_PROCESS_BACKEND
    # Command used to start the application with the local backend. The
    # reference application is used when None.
    self.app_executable = None
    self.show_stdout = False

    # The amount of time to wait for the application to become ready.
    self.startup_timeout = lifecycle_controller.DEFAULT_STARTUP_TIMEOUT

    # When False, switches outside switches.KNOWN_SWITCHES are passed through
    # to the application instead of being rejected.
    self.strict_switches = True

    self.experiment_config = None
    self._extra_switches = set()

  def __repr__(self):
    return str(sorted(self.__dict__.items()))

  def Copy(self):
    return copy.deepcopy(self)

  @property
  def extra_switches(self):
    """Switches added to the launch configuration of every test."""
    switch_args = set(self._extra_switches)
    if self.experiment_config:
      switch_args.add(command_line.MakeSwitch(
          switches.EXPERIMENT_CONFIG, self.experiment_config))
    return switch_args

  def AppendExtraSwitches(self, args):
    if isinstance(args, (list, tuple, set, frozenset)):
      self._extra_switches.update(args)
    else:
      self._extra_switches.add(args)

  @classmethod
  def AddCommandLineArgs(cls, parser):
    group = parser.add_argument_group('Application options')
    group.add_argument(
        '--backend',
        dest='backend_type',
        choices=BACKEND_TYPES,
        default=IN_PROCESS_BACKEND,
        help=('Where the application runs. "in-process" runs the reference '
              'application inside the harness, "local" runs it as a child '
              'process. Defaults to %(default)s.'))
    group.add_argument(
        '--app-executable',
        help=('Command starting the application for the local backend. The '
              'launch switches are appended to it.'))
    group.add_argument(
        '--startup-timeout',
        type=float,
        default=lifecycle_controller.DEFAULT_STARTUP_TIMEOUT,
        help='Seconds to wait for the application to become ready.')
    group.add_argument(
        '--extra-switches',
        dest='extra_switches_as_string',
        help='Additional switches to pass to the application when it starts.')
    group.add_argument(
        '--permissive-switches',
        action='store_true',
        help='Pass unrecognized switches through instead of failing.')
    group.add_argument(
        '--experiment-config',
        help='JSON file with experiment assignments for the application.')
    group.add_argument(
        '--show-stdout',
        action='store_true',
        help='When possible, will display the stdout of the application.')

  def UpdateFromParseResults(self, args):
    """Copies our options from the parsed |args|.

    Raises:
      OptionsError: an option names a file that does not exist.
    """
    self.backend_type = args.backend_type
    self.show_stdout = args.show_stdout
    self.startup_timeout = args.startup_timeout
    self.strict_switches = not args.permissive_switches

    if args.app_executable:
      self.app_executable = shlex.split(
          args.app_executable, posix=(sys.platform != 'win32'))
    if args.extra_switches_as_string:
      self.AppendExtraSwitches(shlex.split(
          args.extra_switches_as_string, posix=(sys.platform != 'win32')))
    if args.experiment_config:
      if not os.path.isfile(args.experiment_config):
        raise exceptions.OptionsError(
            'Experiment config %s does not exist' % args.experiment_config)
      self.experiment_config = os.path.abspath(args.experiment_config)
    if self.app_executable and self.backend_type != LOCAL_BACKEND:
      logging.warning('--app-executable is ignored by the %s backend.',
                      self.backend_type)
