# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import contextlib
import signal


@contextlib.contextmanager
def InterruptOnSignals(signalnums=(signal.SIGTERM,)):
  """Turns the given signals into KeyboardInterrupt in the wrapped context.

  A harness killed by its parent then unwinds the same way as one stopped with
  Ctrl-C, and the running test tears its application down. Handlers that were
  installed before are still called first and are restored on exit.

  Args:
    signalnums: The signals to convert.
  """
  existing_handlers = {}

  def Handler(signum, frame):
    existing_handler = existing_handlers.get(signum)
    if callable(existing_handler):
      existing_handler(signum, frame)
    raise KeyboardInterrupt('Received signal %d' % signum)

  for signum in signalnums:
    existing_handlers[signum] = signal.getsignal(signum)
    signal.signal(signum, Handler)
  try:
    yield
  finally:
    for signum, existing_handler in existing_handlers.items():
      signal.signal(signum, existing_handler)
