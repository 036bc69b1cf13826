# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import os
import signal
import time
import unittest

import mock

from flagcheck.utils import signal_handler


class InterruptOnSignalsTest(unittest.TestCase):

  def setUp(self):
    self._old_handler = signal.getsignal(signal.SIGUSR1)

  def tearDown(self):
    signal.signal(signal.SIGUSR1, self._old_handler)

  def testSignalRaisesKeyboardInterrupt(self):
    existing = mock.Mock()
    signal.signal(signal.SIGUSR1, existing)
    with self.assertRaises(KeyboardInterrupt):
      with signal_handler.InterruptOnSignals([signal.SIGUSR1]):
        os.kill(os.getpid(), signal.SIGUSR1)
        # The handler runs on the main thread before this returns.
        time.sleep(5)
    self.assertEqual(1, existing.call_count)
    self.assertIs(existing, signal.getsignal(signal.SIGUSR1))

  def testRestoresWithoutSignal(self):
    existing = mock.Mock()
    signal.signal(signal.SIGUSR1, existing)
    with signal_handler.InterruptOnSignals([signal.SIGUSR1]):
      self.assertIsNot(existing, signal.getsignal(signal.SIGUSR1))
    self.assertIs(existing, signal.getsignal(signal.SIGUSR1))
    existing.assert_not_called()


if __name__ == '__main__':
  unittest.main()
