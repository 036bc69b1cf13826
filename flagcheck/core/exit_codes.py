# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
"""Exit codes of the flagcheck tools."""

SUCCESS = 0
TEST_FAILURE = 1
FATAL_ERROR = 2
# No test matched the filter.
NO_TESTS_RUN = 111
