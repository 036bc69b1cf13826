# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
"""Command line switches understood by the application under test.

Switch names are stored without the leading dashes, the way the application
declares them. Use command_line.MakeSwitch() to build an argument.
"""

# Skips the first-run experience. Without it the application blocks on the
# first-run flow and never becomes ready.
DISABLE_FIRST_RUN_EXPERIENCE = 'disable-fre'

# Comma-separated boolean flag names to force on / off.
ENABLE_FEATURES = 'enable-features'
DISABLE_FEATURES = 'disable-features'

# Comma-separated 'name:value' pairs forcing typed flag values.
FORCE_FLAG_VALUES = 'force-flag-values'

# Path of a JSON file with experiment assignments.
EXPERIMENT_CONFIG = 'experiment-config'

# Directory where the application keeps its state and publishes readiness.
USER_DATA_DIR = 'user-data-dir'

ENABLE_LOGGING = 'enable-logging'

# Switches whose values are comma-separated lists that may be merged.
LIST_SWITCHES = (ENABLE_FEATURES, DISABLE_FEATURES, FORCE_FLAG_VALUES)

KNOWN_SWITCHES = frozenset([
    DISABLE_FIRST_RUN_EXPERIENCE,
    ENABLE_FEATURES,
    DISABLE_FEATURES,
    FORCE_FLAG_VALUES,
    EXPERIMENT_CONFIG,
    USER_DATA_DIR,
    ENABLE_LOGGING,
])
