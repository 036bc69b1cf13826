# Copyright 2024 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
"""Default values of the tab group flags on the tabbed browser."""

from flagcheck.core import switches
from flagcheck.flags import flag_list

# The browser is launched from the launcher with the first-run experience
# disabled.
LAUNCH_SWITCHES = (switches.DISABLE_FIRST_RUN_EXPERIENCE,)

# (test name, flag, expected default)
TESTS = (
    ('TabGroupAutoCreationDefault', flag_list.TAB_GROUP_AUTO_CREATION, False),
    ('TabGroupsAndroidDefault', flag_list.TAB_GROUPS_ANDROID, True),
    ('TabGridLayoutDefault', flag_list.TAB_GRID_LAYOUT, True),
)
