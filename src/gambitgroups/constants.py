# Gambit Groups
# Copyright (C) 2025  Gambit Groups developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"

# Game outcome scores
WIN_SCORE = 1.0
DRAW_SCORE = 0.5
LOSS_SCORE = 0.0

# Result keys (stored on each match)
RESULT_P1_WIN = "p1_win"
RESULT_P2_WIN = "p2_win"
RESULT_DRAW = "draw"

# Group sizing
MIN_GROUP_SIZE = 3
MAX_GROUP_SIZE = 6

# Padding entry for odd-sized round robins; never a real player
BYE_PLACEHOLDER = "BYE"

# Final stage variants
FINAL_STAGE_NONE = "none"
FINAL_STAGE_MATCH = "final_match"
FINAL_STAGE_ROUND_ROBIN = "round_robin"

# Display label for a final match slot awaiting a group winner
WINNER_SOURCE_LABEL = "Winner Group {group_id}"

# Environment variable read by the CLI to pick a log level
LOG_LEVEL_ENV_VAR = "GAMBITGROUPS_LOG_LEVEL"
