"""Tournament management system for Gambit Groups.

Public entry points of the tournament engine. Every operation takes a
``Tournament`` and returns a new one; inputs are never modified.
"""

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

from gambitgroups.controllers.tournament import (
    AdvancementState,
    RankMovement,
    advance_to_final_stage,
    advancement_state,
    compute_grouping_options,
    create_tournament,
    format_grouping_option,
    rank_movements,
    record_final_stage_result,
    record_group_result,
    sort_standings,
    tournament_champion,
)
from gambitgroups.models.tournament import (
    FinalMatch,
    FinalRoundRobin,
    GroupData,
    Match,
    NoFinalStage,
    Standing,
    Tournament,
)

__all__ = [
    "Tournament",
    "GroupData",
    "Match",
    "Standing",
    "NoFinalStage",
    "FinalMatch",
    "FinalRoundRobin",
    "AdvancementState",
    "RankMovement",
    "create_tournament",
    "record_group_result",
    "record_final_stage_result",
    "compute_grouping_options",
    "format_grouping_option",
    "advance_to_final_stage",
    "advancement_state",
    "tournament_champion",
    "sort_standings",
    "rank_movements",
]
