"""Tournament engine operations."""

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

from gambitgroups.controllers.tournament.advancement import (
    AdvancementState,
    advance_to_final_stage,
    advancement_state,
    all_group_matches_played,
    group_winners,
    tournament_champion,
)
from gambitgroups.controllers.tournament.grouping import (
    assign_groups,
    compute_grouping_options,
    format_grouping_option,
    group_id_for_index,
    validate_grouping,
)
from gambitgroups.controllers.tournament.result_recorder import (
    record_final_stage_result,
    record_group_result,
)
from gambitgroups.controllers.tournament.standings_calculator import (
    RankMovement,
    calculate_standings,
    empty_standings,
    find_head_to_head,
    group_winner,
    rank_movements,
    rank_order,
    sort_standings,
)
from gambitgroups.controllers.tournament.tournament_builder import (
    create_final_stage,
    create_group,
    create_tournament,
)

__all__ = [
    "AdvancementState",
    "RankMovement",
    "advance_to_final_stage",
    "advancement_state",
    "all_group_matches_played",
    "assign_groups",
    "calculate_standings",
    "compute_grouping_options",
    "create_final_stage",
    "create_group",
    "create_tournament",
    "empty_standings",
    "find_head_to_head",
    "format_grouping_option",
    "group_id_for_index",
    "group_winner",
    "group_winners",
    "rank_movements",
    "rank_order",
    "record_final_stage_result",
    "record_group_result",
    "sort_standings",
    "tournament_champion",
    "validate_grouping",
]
