"""Tournament data models."""

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

from .final_stage import (
    FinalMatch,
    FinalRoundRobin,
    FinalStage,
    NoFinalStage,
    final_stage_from_dict,
)
from .group_data import GroupData
from .match import VALID_RESULTS, Match
from .schedule import all_matches_played, iter_matches
from .standing import Standing
from .tournament import Tournament

__all__ = [
    "Match",
    "VALID_RESULTS",
    "Standing",
    "GroupData",
    "FinalStage",
    "NoFinalStage",
    "FinalMatch",
    "FinalRoundRobin",
    "final_stage_from_dict",
    "Tournament",
    "iter_matches",
    "all_matches_played",
]
