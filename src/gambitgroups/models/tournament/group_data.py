"""Data model for a tournament group."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from gambitgroups.type_hints import Players, Schedule, Standings

from .schedule import all_matches_played, schedule_from_dict, schedule_to_dict
from .standing import Standing


@dataclass
class GroupData:
    """Container for all data related to a single group.

    Attributes
    ----------
    players : list of str
        Names of the players in the group, in draw order.
    schedule : dict of int to list of Match
        Round index (0-based) to the matches of that round.
    standings : dict of str to Standing
        Player name to the standing derived from ``schedule``.
    previous_rank_order : list of str or None
        Ranking captured just before the latest result was recorded. Only
        used to show rank movement.
    """

    players: Players = field(default_factory=list)
    schedule: Schedule = field(default_factory=dict)
    standings: Standings = field(default_factory=dict)
    previous_rank_order: Optional[List[str]] = None

    @property
    def is_complete(self) -> bool:
        """True once every scheduled match has a result."""
        return all_matches_played(self.schedule)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize group data to dictionary."""
        data = {
            "players": list(self.players),
            "schedule": schedule_to_dict(self.schedule),
            "standings": {name: s.to_dict() for name, s in self.standings.items()},
        }
        if self.previous_rank_order is not None:
            data["previousRankOrder"] = list(self.previous_rank_order)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GroupData":
        """Deserialize group data from dictionary."""
        previous = data.get("previousRankOrder")
        return cls(
            players=list(data.get("players", [])),
            schedule=schedule_from_dict(data.get("schedule", {})),
            standings={
                name: Standing.from_dict(s)
                for name, s in data.get("standings", {}).items()
            },
            previous_rank_order=list(previous) if previous is not None else None,
        )
