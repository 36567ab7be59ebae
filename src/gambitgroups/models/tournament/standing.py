"""Standing data class."""

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

from dataclasses import dataclass
from typing import Any, Dict

from gambitgroups.constants import DRAW_SCORE, LOSS_SCORE, WIN_SCORE


@dataclass
class Standing:
    """A player's aggregated record in one group or final round robin.

    Attributes
    ----------
    name : str
        Player name.
    wins : int
        Number of games won.
    draws : int
        Number of games drawn.
    losses : int
        Number of games lost.
    """

    name: str
    wins: int = 0
    draws: int = 0
    losses: int = 0

    @property
    def points(self) -> float:
        """Points derived from the win/draw counts, never stored separately."""
        return (
            self.wins * WIN_SCORE
            + self.draws * DRAW_SCORE
            + self.losses * LOSS_SCORE
        )

    @property
    def games_played(self) -> int:
        return self.wins + self.draws + self.losses

    def to_dict(self) -> Dict[str, Any]:
        """Serialize standing to dictionary."""
        return {
            "name": self.name,
            "points": self.points,
            "wins": self.wins,
            "draws": self.draws,
            "losses": self.losses,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Standing":
        """Deserialize standing from dictionary.

        A stored ``points`` value is ignored; it is re-derived.
        """
        return cls(
            name=data["name"],
            wins=data.get("wins", 0),
            draws=data.get("draws", 0),
            losses=data.get("losses", 0),
        )
