"""Match data class."""

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
from typing import Any, Dict, Optional

from gambitgroups.constants import RESULT_DRAW, RESULT_P1_WIN, RESULT_P2_WIN
from gambitgroups.exceptions import InvalidInputError

VALID_RESULTS = (RESULT_P1_WIN, RESULT_P2_WIN, RESULT_DRAW)


@dataclass
class Match:
    """A single scheduled game between two players.

    Attributes
    ----------
    p1 : str
        Name of the first player.
    p2 : str
        Name of the second player.
    result : str or None
        One of ``"p1_win"``, ``"p2_win"``, ``"draw"``; None until played.
    """

    p1: str
    p2: str
    result: Optional[str] = None

    @property
    def is_played(self) -> bool:
        """Has a result been recorded?"""
        return self.result is not None

    @property
    def winner(self) -> Optional[str]:
        """Name of the winner, or None for a draw or unplayed match."""
        if self.result == RESULT_P1_WIN:
            return self.p1
        if self.result == RESULT_P2_WIN:
            return self.p2
        return None

    def is_between(self, player_a: str, player_b: str) -> bool:
        """Check whether this match pairs the two players, in either order."""
        return {self.p1, self.p2} == {player_a, player_b}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {"p1": self.p1, "p2": self.p2, "result": self.result}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        return cls(p1=data["p1"], p2=data["p2"], result=result_from_dict(data))


def result_from_dict(data: Dict[str, Any]) -> Optional[str]:
    """Read a stored ``result`` key, rejecting values outside VALID_RESULTS.

    Raises:
        InvalidInputError: If the stored result is not a known key
    """
    result = data.get("result")
    if result is not None and result not in VALID_RESULTS:
        raise InvalidInputError(f"Unknown match result: {result!r}")
    return result
