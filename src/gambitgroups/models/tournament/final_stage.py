"""Final stage variants.

A tournament with one group has no final stage, two groups meet in a single
final match and three or more group winners play a final round robin.
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

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Union

from gambitgroups.constants import (
    FINAL_STAGE_MATCH,
    FINAL_STAGE_NONE,
    FINAL_STAGE_ROUND_ROBIN,
    RESULT_P1_WIN,
    RESULT_P2_WIN,
)
from gambitgroups.exceptions import InvalidInputError
from gambitgroups.type_hints import Players, Schedule, Standings

from .match import result_from_dict
from .schedule import all_matches_played, schedule_from_dict, schedule_to_dict
from .standing import Standing


@dataclass
class NoFinalStage:
    """Single-group tournament: the group winner is the champion."""

    stage_type: ClassVar[str] = FINAL_STAGE_NONE

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.stage_type}


@dataclass
class FinalMatch:
    """One game between the winners of group A and group B.

    Attributes
    ----------
    p1_source : str
        Label shown for the first slot before it is seeded.
    p2_source : str
        Label shown for the second slot before it is seeded.
    p1 : str or None
        First finalist, None until seeded.
    p2 : str or None
        Second finalist, None until seeded.
    result : str or None
        Result key, None until the final is played.
    """

    stage_type: ClassVar[str] = FINAL_STAGE_MATCH

    p1_source: str
    p2_source: str
    p1: Optional[str] = None
    p2: Optional[str] = None
    result: Optional[str] = None

    @property
    def is_seeded(self) -> bool:
        return self.p1 is not None and self.p2 is not None

    @property
    def winner(self) -> Optional[str]:
        """Winner of the final; None while unplayed or after a draw."""
        if self.result == RESULT_P1_WIN:
            return self.p1
        if self.result == RESULT_P2_WIN:
            return self.p2
        return None

    def display_names(self) -> List[str]:
        """Player names, or the source labels for slots not yet seeded."""
        return [self.p1 or self.p1_source, self.p2 or self.p2_source]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.stage_type,
            "p1": self.p1,
            "p2": self.p2,
            "result": self.result,
            "p1Source": self.p1_source,
            "p2Source": self.p2_source,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FinalMatch":
        return cls(
            p1_source=data.get("p1Source", ""),
            p2_source=data.get("p2Source", ""),
            p1=data.get("p1"),
            p2=data.get("p2"),
            result=result_from_dict(data),
        )


@dataclass
class FinalRoundRobin:
    """Round robin among three or more group winners.

    Mirrors :class:`~gambitgroups.models.tournament.GroupData`; ``players``
    stays empty until the group stage finishes.
    """

    stage_type: ClassVar[str] = FINAL_STAGE_ROUND_ROBIN

    players: Players = field(default_factory=list)
    schedule: Schedule = field(default_factory=dict)
    standings: Standings = field(default_factory=dict)
    previous_rank_order: Optional[List[str]] = None

    @property
    def is_seeded(self) -> bool:
        return bool(self.players)

    @property
    def is_complete(self) -> bool:
        return self.is_seeded and all_matches_played(self.schedule)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "type": self.stage_type,
            "players": list(self.players),
            "schedule": schedule_to_dict(self.schedule),
            "standings": {name: s.to_dict() for name, s in self.standings.items()},
        }
        if self.previous_rank_order is not None:
            data["previousRankOrder"] = list(self.previous_rank_order)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FinalRoundRobin":
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


FinalStage = Union[NoFinalStage, FinalMatch, FinalRoundRobin]


def final_stage_from_dict(data: Dict[str, Any]) -> FinalStage:
    """Deserialize whichever final stage variant ``data`` describes.

    Raises:
        InvalidInputError: If the ``type`` discriminator is unknown
    """
    stage_type = data.get("type")
    if stage_type == FINAL_STAGE_NONE:
        return NoFinalStage()
    if stage_type == FINAL_STAGE_MATCH:
        return FinalMatch.from_dict(data)
    if stage_type == FINAL_STAGE_ROUND_ROBIN:
        return FinalRoundRobin.from_dict(data)
    raise InvalidInputError(f"Unknown final stage type: {stage_type!r}")
