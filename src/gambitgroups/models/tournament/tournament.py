"""Tournament record - the single value the engine reads and returns."""

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
from datetime import datetime
from typing import Any, Dict, List, Union

from dateutil.parser import isoparse
from dateutil.tz import tzutc

from gambitgroups.exceptions import InvalidInputError
from gambitgroups.type_hints import GroupId, Players
from gambitgroups.utils import utc_now

from .final_stage import FinalStage, NoFinalStage, final_stage_from_dict
from .group_data import GroupData


@dataclass
class Tournament:
    """A group-stage tournament with its optional final stage.

    Attributes
    ----------
    id : str
        Identifier used by the storage layer.
    name : str
        Tournament name.
    players : list of str
        Every player, in the order they were entered.
    groups : dict of str to GroupData
        Groups keyed "A", "B", ... in creation order.
    final_stage : FinalStage
        ``NoFinalStage``, ``FinalMatch`` or ``FinalRoundRobin``.
    start_time : datetime
        When the tournament was created (aware, UTC).
    """

    id: str
    name: str
    players: Players
    groups: Dict[GroupId, GroupData]
    final_stage: FinalStage = field(default_factory=NoFinalStage)
    start_time: datetime = field(default_factory=utc_now)

    @property
    def group_ids(self) -> List[GroupId]:
        """Group ids in creation order: "A" .. "Z", then "AA", "AB", ..."""
        return sorted(self.groups, key=lambda group_id: (len(group_id), group_id))

    def get_group(self, group_id: GroupId) -> GroupData:
        """Look up a group.

        Raises:
            InvalidInputError: If the group does not exist
        """
        try:
            return self.groups[group_id]
        except KeyError:
            raise InvalidInputError(
                f"Tournament {self.name!r} has no group {group_id!r}"
            ) from None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary.

        Returns:
            Dictionary in the record shape used by the storage layer
        """
        return {
            "id": self.id,
            "name": self.name,
            "players": list(self.players),
            "groups": {gid: self.groups[gid].to_dict() for gid in self.group_ids},
            "finalStage": self.final_stage.to_dict(),
            "startTime": self.start_time.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary.

        Args:
            data: Dictionary containing tournament data

        Returns:
            Reconstructed Tournament object
        """
        start_time = data.get("startTime")
        return cls(
            id=data["id"],
            name=data["name"],
            players=list(data.get("players", [])),
            groups={
                gid: GroupData.from_dict(g) for gid, g in data.get("groups", {}).items()
            },
            final_stage=final_stage_from_dict(
                data.get("finalStage", {"type": NoFinalStage.stage_type})
            ),
            start_time=_parse_start_time(start_time) if start_time else utc_now(),
        )


def _parse_start_time(value: Union[str, int, float]) -> datetime:
    # Older records store epoch milliseconds
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000, tz=tzutc())
    try:
        parsed = isoparse(value)
    except ValueError as e:
        raise InvalidInputError(f"Invalid startTime: {value!r}") from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tzutc())
    return parsed
