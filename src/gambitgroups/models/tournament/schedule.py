"""Helpers for round-indexed match schedules."""

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

from typing import Any, Dict, Iterator, List

from gambitgroups.type_hints import Schedule

from .match import Match


def iter_matches(schedule: Schedule) -> Iterator[Match]:
    """Yield every match in round order, then board order."""
    for round_index in sorted(schedule):
        yield from schedule[round_index]


def all_matches_played(schedule: Schedule) -> bool:
    return all(match.is_played for match in iter_matches(schedule))


def schedule_to_dict(schedule: Schedule) -> Dict[str, List[Dict[str, Any]]]:
    """Serialize a schedule; JSON objects need string keys."""
    return {
        str(round_index): [m.to_dict() for m in schedule[round_index]]
        for round_index in sorted(schedule)
    }


def schedule_from_dict(data: Dict[str, Any]) -> Schedule:
    """Deserialize a schedule produced by :func:`schedule_to_dict`.

    Arrays of rounds are accepted as well as index-keyed objects.
    """
    if isinstance(data, list):
        items = enumerate(data)
    else:
        items = ((int(k), v) for k, v in data.items())
    return {
        round_index: [Match.from_dict(m) for m in matches]
        for round_index, matches in sorted(items)
    }
