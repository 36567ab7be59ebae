"""Standings and ranking for groups and final round robins.

Standings are always rebuilt from the full schedule so the win/draw/loss
counts can never drift from the recorded results.
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

import functools
from enum import Enum
from typing import Dict, List, Optional, Sequence, Union

from gambitgroups.constants import RESULT_DRAW, RESULT_P1_WIN, RESULT_P2_WIN
from gambitgroups.exceptions import InconsistentStateError
from gambitgroups.models.tournament import (
    FinalRoundRobin,
    GroupData,
    Match,
    Standing,
    iter_matches,
)
from gambitgroups.type_hints import Players, Schedule, Standings
from gambitgroups.utils import setup_logger

logger = setup_logger(__name__)


class RankMovement(Enum):
    """Change of a player's rank since the previous result."""

    UP = "up"
    DOWN = "down"
    SAME = "same"


def empty_standings(players: Players) -> Standings:
    """Zeroed standings for every player."""
    return {name: Standing(name=name) for name in players}


def calculate_standings(players: Players, schedule: Schedule) -> Standings:
    """Recompute every player's record from scratch.

    Args:
        players: Players of the group or final stage
        schedule: Full schedule, played and unplayed matches

    Returns:
        Player name to Standing, in ``players`` order

    Raises:
        InconsistentStateError: If a match names a player outside ``players``
    """
    standings = empty_standings(players)

    for match in iter_matches(schedule):
        if match.result is None:
            continue
        try:
            first = standings[match.p1]
            second = standings[match.p2]
        except KeyError as e:
            logger.error(f"Match {match.p1} vs {match.p2} names unknown player {e}")
            raise InconsistentStateError(
                f"Match {match.p1} vs {match.p2} involves a player outside the group"
            ) from None

        if match.result == RESULT_P1_WIN:
            first.wins += 1
            second.losses += 1
        elif match.result == RESULT_P2_WIN:
            second.wins += 1
            first.losses += 1
        elif match.result == RESULT_DRAW:
            first.draws += 1
            second.draws += 1
        else:
            raise InconsistentStateError(f"Unknown match result: {match.result!r}")

    return standings


def find_head_to_head(
    schedule: Schedule, player_a: str, player_b: str
) -> Optional[Match]:
    """First match between two players, searching all rounds in order."""
    for match in iter_matches(schedule):
        if match.is_between(player_a, player_b):
            return match
    return None


def _compare_standings(schedule: Schedule, a: Standing, b: Standing) -> int:
    """Order two standings: negative if ``a`` ranks higher.

    Points decide first, then a decided head-to-head game. Anything else is
    a tie and the stable sort keeps the input order.
    """
    if a.points != b.points:
        return -1 if a.points > b.points else 1

    match = find_head_to_head(schedule, a.name, b.name)
    if match is not None:
        winner = match.winner
        if winner == a.name:
            return -1
        if winner == b.name:
            return 1

    return 0


def sort_standings(
    standings: Union[Standings, Sequence[Standing]], schedule: Schedule
) -> List[Standing]:
    """Rank standings best to worst.

    Args:
        standings: Standings keyed by name, or already in a list
        schedule: Schedule the standings came from, used for head-to-head

    Returns:
        New list of standings; the input is not reordered
    """
    if isinstance(standings, dict):
        standings = list(standings.values())
    return sorted(
        standings,
        key=functools.cmp_to_key(functools.partial(_compare_standings, schedule)),
    )


def rank_order(standings: Standings, schedule: Schedule) -> List[str]:
    """Player names in ranking order."""
    return [s.name for s in sort_standings(standings, schedule)]


def group_winner(group: Union[GroupData, FinalRoundRobin]) -> Optional[str]:
    """Leader of a group (or final round robin); None without standings."""
    ranking = rank_order(group.standings, group.schedule)
    return ranking[0] if ranking else None


def rank_movements(
    current_order: Sequence[str], previous_order: Optional[Sequence[str]]
) -> Dict[str, RankMovement]:
    """Compare the current ranking to the one before the last result.

    Players absent from ``previous_order`` (or all players when there is
    no previous order) are reported as SAME.
    """
    movements: Dict[str, RankMovement] = {}
    previous_index = {name: i for i, name in enumerate(previous_order or [])}
    for current_rank, name in enumerate(current_order):
        previous_rank = previous_index.get(name)
        if previous_rank is None or previous_rank == current_rank:
            movements[name] = RankMovement.SAME
        elif current_rank < previous_rank:
            movements[name] = RankMovement.UP
        else:
            movements[name] = RankMovement.DOWN
    return movements
