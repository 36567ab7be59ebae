"""Creating a tournament: group draw, schedules and final stage shape."""

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

import random
import uuid
from datetime import datetime
from typing import Dict, Optional, Sequence

from gambitgroups.constants import WINNER_SOURCE_LABEL
from gambitgroups.exceptions import InvalidInputError
from gambitgroups.models.tournament import (
    FinalMatch,
    FinalRoundRobin,
    FinalStage,
    GroupData,
    NoFinalStage,
    Tournament,
)
from gambitgroups.pairing import generate_round_robin_schedule
from gambitgroups.type_hints import GroupId, Players
from gambitgroups.utils import setup_logger, utc_now

from .grouping import assign_groups, group_id_for_index
from .standings_calculator import empty_standings

logger = setup_logger(__name__)


def create_group(players: Players) -> GroupData:
    """A fresh group: full schedule, zeroed standings."""
    return GroupData(
        players=list(players),
        schedule=generate_round_robin_schedule(players),
        standings=empty_standings(players),
    )


def create_final_stage(group_ids: Sequence[GroupId]) -> FinalStage:
    """Pick the final stage variant for the number of groups."""
    if len(group_ids) <= 1:
        return NoFinalStage()
    if len(group_ids) == 2:
        return FinalMatch(
            p1_source=WINNER_SOURCE_LABEL.format(group_id=group_ids[0]),
            p2_source=WINNER_SOURCE_LABEL.format(group_id=group_ids[1]),
        )
    return FinalRoundRobin()


def create_tournament(
    name: str,
    player_names: Sequence[str],
    group_sizes: Sequence[int],
    rng: Optional[random.Random] = None,
    tournament_id: Optional[str] = None,
    start_time: Optional[datetime] = None,
) -> Tournament:
    """Create a tournament and draw its groups.

    Args:
        name: Tournament name
        player_names: Every player, in entry order
        group_sizes: Chosen grouping option, e.g. ``[5, 4]``
        rng: Random source for the group draw
        tournament_id: Identifier to use; a random one is generated otherwise
        start_time: Creation time; defaults to now (UTC)

    Returns:
        New tournament with every group schedule generated

    Raises:
        InvalidInputError: If the tournament or a player name is missing
        InvalidGroupingError: If ``group_sizes`` does not fit the players
    """
    if not name or not name.strip():
        raise InvalidInputError("Tournament name is required")
    if not player_names:
        raise InvalidInputError("At least one player is required")
    blank = [i for i, p in enumerate(player_names) if not p or not p.strip()]
    if blank:
        raise InvalidInputError(f"Player names are required (missing at {blank})")

    players = [p.strip() for p in player_names]
    drawn = assign_groups(players, group_sizes, rng=rng)

    groups: Dict[GroupId, GroupData] = {}
    for index, group_players in enumerate(drawn):
        groups[group_id_for_index(index)] = create_group(group_players)

    tournament = Tournament(
        id=tournament_id or uuid.uuid4().hex,
        name=name.strip(),
        players=players,
        groups=groups,
        final_stage=create_final_stage(list(groups)),
        start_time=start_time or utc_now(),
    )
    logger.info(
        f"Created tournament {tournament.name!r} ({tournament.id}): "
        f"{len(players)} players in groups {list(group_sizes)}, "
        f"final stage: {tournament.final_stage.stage_type}"
    )
    return tournament
