"""Moving group winners into the final stage.

Advancement is retried after every group result and must be idempotent:
once a final stage is seeded it is never re-seeded.
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

import copy
from enum import Enum
from typing import List, Optional

from gambitgroups.exceptions import InconsistentStateError
from gambitgroups.models.tournament import (
    FinalMatch,
    FinalRoundRobin,
    FinalStage,
    NoFinalStage,
    Tournament,
)
from gambitgroups.pairing import generate_round_robin_schedule
from gambitgroups.utils import setup_logger

from .standings_calculator import empty_standings, group_winner, rank_order

logger = setup_logger(__name__)


class AdvancementState(Enum):
    """Progress of a tournament towards its champion."""

    NOT_READY = "not_ready"
    READY_UNSEEDED = "ready_unseeded"
    SEEDED = "seeded"
    COMPLETE = "complete"


def all_group_matches_played(tournament: Tournament) -> bool:
    """True once every match of every group has a result."""
    return all(group.is_complete for group in tournament.groups.values())


def group_winners(tournament: Tournament) -> List[str]:
    """Winner of each group, ordered by group id."""
    winners = []
    for group_id in tournament.group_ids:
        winner = group_winner(tournament.groups[group_id])
        if winner is not None:
            winners.append(winner)
    return winners


def _unknown_stage(final_stage: FinalStage) -> InconsistentStateError:
    logger.error(f"Unknown final stage: {final_stage!r}")
    return InconsistentStateError(f"Unknown final stage: {type(final_stage).__name__}")


def advancement_state(tournament: Tournament) -> AdvancementState:
    """Where the tournament stands on the way to a champion."""
    if not all_group_matches_played(tournament):
        return AdvancementState.NOT_READY

    final_stage = tournament.final_stage
    if isinstance(final_stage, NoFinalStage):
        return AdvancementState.COMPLETE
    if isinstance(final_stage, FinalMatch):
        if not final_stage.is_seeded:
            return AdvancementState.READY_UNSEEDED
        if final_stage.result is None:
            return AdvancementState.SEEDED
        return AdvancementState.COMPLETE
    if isinstance(final_stage, FinalRoundRobin):
        if not final_stage.is_seeded:
            return AdvancementState.READY_UNSEEDED
        if not final_stage.is_complete:
            return AdvancementState.SEEDED
        return AdvancementState.COMPLETE
    raise _unknown_stage(final_stage)


def advance_to_final_stage(tournament: Tournament) -> Tournament:
    """Seed the final stage once the whole group stage has been played.

    Args:
        tournament: Current tournament record (left untouched)

    Returns:
        A new tournament; equal to the input when there is nothing to do

    Raises:
        InconsistentStateError: If the number of group winners does not fit
            the final stage variant
    """
    updated = copy.deepcopy(tournament)
    if not all_group_matches_played(updated):
        return updated

    final_stage = updated.final_stage
    if isinstance(final_stage, NoFinalStage):
        return updated

    winners = group_winners(updated)

    if isinstance(final_stage, FinalMatch):
        if final_stage.is_seeded:
            return updated
        if len(winners) != 2:
            logger.error(
                f"Final match needs 2 group winners, tournament {updated.name!r} "
                f"has {len(winners)}"
            )
            raise InconsistentStateError(
                f"Final match needs exactly 2 group winners, got {len(winners)}"
            )
        final_stage.p1, final_stage.p2 = winners
        logger.info(f"Seeded final match: {final_stage.p1} vs {final_stage.p2}")
        return updated

    if isinstance(final_stage, FinalRoundRobin):
        if final_stage.is_seeded:
            return updated
        if len(winners) < 3:
            logger.error(
                f"Final round robin needs 3+ group winners, tournament "
                f"{updated.name!r} has {len(winners)}"
            )
            raise InconsistentStateError(
                f"Final round robin needs at least 3 group winners, got {len(winners)}"
            )
        final_stage.players = winners
        final_stage.schedule = generate_round_robin_schedule(winners)
        final_stage.standings = empty_standings(winners)
        final_stage.previous_rank_order = None
        logger.info(f"Seeded final round robin with {', '.join(winners)}")
        return updated

    raise _unknown_stage(final_stage)


def tournament_champion(tournament: Tournament) -> Optional[str]:
    """The tournament winner, or None while undecided.

    A drawn final match has no single champion.
    """
    if advancement_state(tournament) is not AdvancementState.COMPLETE:
        return None

    final_stage = tournament.final_stage
    if isinstance(final_stage, NoFinalStage):
        winners = group_winners(tournament)
        return winners[0] if winners else None
    if isinstance(final_stage, FinalMatch):
        return final_stage.winner
    if isinstance(final_stage, FinalRoundRobin):
        ranking = rank_order(final_stage.standings, final_stage.schedule)
        return ranking[0] if ranking else None
    raise _unknown_stage(final_stage)
