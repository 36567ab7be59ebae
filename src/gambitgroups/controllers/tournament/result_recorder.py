"""Result recording for group and final stage matches.

Every call works on a deep copy: the tournament passed in is never modified,
and nothing is returned unless the whole update succeeded.
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
from typing import Optional, Union

from gambitgroups.exceptions import (
    InconsistentStateError,
    InvalidInputError,
    TournamentStateError,
)
from gambitgroups.models.tournament import (
    VALID_RESULTS,
    FinalMatch,
    FinalRoundRobin,
    GroupData,
    Match,
    NoFinalStage,
    Tournament,
)
from gambitgroups.type_hints import GroupId, ResultKey
from gambitgroups.utils import setup_logger

from .advancement import advance_to_final_stage
from .standings_calculator import calculate_standings, rank_order

logger = setup_logger(__name__)


def _validate_result(result: str) -> None:
    if result not in VALID_RESULTS:
        raise InvalidInputError(
            f"Invalid result {result!r}; expected one of {', '.join(VALID_RESULTS)}"
        )


def _locate_match(
    stage: Union[GroupData, FinalRoundRobin],
    round_index: int,
    match_index: int,
    label: str,
) -> Match:
    """Find a scheduled match by its coordinates.

    Raises:
        InvalidInputError: If the round or match does not exist
    """
    if isinstance(round_index, bool) or not isinstance(round_index, int):
        raise InvalidInputError(f"Round index must be an integer, got {round_index!r}")
    if isinstance(match_index, bool) or not isinstance(match_index, int):
        raise InvalidInputError(f"Match index must be an integer, got {match_index!r}")

    round_matches = stage.schedule.get(round_index)
    if round_matches is None:
        raise InvalidInputError(f"{label} has no round {round_index}")
    if not 0 <= match_index < len(round_matches):
        raise InvalidInputError(
            f"{label} round {round_index} has no match {match_index}"
        )
    return round_matches[match_index]


def _apply_result(
    stage: Union[GroupData, FinalRoundRobin],
    round_index: int,
    match_index: int,
    result: str,
    label: str,
) -> None:
    match = _locate_match(stage, round_index, match_index, label)
    if match.result is not None and match.result != result:
        logger.warning(
            f"{label}: overwriting result {match.result} with {result} "
            f"for {match.p1} vs {match.p2}"
        )

    stage.previous_rank_order = rank_order(stage.standings, stage.schedule)
    match.result = result
    stage.standings = calculate_standings(stage.players, stage.schedule)
    logger.info(f"{label}: recorded {match.p1} vs {match.p2} -> {result}")


def record_group_result(
    tournament: Tournament,
    group_id: GroupId,
    round_index: int,
    match_index: int,
    result: ResultKey,
) -> Tournament:
    """Record (or correct) the result of a group match.

    Args:
        tournament: Current tournament record (left untouched)
        group_id: Group letter, e.g. "A"
        round_index: Round index (0-indexed)
        match_index: Position of the match within the round (0-indexed)
        result: "p1_win", "p2_win" or "draw"

    Returns:
        Updated tournament with fresh standings, advanced to the final
        stage when the group stage is now complete

    Raises:
        InvalidInputError: If the match coordinates or result are invalid
    """
    _validate_result(result)

    updated = copy.deepcopy(tournament)
    group = updated.get_group(group_id)
    _apply_result(group, round_index, match_index, result, f"Group {group_id}")

    final_stage = updated.final_stage
    if not isinstance(final_stage, NoFinalStage) and final_stage.is_seeded:
        logger.warning(
            f"Group {group_id} changed after the final stage was seeded; "
            "the final stage is kept as is"
        )

    return advance_to_final_stage(updated)


def record_final_stage_result(
    tournament: Tournament,
    result: ResultKey,
    round_index: Optional[int] = None,
    match_index: Optional[int] = None,
) -> Tournament:
    """Record (or correct) a final stage result.

    Args:
        tournament: Current tournament record (left untouched)
        result: "p1_win", "p2_win" or "draw"
        round_index: Round of the final round robin; must be omitted for a
            final match
        match_index: Match within that round; must be omitted for a final
            match

    Returns:
        Updated tournament

    Raises:
        InvalidInputError: If the arguments do not fit the final stage variant
        TournamentStateError: If the final stage has not been seeded yet
    """
    _validate_result(result)

    updated = copy.deepcopy(tournament)
    final_stage = updated.final_stage

    if isinstance(final_stage, NoFinalStage):
        raise InvalidInputError(f"Tournament {updated.name!r} has no final stage")

    if isinstance(final_stage, FinalMatch):
        if round_index is not None or match_index is not None:
            raise InvalidInputError("A final match takes no round or match index")
        if not final_stage.is_seeded:
            raise TournamentStateError(
                "The final match is not seeded yet; finish the group stage first"
            )
        if final_stage.result is not None and final_stage.result != result:
            logger.warning(
                f"Final: overwriting result {final_stage.result} with {result}"
            )
        final_stage.result = result
        logger.info(f"Final: recorded {final_stage.p1} vs {final_stage.p2} -> {result}")
        return updated

    if isinstance(final_stage, FinalRoundRobin):
        if round_index is None or match_index is None:
            raise InvalidInputError(
                "A final round robin result needs both a round and a match index"
            )
        if not final_stage.is_seeded:
            raise TournamentStateError(
                "The final round robin is not seeded yet; finish the group stage first"
            )
        _apply_result(final_stage, round_index, match_index, result, "Final stage")
        return updated

    logger.error(f"Unknown final stage: {final_stage!r}")
    raise InconsistentStateError(f"Unknown final stage: {type(final_stage).__name__}")
