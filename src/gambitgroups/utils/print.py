"""
Plain-text rendering of schedules, standings and whole tournaments.
Used by the command line interface.
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

from typing import List, Optional, Sequence

from gambitgroups.controllers.tournament import (
    RankMovement,
    advancement_state,
    format_grouping_option,
    rank_movements,
    sort_standings,
    tournament_champion,
)
from gambitgroups.exceptions import InconsistentStateError
from gambitgroups.models.tournament import (
    FinalMatch,
    FinalRoundRobin,
    Match,
    NoFinalStage,
    Tournament,
)
from gambitgroups.pairing import bye_player_for_round
from gambitgroups.type_hints import GroupingOption, Players, Schedule, Standings
from gambitgroups.utils import format_elapsed

RESULT_LABELS = {"p1_win": "1-0", "p2_win": "0-1", "draw": "½-½", None: "-"}
MOVEMENT_MARKS = {RankMovement.UP: "↑", RankMovement.DOWN: "↓", RankMovement.SAME: ""}


def format_match(match: Match) -> str:
    return f"{match.p1} vs {match.p2}  [{RESULT_LABELS[match.result]}]"


def format_grouping_options(options: Sequence[GroupingOption]) -> List[str]:
    """Numbered option lines, starting at 1."""
    return [
        f"{number}. {format_grouping_option(option)}  {list(option)}"
        for number, option in enumerate(options, 1)
    ]


def format_schedule(players: Players, schedule: Schedule) -> List[str]:
    lines = []
    for round_index in sorted(schedule):
        lines.append(f"--- Round {round_index + 1} ---")
        for match_index, match in enumerate(schedule[round_index], 1):
            lines.append(f"  {match_index}. {format_match(match)}")
        bye = bye_player_for_round(players, schedule[round_index])
        if bye is not None:
            lines.append(f"  BYE: {bye}")
    return lines


def format_standings(
    standings: Standings,
    schedule: Schedule,
    previous_rank_order: Optional[Sequence[str]] = None,
) -> List[str]:
    """Standings table with a rank movement mark after each name."""
    ranked = sort_standings(standings, schedule)
    movements = rank_movements([s.name for s in ranked], previous_rank_order)
    width = max([len(s.name) for s in ranked] + [6])

    lines = [f"{'#':>2}  {'Player':<{width}}  {'Pts':>4}  {'W':>2}  {'D':>2}  {'L':>2}"]
    for rank, s in enumerate(ranked, 1):
        name = f"{s.name}{MOVEMENT_MARKS[movements[s.name]]}"
        lines.append(
            f"{rank:>2}  {name:<{width}}  {s.points:>4g}  "
            f"{s.wins:>2}  {s.draws:>2}  {s.losses:>2}"
        )
    return lines


def format_final_stage(tournament: Tournament) -> List[str]:
    final_stage = tournament.final_stage
    if isinstance(final_stage, NoFinalStage):
        return []
    if isinstance(final_stage, FinalMatch):
        p1, p2 = final_stage.display_names()
        return [
            "=== Final ===",
            f"{p1} vs {p2}  [{RESULT_LABELS[final_stage.result]}]",
        ]
    if isinstance(final_stage, FinalRoundRobin):
        lines = ["=== Final round robin ==="]
        if not final_stage.is_seeded:
            lines.append("Waiting for the group stage to finish")
            return lines
        lines.extend(format_schedule(final_stage.players, final_stage.schedule))
        lines.extend(
            format_standings(
                final_stage.standings,
                final_stage.schedule,
                final_stage.previous_rank_order,
            )
        )
        return lines
    raise InconsistentStateError(
        f"Unknown final stage: {type(final_stage).__name__}"
    )


def format_tournament(tournament: Tournament) -> str:
    """Full text report of a tournament."""
    lines = [
        f"{tournament.name} ({tournament.id})",
        f"Elapsed time: {format_elapsed(tournament.start_time)}",
        f"Status: {advancement_state(tournament).value}",
        "",
    ]
    for group_id in tournament.group_ids:
        group = tournament.groups[group_id]
        lines.append(f"=== Group {group_id}: {', '.join(group.players)} ===")
        lines.extend(format_schedule(group.players, group.schedule))
        lines.extend(
            format_standings(group.standings, group.schedule, group.previous_rank_order)
        )
        lines.append("")

    final_lines = format_final_stage(tournament)
    if final_lines:
        lines.extend(final_lines)
        lines.append("")

    champion = tournament_champion(tournament)
    if champion is not None:
        lines.append(f"Champion: {champion}")
    return "\n".join(lines)
