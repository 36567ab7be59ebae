"""Round Robin Pairing System Implementation.

Uses the circle method: the first player stays fixed while everyone else
rotates one seat per round.
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

from gambitgroups.constants import BYE_PLACEHOLDER
from gambitgroups.models.tournament import Match
from gambitgroups.type_hints import MaybePlayer, Players, Schedule


def number_of_rounds(num_players: int) -> int:
    """Rounds needed for everyone to meet once; zero for fewer than two players."""
    if num_players < 2:
        return 0
    return num_players + (num_players % 2) - 1


def generate_round_robin_schedule(player_names: Sequence[str]) -> Schedule:
    """Build a single round robin for ``player_names``.

    The schedule only depends on the input order; shuffle beforehand for a
    random draw. With an odd player count each round leaves out one player
    (the bye) and every player sits out exactly once.

    Parameters
    ----------
        player_names: Players in seeding order

    Returns
    -------
        Round index (0-based) to the matches of that round
    """
    players: List[str] = list(player_names)
    if len(players) < 2:
        return {}
    if len(players) % 2 != 0:
        players.append(BYE_PLACEHOLDER)

    half_size = len(players) // 2
    schedule: Schedule = {}
    for round_index in range(len(players) - 1):
        round_matches: List[Match] = []
        for i in range(half_size):
            p1 = players[i]
            p2 = players[len(players) - 1 - i]
            if p1 != BYE_PLACEHOLDER and p2 != BYE_PLACEHOLDER:
                round_matches.append(Match(p1=p1, p2=p2))
        schedule[round_index] = round_matches

        # index 0 stays put, the last player moves to seat 1
        players.insert(1, players.pop())

    return schedule


def bye_player_for_round(
    players: Players, round_matches: Sequence[Match]
) -> MaybePlayer:
    """Return the player without a game in this round, if any."""
    playing = {name for match in round_matches for name in (match.p1, match.p2)}
    resting = [p for p in players if p not in playing]
    return resting[0] if resting else None


def byes_by_round(players: Players, schedule: Schedule) -> List[Optional[str]]:
    """Bye player of each round, in round order."""
    return [
        bye_player_for_round(players, schedule[round_index])
        for round_index in sorted(schedule)
    ]
