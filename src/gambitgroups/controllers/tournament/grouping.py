"""Splitting the player list into groups."""

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
from typing import List, Optional, Sequence

from gambitgroups.constants import MAX_GROUP_SIZE, MIN_GROUP_SIZE
from gambitgroups.exceptions import InvalidGroupingError
from gambitgroups.type_hints import GroupingOption, Players
from gambitgroups.utils import setup_logger

logger = setup_logger(__name__)


def compute_grouping_options(player_count: int) -> List[GroupingOption]:
    """List every way to split ``player_count`` players into groups.

    Group sizes stay within MIN_GROUP_SIZE..MAX_GROUP_SIZE. Each option is
    sorted largest group first; options with fewer groups come first, then
    those with the larger biggest group.

    Args:
        player_count: Number of players entered

    Returns:
        Grouping options; empty when no split exists
    """
    results: List[GroupingOption] = []

    def find(target: int, path: List[int], smallest: int) -> None:
        if target == 0:
            results.append(sorted(path, reverse=True))
            return
        # non-decreasing parts, so each multiset is produced once
        for size in range(smallest, min(target, MAX_GROUP_SIZE) + 1):
            path.append(size)
            find(target - size, path, size)
            path.pop()

    if player_count >= MIN_GROUP_SIZE:
        find(player_count, [], MIN_GROUP_SIZE)

    results.sort(key=lambda option: (len(option), -option[0]))
    return results


def validate_grouping(player_count: int, group_sizes: Sequence[int]) -> None:
    """Check that ``group_sizes`` is a usable split of ``player_count`` players.

    Raises:
        InvalidGroupingError: If the sizes are empty, out of range or do not
            add up to the player count
    """
    if not group_sizes:
        raise InvalidGroupingError("At least one group is required")

    out_of_range = [
        s for s in group_sizes if not MIN_GROUP_SIZE <= s <= MAX_GROUP_SIZE
    ]
    if out_of_range:
        raise InvalidGroupingError(
            f"Group sizes must be between {MIN_GROUP_SIZE} and {MAX_GROUP_SIZE}, "
            f"got {out_of_range}"
        )

    if sum(group_sizes) != player_count:
        raise InvalidGroupingError(
            f"Group sizes {list(group_sizes)} add up to {sum(group_sizes)}, "
            f"but there are {player_count} players"
        )


def assign_groups(
    players: Players,
    group_sizes: Sequence[int],
    rng: Optional[random.Random] = None,
) -> List[Players]:
    """Shuffle the players once and cut the list into consecutive groups.

    Args:
        players: All players of the tournament
        group_sizes: Size of each group, in group order (A, B, ...)
        rng: Random source; pass a seeded ``random.Random`` for a
            reproducible draw

    Returns:
        One player list per group
    """
    validate_grouping(len(players), group_sizes)

    if rng is None:
        rng = random.Random()
    shuffled = list(players)
    rng.shuffle(shuffled)

    groups: List[Players] = []
    start = 0
    for size in group_sizes:
        groups.append(shuffled[start : start + size])
        start += size

    logger.debug(f"Drew {len(players)} players into groups of {list(group_sizes)}")
    return groups


def group_id_for_index(index: int) -> str:
    """Group letters for a 0-based group index: 0 -> "A", 25 -> "Z", 26 -> "AA"."""
    letters = ""
    index += 1
    while index:
        index, remainder = divmod(index - 1, 26)
        letters = chr(ord("A") + remainder) + letters
    return letters


def format_grouping_option(option: Sequence[int]) -> str:
    """Human readable label, e.g. ``[6, 3]`` -> "1 group of 6 and 1 group of 3"."""
    counts = {}
    for size in option:
        counts[size] = counts.get(size, 0) + 1

    parts = [
        f"{count} group{'s' if count > 1 else ''} of {size}"
        for size, count in sorted(counts.items(), reverse=True)
    ]
    return " and ".join(parts)
