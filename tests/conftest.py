import random
from datetime import datetime

import pytest
from dateutil.tz import tzutc

from gambitgroups.controllers.tournament import create_tournament, record_group_result
from gambitgroups.models.tournament import Tournament, iter_matches

START_TIME = datetime(2025, 3, 1, 14, 0, 0, tzinfo=tzutc())


def build_tournament(num_players, group_sizes, seed=7):
    players = [f"Player {i + 1:02d}" for i in range(num_players)]
    return create_tournament(
        "Club Championship",
        players,
        group_sizes,
        rng=random.Random(seed),
        tournament_id="t-1",
        start_time=START_TIME,
    )


def play_group(tournament: Tournament, group_id: str, result="p1_win") -> Tournament:
    """Record ``result`` for every unplayed match of a group."""
    schedule = tournament.groups[group_id].schedule
    for round_index in sorted(schedule):
        for match_index, match in enumerate(schedule[round_index]):
            if match.result is None:
                tournament = record_group_result(
                    tournament, group_id, round_index, match_index, result
                )
    return tournament


def play_all_groups(tournament: Tournament, result="p1_win") -> Tournament:
    for group_id in tournament.group_ids:
        tournament = play_group(tournament, group_id, result)
    return tournament


def unplayed_count(schedule) -> int:
    return sum(1 for m in iter_matches(schedule) if m.result is None)


@pytest.fixture
def single_group_tournament():
    return build_tournament(4, [4])


@pytest.fixture
def two_group_tournament():
    return build_tournament(7, [4, 3])


@pytest.fixture
def three_group_tournament():
    return build_tournament(9, [3, 3, 3])
