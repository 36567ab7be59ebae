import copy
import random

import pytest
from conftest import START_TIME, build_tournament, play_all_groups, unplayed_count

from gambitgroups.exceptions import (
    InvalidGroupingError,
    InvalidInputError,
    TournamentStateError,
)
from gambitgroups.models.tournament import FinalMatch, FinalRoundRobin, NoFinalStage
from gambitgroups.tournament import (
    compute_grouping_options,
    create_tournament,
    record_final_stage_result,
    record_group_result,
    sort_standings,
)

# ========== create_tournament ==========


@pytest.mark.parametrize(
    "num_players, sizes, stage_type",
    [
        (5, [5], NoFinalStage),
        (9, [5, 4], FinalMatch),
        (9, [3, 3, 3], FinalRoundRobin),
        (16, [4, 4, 4, 4], FinalRoundRobin),
    ],
)
def test_final_stage_shape_follows_group_count(num_players, sizes, stage_type):
    t = build_tournament(num_players, sizes)
    assert isinstance(t.final_stage, stage_type)
    assert t.group_ids == [chr(ord("A") + i) for i in range(len(sizes))]


def test_groups_partition_the_players():
    t = build_tournament(13, [5, 4, 4])
    members = [p for gid in t.group_ids for p in t.groups[gid].players]

    assert sorted(members) == sorted(t.players)
    assert len(members) == len(set(members))
    assert [len(t.groups[gid].players) for gid in t.group_ids] == [5, 4, 4]


def test_new_groups_have_schedules_and_empty_standings():
    t = build_tournament(9, [5, 4])
    group_a, group_b = t.groups["A"], t.groups["B"]

    assert len(group_a.schedule) == 5
    assert len(group_b.schedule) == 3
    assert unplayed_count(group_a.schedule) == 10
    assert set(group_a.standings) == set(group_a.players)
    assert all(s.points == 0 for s in group_a.standings.values())
    assert group_a.previous_rank_order is None


def test_create_keeps_given_id_and_time():
    t = build_tournament(4, [4])
    assert t.id == "t-1"
    assert t.start_time == START_TIME
    assert t.name == "Club Championship"


def test_create_generates_an_id():
    t1 = create_tournament("Open", ["A", "B", "C"], [3])
    t2 = create_tournament("Open", ["A", "B", "C"], [3])
    assert t1.id and t2.id and t1.id != t2.id
    assert t1.start_time.tzinfo is not None


def test_player_order_is_kept_on_the_record():
    names = ["Zoe", "Yan", "Xia", "Wes", "Val", "Uma"]
    t = create_tournament("Open", names, [3, 3], rng=random.Random(1))
    assert t.players == names


@pytest.mark.parametrize("name", ["", "   ", None])
def test_tournament_name_is_required(name):
    with pytest.raises(InvalidInputError):
        create_tournament(name, ["A", "B", "C"], [3])


def test_player_names_are_required():
    with pytest.raises(InvalidInputError):
        create_tournament("Open", ["A", " ", "C"], [3])
    with pytest.raises(InvalidInputError):
        create_tournament("Open", [], [3])


@pytest.mark.parametrize(
    "num_players, sizes", [(4, [2, 2]), (7, [7]), (3, []), (10, [4, 4, 2])]
)
def test_grouping_must_fit_the_players(num_players, sizes):
    players = [f"P{i}" for i in range(num_players)]
    with pytest.raises(InvalidGroupingError):
        create_tournament("Open", players, sizes)


def test_grouping_sum_mismatch():
    with pytest.raises(InvalidGroupingError):
        create_tournament("Open", [f"P{i}" for i in range(9)], [3, 3])


def test_every_listed_option_creates_a_tournament():
    players = [f"P{i}" for i in range(12)]
    for option in compute_grouping_options(len(players)):
        t = create_tournament("Open", players, option, rng=random.Random(0))
        assert [len(t.groups[g].players) for g in t.group_ids] == option


# ========== record_group_result ==========


def test_recording_updates_standings():
    t = build_tournament(4, [4])
    match = t.groups["A"].schedule[0][0]

    updated = record_group_result(t, "A", 0, 0, "p1_win")
    standings = updated.groups["A"].standings
    assert updated.groups["A"].schedule[0][0].result == "p1_win"
    assert standings[match.p1].wins == 1
    assert standings[match.p2].losses == 1
    assert standings[match.p1].points == 1.0


def test_recording_does_not_touch_the_input():
    t = build_tournament(7, [4, 3])
    snapshot = copy.deepcopy(t.to_dict())

    updated = record_group_result(t, "B", 1, 0, "draw")
    assert t.to_dict() == snapshot
    assert updated is not t
    assert updated.groups["B"] is not t.groups["B"]


def test_previous_rank_order_is_captured_before_the_result():
    t = build_tournament(4, [4])
    group = t.groups["A"]
    before = [s.name for s in sort_standings(group.standings, group.schedule)]

    t = record_group_result(t, "A", 0, 1, "p2_win")
    assert t.groups["A"].previous_rank_order == before

    after_first = [
        s.name for s in sort_standings(t.groups["A"].standings, t.groups["A"].schedule)
    ]
    t = record_group_result(t, "A", 1, 0, "draw")
    assert t.groups["A"].previous_rank_order == after_first


def test_rerecording_recomputes_from_scratch():
    t = build_tournament(4, [4])
    match = t.groups["A"].schedule[0][0]

    t = record_group_result(t, "A", 0, 0, "p1_win")
    t = record_group_result(t, "A", 0, 0, "p2_win")
    standings = t.groups["A"].standings
    assert (standings[match.p1].wins, standings[match.p1].losses) == (0, 1)
    assert (standings[match.p2].wins, standings[match.p2].losses) == (1, 0)


@pytest.mark.parametrize(
    "group_id, round_index, match_index",
    [("Z", 0, 0), ("A", 3, 0), ("A", -1, 0), ("A", 0, 2), ("A", 0, -1), ("A", "0", 0)],
)
def test_bad_match_coordinates(group_id, round_index, match_index):
    t = build_tournament(4, [4])
    with pytest.raises(InvalidInputError):
        record_group_result(t, group_id, round_index, match_index, "p1_win")


@pytest.mark.parametrize("result", ["win", None, "1-0", ""])
def test_bad_result_value(result):
    t = build_tournament(4, [4])
    with pytest.raises(InvalidInputError):
        record_group_result(t, "A", 0, 0, result)


def test_last_group_result_seeds_the_final():
    t = build_tournament(6, [3, 3])
    t = play_all_groups(t)
    assert t.final_stage.is_seeded


# ========== record_final_stage_result ==========


def test_no_final_stage_rejects_final_results():
    t = play_all_groups(build_tournament(4, [4]))
    with pytest.raises(InvalidInputError):
        record_final_stage_result(t, "p1_win")


def test_final_match_rejects_indices():
    t = play_all_groups(build_tournament(6, [3, 3]))
    with pytest.raises(InvalidInputError):
        record_final_stage_result(t, "p1_win", 0, 0)
    with pytest.raises(InvalidInputError):
        record_final_stage_result(t, "p1_win", round_index=0)


def test_unseeded_final_match_rejects_results():
    t = build_tournament(6, [3, 3])
    with pytest.raises(TournamentStateError):
        record_final_stage_result(t, "p1_win")


def test_final_round_robin_needs_indices():
    t = play_all_groups(build_tournament(9, [3, 3, 3]))
    with pytest.raises(InvalidInputError):
        record_final_stage_result(t, "p1_win")
    with pytest.raises(InvalidInputError):
        record_final_stage_result(t, "p1_win", 0)
    with pytest.raises(InvalidInputError):
        record_final_stage_result(t, "p1_win", 5, 0)


def test_unseeded_final_round_robin_rejects_results():
    t = build_tournament(9, [3, 3, 3])
    with pytest.raises(TournamentStateError):
        record_final_stage_result(t, "p1_win", 0, 0)


def test_final_round_robin_tracks_standings_and_rank_order():
    t = play_all_groups(build_tournament(9, [3, 3, 3]))
    match = t.final_stage.schedule[0][0]

    updated = record_final_stage_result(t, "p2_win", 0, 0)
    final_stage = updated.final_stage
    assert final_stage.standings[match.p2].wins == 1
    assert final_stage.standings[match.p1].losses == 1
    assert final_stage.previous_rank_order == final_stage.players
    assert t.final_stage.schedule[0][0].result is None


def test_final_match_result_can_be_corrected():
    t = play_all_groups(build_tournament(6, [3, 3]))
    t = record_final_stage_result(t, "p1_win")
    t = record_final_stage_result(t, "p2_win")
    assert t.final_stage.result == "p2_win"
    assert t.final_stage.winner == t.final_stage.p2


def test_more_than_26_groups_keep_creation_order():
    t = play_all_groups(build_tournament(84, [3] * 28))

    assert t.group_ids[:2] == ["A", "B"]
    assert t.group_ids[-3:] == ["Z", "AA", "AB"]
    assert isinstance(t.final_stage, FinalRoundRobin)
    assert t.final_stage.players == [
        sort_standings(t.groups[gid].standings, t.groups[gid].schedule)[0].name
        for gid in t.group_ids
    ]
