import pytest
from conftest import START_TIME, play_all_groups, play_group

from gambitgroups.controllers.tournament import (
    AdvancementState,
    advance_to_final_stage,
    advancement_state,
    create_group,
    group_winner,
    group_winners,
    record_final_stage_result,
    record_group_result,
    tournament_champion,
)
from gambitgroups.exceptions import InconsistentStateError
from gambitgroups.models.tournament import (
    FinalMatch,
    FinalRoundRobin,
    NoFinalStage,
    Tournament,
)


def test_single_group_has_no_final_stage(single_group_tournament):
    t = single_group_tournament
    assert isinstance(t.final_stage, NoFinalStage)
    assert advancement_state(t) is AdvancementState.NOT_READY
    assert tournament_champion(t) is None

    t = play_group(t, "A")
    assert isinstance(t.final_stage, NoFinalStage)
    assert advancement_state(t) is AdvancementState.COMPLETE
    assert tournament_champion(t) == group_winner(t.groups["A"])


def test_final_match_waits_for_every_group(two_group_tournament):
    t = play_group(two_group_tournament, "A")
    assert advancement_state(t) is AdvancementState.NOT_READY
    assert t.final_stage.p1 is None
    assert t.final_stage.p2 is None


def test_final_match_is_seeded_by_group_order(two_group_tournament):
    t = play_all_groups(two_group_tournament)

    assert advancement_state(t) is AdvancementState.SEEDED
    assert [t.final_stage.p1, t.final_stage.p2] == [
        group_winner(t.groups["A"]),
        group_winner(t.groups["B"]),
    ]
    assert t.final_stage.p1_source == "Winner Group A"
    assert t.final_stage.p2_source == "Winner Group B"


def test_final_match_result_decides_champion(two_group_tournament):
    t = play_all_groups(two_group_tournament)
    t = record_final_stage_result(t, "p2_win")

    assert advancement_state(t) is AdvancementState.COMPLETE
    assert tournament_champion(t) == t.final_stage.p2


def test_drawn_final_has_no_single_champion(two_group_tournament):
    t = play_all_groups(two_group_tournament)
    t = record_final_stage_result(t, "draw")

    assert advancement_state(t) is AdvancementState.COMPLETE
    assert tournament_champion(t) is None


def test_final_round_robin_is_seeded_with_group_winners(three_group_tournament):
    t = play_all_groups(three_group_tournament, result="draw")
    final_stage = t.final_stage

    assert isinstance(final_stage, FinalRoundRobin)
    assert advancement_state(t) is AdvancementState.SEEDED
    assert final_stage.players == group_winners(t)
    assert len(final_stage.players) == 3
    assert sorted(final_stage.schedule) == [0, 1, 2]
    assert all(s.games_played == 0 for s in final_stage.standings.values())


def test_final_round_robin_champion(three_group_tournament):
    t = play_all_groups(three_group_tournament)
    final_stage = t.final_stage
    for round_index in sorted(final_stage.schedule):
        for match_index, _ in enumerate(final_stage.schedule[round_index]):
            assert tournament_champion(t) is None
            t = record_final_stage_result(t, "p1_win", round_index, match_index)

    assert advancement_state(t) is AdvancementState.COMPLETE
    final_stage = t.final_stage
    # the first seed never plays as second player in a three-player circle
    assert tournament_champion(t) == final_stage.players[0]
    assert final_stage.standings[final_stage.players[0]].points == 2.0


def test_advancement_is_idempotent(two_group_tournament):
    t = play_all_groups(two_group_tournament)
    once = advance_to_final_stage(t)
    twice = advance_to_final_stage(once)
    assert once.final_stage == twice.final_stage == t.final_stage


def test_advancement_never_reseeds(three_group_tournament):
    t = play_all_groups(three_group_tournament)
    seeded_players = list(t.final_stage.players)
    t = record_final_stage_result(t, "draw", 0, 0)

    # correcting a group result after seeding leaves the final stage alone
    t = record_group_result(t, "A", 0, 0, "p2_win")
    assert t.final_stage.players == seeded_players
    assert t.final_stage.schedule[0][0].result == "draw"


def test_advancement_returns_a_copy(two_group_tournament):
    t = play_all_groups(two_group_tournament)
    advanced = advance_to_final_stage(t)
    assert advanced is not t
    assert advanced.final_stage is not t.final_stage


def _completed_groups(num_groups):
    groups = {}
    for index in range(num_groups):
        group_id = chr(ord("A") + index)
        players = [f"{group_id}{i}" for i in range(3)]
        group = create_group(players)
        for matches in group.schedule.values():
            for match in matches:
                match.result = "p1_win"
        groups[group_id] = group
    return groups


@pytest.mark.parametrize(
    "num_groups, final_stage",
    [
        (3, FinalMatch(p1_source="Winner Group A", p2_source="Winner Group B")),
        (2, FinalRoundRobin()),
    ],
)
def test_wrong_number_of_qualifiers_is_inconsistent(num_groups, final_stage):
    groups = _completed_groups(num_groups)
    t = Tournament(
        id="broken",
        name="Broken",
        players=[p for g in groups.values() for p in g.players],
        groups=groups,
        final_stage=final_stage,
        start_time=START_TIME,
    )
    with pytest.raises(InconsistentStateError):
        advance_to_final_stage(t)


def test_unplayed_group_stage_is_not_ready(three_group_tournament):
    assert advancement_state(three_group_tournament) is AdvancementState.NOT_READY
    assert advance_to_final_stage(three_group_tournament).final_stage.players == []
