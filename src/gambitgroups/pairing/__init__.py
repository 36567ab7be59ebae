"""Pairing systems."""

from gambitgroups.pairing.round_robin import (
    bye_player_for_round,
    byes_by_round,
    generate_round_robin_schedule,
    number_of_rounds,
)

__all__ = [
    "generate_round_robin_schedule",
    "number_of_rounds",
    "bye_player_for_round",
    "byes_by_round",
]
