"""Type hints used in Gambit Groups."""

from typing import TYPE_CHECKING, Dict, List, Literal, Optional

if TYPE_CHECKING:
    from gambitgroups.models.tournament import Match, Standing

# Players are identified by their (unique) name
PlayerName = str
Players = List[PlayerName]
MaybePlayer = Optional[PlayerName]

# Group identifiers: "A", "B", "C", ...
GroupId = str

# Result literals (for type hints)
ResultKey = Literal["p1_win", "p2_win", "draw"]
FinalStageKind = Literal["none", "final_match", "round_robin"]

# Round index (0-based) -> matches of that round
Schedule = Dict[int, List["Match"]]
Standings = Dict[PlayerName, "Standing"]
# One grouping plan, sizes sorted descending
GroupingOption = List[int]

#  LocalWords:  GroupingOption
