"""Exceptions for use in Gambit-Groups"""

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


# ========== Base Application Exception ==========


class GambitGroupsException(Exception):
    """Base exception for all Gambit Groups errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Tournament Exceptions ==========


class TournamentException(GambitGroupsException):
    """Base exception for tournament-related errors."""

    pass


class InvalidGroupingError(TournamentException):
    """Raised when players cannot be partitioned into groups of 3 to 6."""

    pass


class InvalidInputError(TournamentException):
    """Raised for missing names, unknown match coordinates or bad result values."""

    pass


class TournamentStateError(TournamentException):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class InconsistentStateError(TournamentException):
    """Raised when an internal tournament invariant is broken.

    This is never caused by user input: it means the record was built or
    modified outside the engine and should be reported as a bug.
    """

    pass
