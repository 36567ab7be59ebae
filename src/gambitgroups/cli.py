"""Command line interface for Gambit Groups.

Runs single commands (``gambitgroups options 9``) or an interactive
session with autocomplete (``gambitgroups -i``).
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

import argparse
import json
import random
import shlex
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from gambitgroups.constants import (
    RESULT_DRAW,
    RESULT_P1_WIN,
    RESULT_P2_WIN,
    SAVE_FILE_EXTENSION,
)
from gambitgroups.exceptions import GambitGroupsException, InvalidInputError
from gambitgroups.models.tournament import Tournament
from gambitgroups.pairing import generate_round_robin_schedule
from gambitgroups.tournament import (
    compute_grouping_options,
    create_tournament,
    record_final_stage_result,
    record_group_result,
)
from gambitgroups.utils import configure_logging, setup_logger
from gambitgroups.utils.print import (
    format_grouping_options,
    format_schedule,
    format_tournament,
)

logger = setup_logger(__name__)

# Accepted spellings on the command line
RESULT_ALIASES = {
    RESULT_P1_WIN: RESULT_P1_WIN,
    RESULT_P2_WIN: RESULT_P2_WIN,
    RESULT_DRAW: RESULT_DRAW,
    "1-0": RESULT_P1_WIN,
    "0-1": RESULT_P2_WIN,
    "0.5-0.5": RESULT_DRAW,
    "=": RESULT_DRAW,
}


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Command definitions with their options
COMMANDS = {
    "options": {
        "description": "List the ways to split N players into groups",
        "options": {"<players>": "Number of players"},
    },
    "schedule": {
        "description": "Print a round robin schedule for the given players",
        "options": {"<names>": "Player names in seeding order"},
    },
    "create": {
        "description": "Create a tournament and save it as JSON",
        "options": {
            "--name": "Tournament name",
            "--players": "Comma separated player names",
            "--option": "Grouping option number from 'options' (default: 1)",
            "--seed": "Random seed for the group draw",
            "--output": "Output file path",
        },
    },
    "show": {
        "description": "Show groups, standings, final stage and champion",
        "options": {"<file>": "Tournament file (JSON)"},
    },
    "result": {
        "description": "Record a group match result",
        "options": {
            "<file>": "Tournament file (JSON)",
            "<group>": "Group letter",
            "<round>": "Round number (1-indexed)",
            "<match>": "Match number within the round (1-indexed)",
            "<result>": "p1_win / p2_win / draw (or 1-0, 0-1, =)",
        },
    },
    "final": {
        "description": "Record a final stage result",
        "options": {
            "<file>": "Tournament file (JSON)",
            "<result>": "p1_win / p2_win / draw (or 1-0, 0-1, =)",
            "--round": "Round number of the final round robin",
            "--match": "Match number within that round",
        },
    },
    "help": {
        "description": "Show help for specific command",
        "options": {"<command>": "Command name to get help for"},
    },
    "exit": {"description": "Exit the interactive mode", "options": {}},
}


def parse_result(value: str) -> str:
    """Map a command line result spelling onto a result key.

    Raises:
        argparse.ArgumentTypeError: If the spelling is unknown
    """
    try:
        return RESULT_ALIASES[value.strip().lower()]
    except KeyError:
        raise argparse.ArgumentTypeError(
            f"Invalid result '{value}'. Use one of: {', '.join(RESULT_ALIASES)}"
        ) from None


def parse_player_list(value: str) -> List[str]:
    """Split a comma separated list of names, dropping empty entries."""
    return [name.strip() for name in value.split(",") if name.strip()]


def load_tournament(path: Path) -> Tournament:
    """Read a tournament record written by :func:`save_tournament`.

    Raises:
        InvalidInputError: If the file is missing or not a tournament record
    """
    if not path.exists():
        raise InvalidInputError(f"File not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return Tournament.from_dict(data)
    except OSError as e:
        raise InvalidInputError(f"Could not read {path}: {e}") from e
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        raise InvalidInputError(f"{path} is not a tournament file: {e}") from e


def save_tournament(path: Path, tournament: Tournament) -> Path:
    """Write ``tournament`` as JSON, adding the default extension if needed.

    Raises:
        InvalidInputError: If the file cannot be written
    """
    if not path.suffix:
        path = path.with_suffix(SAVE_FILE_EXTENSION)
    try:
        path.write_text(json.dumps(tournament.to_dict(), indent=2), encoding="utf-8")
    except OSError as e:
        raise InvalidInputError(f"Could not save tournament to {path}: {e}") from e
    logger.info(f"Saved tournament {tournament.id} to {path}")
    return path


# ========== Command handlers ==========


def run_options_command(args: argparse.Namespace) -> int:
    options = compute_grouping_options(args.players)
    if not options:
        print(f"{Colors.FAIL}No valid grouping for {args.players} players{Colors.ENDC}")
        return 1
    print(f"\n{Colors.BOLD}Grouping options for {args.players} players:{Colors.ENDC}")
    for line in format_grouping_options(options):
        print(f"  {line}")
    return 0


def run_schedule_command(args: argparse.Namespace) -> int:
    schedule = generate_round_robin_schedule(args.names)
    if not schedule:
        print(f"{Colors.WARNING}At least two players are needed{Colors.ENDC}")
        return 1
    for line in format_schedule(args.names, schedule):
        print(line)
    return 0


def run_create_command(args: argparse.Namespace) -> int:
    players = parse_player_list(args.players)
    options = compute_grouping_options(len(players))
    if not options:
        raise InvalidInputError(f"No valid grouping for {len(players)} players")
    if not 1 <= args.option <= len(options):
        raise InvalidInputError(
            f"Grouping option must be between 1 and {len(options)}, got {args.option}"
        )

    rng = random.Random(args.seed) if args.seed is not None else None
    tournament = create_tournament(
        args.name, players, options[args.option - 1], rng=rng
    )
    path = save_tournament(Path(args.output), tournament)
    print(f"{Colors.OKGREEN}Tournament saved to: {path}{Colors.ENDC}")
    print(format_tournament(tournament))
    return 0


def run_show_command(args: argparse.Namespace) -> int:
    tournament = load_tournament(Path(args.file))
    print(format_tournament(tournament))
    return 0


def run_result_command(args: argparse.Namespace) -> int:
    path = Path(args.file)
    tournament = load_tournament(path)
    tournament = record_group_result(
        tournament, args.group.upper(), args.round - 1, args.match - 1, args.result
    )
    save_tournament(path, tournament)
    print(format_tournament(tournament))
    return 0


def run_final_command(args: argparse.Namespace) -> int:
    path = Path(args.file)
    tournament = load_tournament(path)
    round_index = args.round - 1 if args.round is not None else None
    match_index = args.match - 1 if args.match is not None else None
    tournament = record_final_stage_result(
        tournament, args.result, round_index, match_index
    )
    save_tournament(path, tournament)
    print(format_tournament(tournament))
    return 0


# ========== Parsers ==========


def create_main_parser() -> argparse.ArgumentParser:
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="gambitgroups",
        description="Group-stage round robin chess tournaments",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  gambitgroups -i

  # Grouping options for 9 players
  gambitgroups options 9

  # Create a tournament with the second grouping option
  gambitgroups create --name "Club Open" --players A,B,C,D,E,F,G,H,I --option 2 --output open.json

  # Record a result: group A, round 1, first board, first player wins
  gambitgroups result open.json A 1 1 1-0
        """,
    )
    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start in interactive mode"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose (debug) logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    options_parser = subparsers.add_parser(
        "options", help=COMMANDS["options"]["description"]
    )
    options_parser.add_argument("players", type=int, help="Number of players")
    options_parser.set_defaults(func=run_options_command)

    schedule_parser = subparsers.add_parser(
        "schedule", help=COMMANDS["schedule"]["description"]
    )
    schedule_parser.add_argument("names", nargs="+", help="Player names")
    schedule_parser.set_defaults(func=run_schedule_command)

    create_parser = subparsers.add_parser(
        "create", help=COMMANDS["create"]["description"]
    )
    create_parser.add_argument("--name", required=True, help="Tournament name")
    create_parser.add_argument(
        "--players", required=True, help="Comma separated player names"
    )
    create_parser.add_argument(
        "--option", type=int, default=1, help="Grouping option number (1-indexed)"
    )
    create_parser.add_argument("--seed", type=int, help="Random seed for the draw")
    create_parser.add_argument("--output", required=True, help="Output file path")
    create_parser.set_defaults(func=run_create_command)

    show_parser = subparsers.add_parser("show", help=COMMANDS["show"]["description"])
    show_parser.add_argument("file", help="Tournament file (JSON)")
    show_parser.set_defaults(func=run_show_command)

    result_parser = subparsers.add_parser(
        "result", help=COMMANDS["result"]["description"]
    )
    result_parser.add_argument("file", help="Tournament file (JSON)")
    result_parser.add_argument("group", help="Group letter")
    result_parser.add_argument("round", type=int, help="Round number (1-indexed)")
    result_parser.add_argument("match", type=int, help="Match number (1-indexed)")
    result_parser.add_argument("result", type=parse_result, help="Game result")
    result_parser.set_defaults(func=run_result_command)

    final_parser = subparsers.add_parser(
        "final", help=COMMANDS["final"]["description"]
    )
    final_parser.add_argument("file", help="Tournament file (JSON)")
    final_parser.add_argument("result", type=parse_result, help="Game result")
    final_parser.add_argument("--round", type=int, help="Round number (1-indexed)")
    final_parser.add_argument("--match", type=int, help="Match number (1-indexed)")
    final_parser.set_defaults(func=run_final_command)

    return parser


def dispatch(args: argparse.Namespace) -> int:
    """Run the handler chosen by the parser, reporting domain errors."""
    handler: Optional[Callable[[argparse.Namespace], int]] = getattr(args, "func", None)
    if handler is None:
        create_main_parser().print_help()
        return 0
    try:
        return handler(args)
    except GambitGroupsException as e:
        logger.debug(f"Command {args.command} failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


# ========== Interactive mode ==========


def print_banner():
    """Print the application banner."""
    banner = f"""
{Colors.OKBLUE}╔═══════════════════════════════════════════════════════════════╗
║                                                               ║
║                     GAMBIT GROUPS - CLI                       ║
║                                                               ║
║            [Group stage round robin tournaments]              ║
║                                                               ║
╚═══════════════════════════════════════════════════════════════╝{Colors.ENDC}

Type {Colors.BOLD}help{Colors.ENDC} to see all available commands
Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} to leave interactive mode
"""
    print(banner)


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:15}{Colors.ENDC} - {info['description']}")
    print()


def print_command_help(command: str):
    """Print detailed help for a specific command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return

    cmd_info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{Colors.OKBLUE}Command: {command}{Colors.ENDC}")
    print(f"{Colors.BOLD}Description:{Colors.ENDC} {cmd_info['description']}\n")
    if cmd_info["options"]:
        print(f"{Colors.BOLD}Options:{Colors.ENDC}")
        for option, description in cmd_info["options"].items():
            print(f"  {option:20} {description}")
    print()


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for interactive mode."""
    completions: Dict[str, Optional[WordCompleter]] = {}
    for cmd, info in COMMANDS.items():
        flags = [opt for opt in info["options"] if opt.startswith("--")]
        completions[cmd] = WordCompleter(flags) if flags else None
    completions["help"] = WordCompleter(list(COMMANDS))
    completions["quit"] = None
    return NestedCompleter.from_nested_dict(completions)


def run_interactive_mode() -> int:
    """Run in interactive mode with autocomplete."""
    print_banner()

    style = Style.from_dict({"prompt": "#00aa00 bold"})
    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=style,
    )
    parser = create_main_parser()

    while True:
        try:
            user_input = session.prompt("gambitgroups> ").strip()
        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
            continue
        except EOFError:
            break

        if not run_interactive_line(parser, user_input):
            break

    print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
    return 0


def parse_interactive_command(
    parser: argparse.ArgumentParser, user_input: str
) -> Optional[argparse.Namespace]:
    """Split a prompt line like a shell would and parse it.

    Returns None when the line cannot be parsed; the reason is printed.
    """
    try:
        parts = shlex.split(user_input)
    except ValueError as e:
        print(f"{Colors.FAIL}Could not parse command: {e}{Colors.ENDC}")
        return None
    try:
        return parser.parse_args(parts)
    except SystemExit:
        # argparse already printed the usage error
        return None


def run_interactive_line(parser: argparse.ArgumentParser, user_input: str) -> bool:
    """Handle one prompt line. Returns False when the session should end."""
    user_input = user_input.strip()
    if not user_input:
        return True
    if user_input in ("exit", "quit", "q"):
        return False

    parts = user_input.split()
    if parts[0] in ("help", "?"):
        if len(parts) > 1:
            print_command_help(parts[1])
        else:
            print_commands_list()
        return True
    if parts[0] not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {parts[0]}{Colors.ENDC}")
        print(f"Type {Colors.BOLD}help{Colors.ENDC} to see available commands")
        return True

    args = parse_interactive_command(parser, user_input)
    if args is None:
        return True
    try:
        dispatch(args)
    except Exception as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        logger.exception("Command execution failed")
    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``gambitgroups`` console script."""
    parser = create_main_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)

    if args.interactive:
        return run_interactive_mode()
    return dispatch(args)
