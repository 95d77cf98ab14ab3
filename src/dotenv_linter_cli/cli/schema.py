"""Argument schema and invocation parsing for the ``dotenv-linter`` CLI.

The schema is declared as data (:class:`Flag`, :class:`Subcommand`) and
turned into :mod:`argparse` parsers.  Flags shared by the default check
path and ``fix`` come from a single factory, :func:`common_flags`, so both
entry points accept exactly the same options.  argparse rejects a
duplicated option string while the parser is being built, so a schema
with two flags sharing a short or long form cannot be constructed.

Command line shape::

    dotenv-linter [FLAGS] [OPTIONS] [input]...
    dotenv-linter fix [FLAGS] [OPTIONS] [input]...
    dotenv-linter list
    dotenv-linter compare <files>...
"""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, NoReturn

from dotenv_linter_cli.core.models import Command
from dotenv_linter_cli.exceptions import UsageError
from dotenv_linter_cli.version import __version__

PROG: str = "dotenv-linter"
DESCRIPTION: str = "Lightning-fast linter for .env files"

# A bare word that could only be meant as a subcommand name.
_COMMAND_SHAPE = re.compile(r"[A-Za-z][A-Za-z0-9_-]*")


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Flag:
    """Declaration of one recognised argument."""

    name: str
    """Identity of the argument; also its namespace attribute (``-`` → ``_``)."""

    help: str
    short: str | None = None
    long: str | None = None
    takes_value: bool = False
    multiple: bool = False
    default: Any = None
    required: bool = False
    index: int | None = None
    """1-based position for positional arguments, ``None`` for options."""

    min_values: int | None = None
    value_name: str | None = None

    @property
    def dest(self) -> str:
        return self.name.replace("-", "_")

    @property
    def option_strings(self) -> tuple[str, ...]:
        forms: list[str] = []
        if self.short:
            forms.append(f"-{self.short}")
        if self.long:
            forms.append(f"--{self.long}")
        return tuple(forms)


@dataclass(frozen=True, slots=True)
class Subcommand:
    """Declaration of one subcommand and its own flag set."""

    command: Command
    aliases: tuple[str, ...]
    about: str
    usage: str
    flags: tuple[Flag, ...]

    @property
    def name(self) -> str:
        return self.command.value


def quiet_flag() -> Flag:
    return Flag("quiet", "Doesn't display additional information", short="q", long="quiet")


def no_color_flag() -> Flag:
    return Flag("no-color", "Turns off the colored output", long="no-color")


def common_flags(current_dir: Path) -> tuple[Flag, ...]:
    """Flags shared by the default check path and ``fix``."""
    return (
        Flag(
            "input",
            "files or paths",
            index=1,
            default=[str(current_dir)],
            required=True,
            multiple=True,
        ),
        Flag(
            "exclude",
            "Excludes files from check",
            short="e",
            long="exclude",
            value_name="FILE_NAME",
            takes_value=True,
            multiple=True,
        ),
        Flag(
            "skip",
            "Skips checks",
            short="s",
            long="skip",
            value_name="CHECK_NAME",
            takes_value=True,
            multiple=True,
        ),
        Flag(
            "recursive",
            "Recursively searches and checks .env files",
            short="r",
            long="recursive",
        ),
        no_color_flag(),
        quiet_flag(),
    )


def subcommands(current_dir: Path) -> tuple[Subcommand, ...]:
    """Subcommand declarations, in the order shown by ``--help``."""
    return (
        Subcommand(
            command=Command.LIST,
            aliases=("l",),
            about="Shows list of available checks",
            usage=f"{PROG} list",
            flags=(),
        ),
        Subcommand(
            command=Command.FIX,
            aliases=("f",),
            about="Automatically fixes warnings",
            usage=f"{PROG} fix [FLAGS] [OPTIONS] <input>...",
            flags=common_flags(current_dir) + (
                Flag("no-backup", "Prevents backing up .env files", long="no-backup"),
            ),
        ),
        Subcommand(
            command=Command.COMPARE,
            aliases=("c",),
            about="Compares if files have the same keys",
            usage=f"{PROG} compare <files>...",
            flags=(
                Flag(
                    "input",
                    "Files to compare",
                    index=1,
                    multiple=True,
                    min_values=2,
                    required=True,
                ),
                no_color_flag(),
                quiet_flag(),
            ),
        ),
    )


# ---------------------------------------------------------------------------
# argparse construction
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """Parser that raises :class:`UsageError` instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, usage=self.format_usage())


class _MinValues(argparse.Action):
    """Store a list of values, rejecting fewer than ``min_values``."""

    def __init__(self, option_strings: list[str], dest: str, *, min_values: int, **kwargs: Any) -> None:
        super().__init__(option_strings, dest, **kwargs)
        self.min_values = min_values

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        values = list(values or ())
        if len(values) < self.min_values:
            parser.error(
                f"{self.metavar or self.dest} requires at least {self.min_values} "
                f"values, but {len(values)} were provided"
            )
        setattr(namespace, self.dest, values)


def add_flag(parser: argparse.ArgumentParser, flag: Flag) -> None:
    """Register *flag* on *parser*."""
    if flag.index is not None:
        kwargs: dict[str, Any] = {"help": flag.help, "metavar": flag.value_name or flag.name}
        if flag.multiple:
            # A default satisfies "required", as with the working-directory input.
            kwargs["nargs"] = "+" if flag.required and flag.default is None else "*"
        if flag.default is not None:
            kwargs["default"] = flag.default
        if flag.min_values is not None:
            kwargs["action"] = _MinValues
            kwargs["min_values"] = flag.min_values
        parser.add_argument(flag.dest, **kwargs)
        return

    if flag.takes_value:
        parser.add_argument(
            *flag.option_strings,
            dest=flag.dest,
            metavar=flag.value_name,
            action="append" if flag.multiple else "store",
            default=flag.default,
            required=flag.required,
            help=flag.help,
        )
        return

    parser.add_argument(*flag.option_strings, dest=flag.dest, action="store_true", help=flag.help)


def _subcommand_epilog(declared: Sequence[Subcommand]) -> str:
    lines = ["subcommands:"]
    for sub in declared:
        names = ", ".join((sub.name, *sub.aliases))
        lines.append(f"  {names:<14}{sub.about}")
    return "\n".join(lines)


def build_root_parser(current_dir: Path, declared: Sequence[Subcommand]) -> argparse.ArgumentParser:
    """Construct the parser for the default (check) path."""
    parser = _ArgumentParser(
        prog=PROG,
        description=DESCRIPTION,
        epilog=_subcommand_epilog(declared),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    for flag in common_flags(current_dir):
        add_flag(parser, flag)
    return parser


def build_subcommand_parser(sub: Subcommand) -> argparse.ArgumentParser:
    """Construct the parser for one subcommand (no ``--version``)."""
    parser = _ArgumentParser(
        prog=f"{PROG} {sub.name}",
        usage=sub.usage,
        description=sub.about,
        allow_abbrev=False,
    )
    for flag in sub.flags:
        add_flag(parser, flag)
    return parser


@dataclass(frozen=True, slots=True)
class Schema:
    """The root parser plus one parser per subcommand, keyed by name and alias."""

    root: argparse.ArgumentParser
    parsers: dict[Command, argparse.ArgumentParser]
    names: dict[str, Command]
    value_options: frozenset[str]
    """Root option strings that consume the following token."""


def build_schema(current_dir: Path) -> Schema:
    declared = subcommands(current_dir)
    names: dict[str, Command] = {}
    for sub in declared:
        for name in (sub.name, *sub.aliases):
            names[name] = sub.command

    value_options = frozenset(
        option
        for flag in common_flags(current_dir)
        if flag.takes_value
        for option in flag.option_strings
    )
    return Schema(
        root=build_root_parser(current_dir, declared),
        parsers={sub.command: build_subcommand_parser(sub) for sub in declared},
        names=names,
        value_options=value_options,
    )


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedInvocation:
    """Result of matching the argument vector against the schema."""

    command: Command
    root: argparse.Namespace
    """Root-level matches (flags given before any subcommand)."""

    sub: argparse.Namespace | None = None
    """Subcommand matches, for ``fix``, ``list`` and ``compare``."""

    name: str | None = None
    """Subcommand token as typed (alias or unrecognised name)."""


def _takes_next(token: str, value_options: frozenset[str]) -> bool:
    """True when option *token* consumes the following argument as its value.

    Short flags may be bundled (``-rs NAME``); the first value-taking letter
    in the bundle takes the rest of the token, or the next argument when it
    is the last letter.  Long options match only in full since the parsers
    do not accept abbreviations.
    """
    if token.startswith("--"):
        return token in value_options
    letters = token[1:]
    for position, letter in enumerate(letters):
        if f"-{letter}" in value_options:
            return position == len(letters) - 1
    return False


def _marker_index(argv: Sequence[str], value_options: frozenset[str]) -> int | None:
    """Return the index of the first positional token, skipping option values."""
    skip_next = False
    for index, token in enumerate(argv):
        if skip_next:
            skip_next = False
            continue
        if token == "--":
            return None
        if token.startswith("-") and token != "-":
            skip_next = _takes_next(token, value_options)
            continue
        return index
    return None


def _is_command_name(token: str, current_dir: Path) -> bool:
    """True when *token* reads as a subcommand name rather than a path."""
    if not _COMMAND_SHAPE.fullmatch(token):
        return False
    return not (current_dir / token).exists()


def parse_invocation(argv: Sequence[str], current_dir: Path) -> ParsedInvocation:
    """Match *argv* against the schema.

    The first positional token selects the subcommand when it is a known
    name or alias.  A bare word that names neither a subcommand nor an
    existing path is an unrecognised subcommand; anything else is an
    input of the default check path.

    Raises
    ------
    UsageError
        On unknown flags, missing required arguments, or too few files
        for ``compare``.
    """
    schema = build_schema(current_dir)
    args = list(argv)

    index = _marker_index(args, schema.value_options)
    if index is None:
        return ParsedInvocation(Command.CHECK, schema.root.parse_args(args))

    token = args[index]
    command = schema.names.get(token)
    if command is None:
        if not _is_command_name(token, current_dir):
            return ParsedInvocation(Command.CHECK, schema.root.parse_args(args))
        root = schema.root.parse_args(args[:index])
        return ParsedInvocation(Command.UNKNOWN, root, name=token)

    root = schema.root.parse_args(args[:index])
    sub = schema.parsers[command].parse_args(args[index + 1:])
    return ParsedInvocation(command, root, sub=sub, name=token)
