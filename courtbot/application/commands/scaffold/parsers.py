"""Argument parsers for ``/scaffold`` commands."""

from courtbot.application.commands.scaffold.steps import parse_day
from courtbot.application.commands.shared import parse_courts, parse_time, strip_at
from courtbot.application.services.command.types import ParseResult, ParserInput
from courtbot.domain.exceptions.wizard import StepParseError


def resolve_scaffold_id(parser_input: ParserInput) -> ParseResult:
    if parser_input.args:
        return ParseResult.complete(scaffoldId=parser_input.args[0])
    return ParseResult.needs("scaffoldId")


def resolve_deleted_scaffold_id(parser_input: ParserInput) -> ParseResult:
    if parser_input.args:
        return ParseResult.complete(scaffoldId=parser_input.args[0])
    return ParseResult.failed("Usage: /scaffold undo-delete <scaffoldId>")


def resolve_scaffold_id_and_username(parser_input: ParserInput) -> ParseResult:
    args = parser_input.args
    if len(args) >= 2:
        return ParseResult.complete(scaffoldId=args[0], targetUsername=strip_at(args[1]))
    if len(args) == 1:
        return ParseResult.needs("targetUsername", scaffoldId=args[0])
    return ParseResult.needs("scaffoldId", "targetUsername")


def parse_scaffold_create(parser_input: ParserInput) -> ParseResult:
    """``/scaffold create <day> <HH:MM> <courts>``, read right to left."""
    args = parser_input.args
    if len(args) < 3:
        return ParseResult.needs("day", "time", "courts")

    try:
        day = parse_day(" ".join(args[:-2]))
        time = parse_time(args[-2])
        courts = parse_courts(args[-1])
    except StepParseError as e:
        return ParseResult.failed(e.message)
    return ParseResult.complete(day=day, time=time, courts=courts)
