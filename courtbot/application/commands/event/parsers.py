"""Argument parsers for ``/event`` commands."""

from courtbot.application.commands.event.steps import parse_event_day
from courtbot.application.commands.shared import parse_courts, parse_time, strip_at
from courtbot.application.services.command.types import ParseResult, ParserInput
from courtbot.domain.exceptions.wizard import StepParseError
from courtbot.domain.ports.repositories.event_repository import EventRepository


async def resolve_event_id(parser_input: ParserInput) -> ParseResult:
    """Event ID from the first argument, else from the pressed message."""
    if parser_input.args:
        return ParseResult.complete(eventId=parser_input.args[0])

    if parser_input.event.callback_id and parser_input.event.message_id is not None:
        repo: EventRepository = parser_input.container.resolve("event_repository")
        event = await repo.find_by_message_id(str(parser_input.event.message_id))
        if event is None:
            return ParseResult.failed("Event not found for this message")
        return ParseResult.complete(eventId=event.id)

    return ParseResult.needs("eventId")


def resolve_event_id_and_username(parser_input: ParserInput) -> ParseResult:
    args = parser_input.args
    if len(args) >= 2:
        return ParseResult.complete(eventId=args[0], targetUsername=strip_at(args[1]))
    if len(args) == 1:
        return ParseResult.needs("targetUsername", eventId=args[0])
    return ParseResult.needs("eventId", "targetUsername")


def resolve_deleted_event_id(parser_input: ParserInput) -> ParseResult:
    if parser_input.args:
        return ParseResult.complete(eventId=parser_input.args[0])
    return ParseResult.failed("Usage: /event undo-delete <eventId>")


def resolve_scaffold_id_for_spawn(parser_input: ParserInput) -> ParseResult:
    if parser_input.args:
        return ParseResult.complete(scaffoldId=parser_input.args[0])
    return ParseResult.needs("scaffoldId")


def parse_event_create(parser_input: ParserInput) -> ParseResult:
    """``/event create <day...> <HH:MM> <courts>``, read right to left.

    The day may span several words; fewer than three arguments start the
    wizard for all three fields.
    """
    args = parser_input.args
    if len(args) < 3:
        return ParseResult.needs("day", "time", "courts")

    try:
        courts = parse_courts(args[-1])
        time = parse_time(args[-2])
        day = parse_event_day(" ".join(args[:-2]))
    except StepParseError as e:
        return ParseResult.failed(e.message)
    return ParseResult.complete(day=day, time=time, courts=courts)
