"""Utility command definitions and help text."""

from courtbot.application.services.command.types import CommandDefinition, no_args

empty_def = CommandDefinition(parser=no_args)

UTILITY_COMMANDS: dict[str, CommandDefinition] = {
    "start": empty_def,
    "help": empty_def,
    "myid": empty_def,
    "getchatid": empty_def,
}

HELP_TEXT = """Available commands:

/event list - upcoming events
/event create <day> <HH:MM> <courts> - create an event
/event join|leave [eventId] - sign up or drop out
/event announce|cancel|finalize [eventId]
/event transfer [eventId] [@username]
/scaffold list - recurring schedules
/scaffold create <day> <HH:MM> <courts>
/scaffold toggle|delete [scaffoldId]
/myid - your Telegram user ID
/getchatid - ID of this chat
/cancel - abort the current input"""
