from courtbot.application.commands.event.parsers import (
    parse_event_create,
    resolve_deleted_event_id,
    resolve_event_id,
    resolve_event_id_and_username,
    resolve_scaffold_id_for_spawn,
)
from courtbot.application.commands.event.steps import (
    event_day_step,
    event_select_step,
    scaffold_select_step,
)
from courtbot.application.commands.shared import courts_step, time_step, username_step
from courtbot.application.services.command.types import CommandDefinition, no_args

event_list_def = CommandDefinition(parser=no_args)

# join, leave, announce, cancel, ... all act on a single event
event_action_def = CommandDefinition(parser=resolve_event_id, steps=(event_select_step,))

event_create_def = CommandDefinition(
    parser=parse_event_create,
    steps=(event_day_step, time_step, courts_step),
)

event_spawn_def = CommandDefinition(
    parser=resolve_scaffold_id_for_spawn,
    steps=(scaffold_select_step,),
)

event_transfer_def = CommandDefinition(
    parser=resolve_event_id_and_username,
    steps=(event_select_step, username_step),
)

event_undo_delete_def = CommandDefinition(parser=resolve_deleted_event_id)

EVENT_ACTIONS = (
    "join",
    "leave",
    "announce",
    "cancel",
    "delete",
    "finalize",
    "add-court",
    "remove-court",
    "undo-cancel",
    "undo-finalize",
)

EVENT_COMMANDS: dict[str, CommandDefinition] = {
    "event:list": event_list_def,
    "event:create": event_create_def,
    "event:spawn": event_spawn_def,
    "event:transfer": event_transfer_def,
    "event:undo-delete": event_undo_delete_def,
    **{f"event:{action}": event_action_def for action in EVENT_ACTIONS},
}

ADMIN_COMMANDS: dict[str, CommandDefinition] = {
    "admin:payment:mark-paid": event_transfer_def,
    "admin:payment:undo-mark-paid": event_transfer_def,
}
