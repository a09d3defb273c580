from courtbot.application.commands.scaffold.parsers import (
    parse_scaffold_create,
    resolve_deleted_scaffold_id,
    resolve_scaffold_id,
    resolve_scaffold_id_and_username,
)
from courtbot.application.commands.scaffold.steps import (
    day_step,
    scaffold_select_step,
    scaffold_toggle_step,
)
from courtbot.application.commands.shared import courts_step, time_step, username_step
from courtbot.application.services.command.types import CommandDefinition, no_args

scaffold_list_def = CommandDefinition(parser=no_args)

scaffold_create_def = CommandDefinition(
    parser=parse_scaffold_create,
    steps=(day_step, time_step, courts_step),
)

scaffold_action_def = CommandDefinition(parser=resolve_scaffold_id, steps=(scaffold_select_step,))

scaffold_toggle_def = CommandDefinition(parser=resolve_scaffold_id, steps=(scaffold_toggle_step,))

scaffold_transfer_def = CommandDefinition(
    parser=resolve_scaffold_id_and_username,
    steps=(scaffold_select_step, username_step),
)

scaffold_undo_delete_def = CommandDefinition(parser=resolve_deleted_scaffold_id)

SCAFFOLD_COMMANDS: dict[str, CommandDefinition] = {
    "scaffold:list": scaffold_list_def,
    "scaffold:create": scaffold_create_def,
    "scaffold:toggle": scaffold_toggle_def,
    "scaffold:delete": scaffold_action_def,
    "scaffold:transfer": scaffold_transfer_def,
    "scaffold:undo-delete": scaffold_undo_delete_def,
}
