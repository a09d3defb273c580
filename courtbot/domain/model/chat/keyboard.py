"""Transport-independent inline keyboard description."""

from dataclasses import dataclass

from courtbot.domain.shared_kernel import ValueObject


@dataclass(frozen=True)
class InlineButton(ValueObject):
    """A selectable button attached to an outgoing message."""

    text: str
    callback_data: str


# Rows of buttons, top to bottom.
InlineKeyboard = list[list[InlineButton]]
