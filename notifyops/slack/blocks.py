"""
Translation of notification documents into Slack Block Kit objects.
"""

from typing import List

from slack_sdk.models.blocks import (
    Block as SlackBlock, HeaderBlock as SlackHeaderBlock, SectionBlock as SlackSectionBlock,
    ActionsBlock as SlackActionsBlock, ButtonElement, PlainTextObject, MarkdownTextObject,
    TextObject as SlackTextObject
)

from ..exceptions import UnsupportedBlockError
from ..models.notification import (
    NotificationDocument, Block, HeaderBlock, SectionBlock, ActionsBlock, Button, ButtonStyle,
    TextObject, TextFormat
)


def convert_text(text: TextObject) -> SlackTextObject:
    if text.format is TextFormat.PLAIN:
        return PlainTextObject(text=text.text, emoji=True)
    return MarkdownTextObject(text=text.text)


def convert_button(button: Button) -> ButtonElement:
    style = None if button.style is ButtonStyle.DEFAULT else button.style.value
    return ButtonElement(
        text=PlainTextObject(text=button.text, emoji=True),
        action_id=button.action_id,
        value=button.value,
        url=button.url,
        style=style,
    )


def convert_block(block: Block, index: int) -> SlackBlock:
    """Convert one generic block; anything unknown raises ``UnsupportedBlockError``."""
    if isinstance(block, HeaderBlock):
        return SlackHeaderBlock(text=PlainTextObject(text=block.text, emoji=True))

    if isinstance(block, SectionBlock):
        if block.text is None and not block.fields:
            raise UnsupportedBlockError("empty section", index)
        return SlackSectionBlock(
            text=convert_text(block.text) if block.text is not None else None,
            fields=[convert_text(f) for f in block.fields] or None,
        )

    if isinstance(block, ActionsBlock):
        if not block.buttons:
            raise UnsupportedBlockError("empty actions", index)
        return SlackActionsBlock(elements=[convert_button(b) for b in block.buttons])

    raise UnsupportedBlockError(type(block).__name__, index)


def to_slack_blocks(document: NotificationDocument) -> List[SlackBlock]:
    """Convert every block of ``document``; one bad block fails the whole conversion."""
    return [convert_block(block, index) for index, block in enumerate(document.blocks)]
