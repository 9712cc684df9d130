"""
Slack platform adapter: block translation, outbound messages and interactive callbacks.
"""

from .blocks import to_slack_blocks, convert_block
from .notifier import SlackNotifier
from .interactions import (
    InteractionHandler, InteractionOutcome, parse_interaction_payload, parse_action_value
)

__all__ = [
    'to_slack_blocks',
    'convert_block',
    'SlackNotifier',
    'InteractionHandler',
    'InteractionOutcome',
    'parse_interaction_payload',
    'parse_action_value',
]
