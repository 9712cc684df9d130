"""
Pydantic models for Slack interactive callback payloads.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class InteractionChannel(BaseModel):
    id: str = ""


class InteractionUser(BaseModel):
    id: str = ""


class InteractionMessage(BaseModel):
    ts: str = ""


class BlockAction(BaseModel):
    action_id: str = ""
    value: str = ""
    type: str = ""


class InteractionPayload(BaseModel):
    """The JSON document carried in the ``payload`` form field."""
    type: str = ""
    channel: InteractionChannel = Field(default_factory=InteractionChannel)
    user: InteractionUser = Field(default_factory=InteractionUser)
    message: InteractionMessage = Field(default_factory=InteractionMessage)
    actions: List[BlockAction] = Field(default_factory=list)

    @property
    def first_action(self) -> Optional[BlockAction]:
        return self.actions[0] if self.actions else None
