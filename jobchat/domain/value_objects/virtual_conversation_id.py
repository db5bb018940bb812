"""
VirtualConversationId Value Object - id of a conversation that has no
persisted Application yet.

Format: "virtual-<key>" where key is a prospective application id or the
candidate's user id.
"""

from dataclasses import dataclass

VIRTUAL_PREFIX = "virtual-"


@dataclass(frozen=True)
class VirtualConversationId:
    key: str

    def __post_init__(self):
        if not self.key:
            raise ValueError("Virtual conversation key cannot be empty")
        if self.key.startswith(VIRTUAL_PREFIX):
            raise ValueError(f"Virtual conversation key is already prefixed: {self.key}")

    @property
    def value(self) -> str:
        return f"{VIRTUAL_PREFIX}{self.key}"

    @staticmethod
    def is_virtual(conversation_id: str) -> bool:
        return bool(conversation_id) and conversation_id.startswith(VIRTUAL_PREFIX)

    @classmethod
    def parse(cls, conversation_id: str) -> "VirtualConversationId":
        if not cls.is_virtual(conversation_id):
            raise ValueError(f"Not a virtual conversation id: {conversation_id}")
        return cls(conversation_id[len(VIRTUAL_PREFIX):])

    def __str__(self) -> str:
        return self.value
