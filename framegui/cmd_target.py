"""Message maps: routing of user messages and child notifications."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Optional

USR_MSG_MAX = 32


class MsgType(IntEnum):
    WND = 0x0001
    USR = 0x0002
    INVALID = 0xFFFF


class CallbackType(IntEnum):
    NULL = 0
    VV = 1
    IWL = 2
    IWV = 3
    VWV = 4
    VVL = 5
    VWL = 6
    IVV = 7


@dataclass(frozen=True)
class MessageEntry:
    """One row of a message map; func takes the target as first argument."""

    msg_type: MsgType
    msg_id: int
    ctrl_id: Optional[int]
    callback_type: CallbackType
    func: Callable[..., object]


def on_user_msg(msg_id: int, handler: Callable[..., object]) -> MessageEntry:
    """Map a user message to handler(target, w_param, l_param)."""
    return MessageEntry(MsgType.USR, msg_id, None, CallbackType.VWL, handler)


class CmdTarget:
    """Base for objects that receive messages through a class message map."""

    message_map: ClassVar[tuple[MessageEntry, ...]] = ()
    _usr_entries: ClassVar[list[tuple[MessageEntry, CmdTarget]]] = []

    @classmethod
    def handle_usr_msg(cls, msg_id: int, w_param: int, l_param: int) -> int:
        """Call every registered handler of msg_id; return how many ran."""
        handled = 0
        for entry, target in list(CmdTarget._usr_entries):
            if entry.msg_id == msg_id:
                entry.func(target, w_param, l_param)
                handled += 1
        return handled

    @classmethod
    def clear_usr_msgs(cls) -> None:
        """Drop every registered user message handler."""
        CmdTarget._usr_entries.clear()

    def load_cmd_msg(self) -> None:
        """Register this object's user message handlers once."""
        registry = CmdTarget._usr_entries
        for entry in self.message_map:
            if entry.msg_type == MsgType.WND:
                continue
            if any(e.msg_id == entry.msg_id and t is self for e, t in registry):
                continue
            if entry.msg_type != MsgType.USR:
                raise ValueError(f"unexpected message type {entry.msg_type!r}")
            if len(registry) >= USR_MSG_MAX:
                raise RuntimeError("user message map full")
            registry.append((entry, self))

    def find_msg_entry(self, msg_type: int, msg_id: int, ctrl_id: int) -> Optional[MessageEntry]:
        """Find the map entry for a message from a given control."""
        if msg_type == MsgType.INVALID:
            return None
        return next(
            (
                entry
                for entry in self.message_map
                if entry.msg_type == msg_type
                and entry.msg_id == msg_id
                and entry.ctrl_id == ctrl_id
            ),
            None,
        )

    def dispatch(self, entry: MessageEntry, ctrl_id: int, param: int) -> None:
        """Call an entry's handler with the arguments its type expects."""
        kind = entry.callback_type
        if kind == CallbackType.VV:
            entry.func(self)
        elif kind == CallbackType.VVL:
            entry.func(self, param)
        elif kind == CallbackType.VWV:
            entry.func(self, ctrl_id)
        elif kind == CallbackType.VWL:
            entry.func(self, ctrl_id, param)
        else:
            raise ValueError(f"unsupported callback type {kind!r}")