import pytest

from framegui.cmd_target import (
    USR_MSG_MAX,
    CallbackType,
    CmdTarget,
    MessageEntry,
    MsgType,
    on_user_msg,
)

MSG_A = 0x10
MSG_B = 0x11
CLICKED = 0x1111


class Receiver(CmdTarget):
    def __init__(self):
        self.calls = []

    def on_a(self, w, l):
        self.calls.append(("a", w, l))

    def on_click(self, ctrl_id):
        self.calls.append(("click", ctrl_id))

    def on_plain(self):
        self.calls.append(("plain",))

    def on_param(self, param):
        self.calls.append(("param", param))

    message_map = (
        on_user_msg(MSG_A, on_a),
        MessageEntry(MsgType.WND, CLICKED, 7, CallbackType.VWV, on_click),
    )


def _noop(target, w, l):
    pass


class Many(CmdTarget):
    message_map = tuple(on_user_msg(i, _noop) for i in range(USR_MSG_MAX + 1))


@pytest.fixture(autouse=True)
def clean_registry():
    CmdTarget.clear_usr_msgs()
    yield
    CmdTarget.clear_usr_msgs()


def test_user_message_delivered():
    receiver = Receiver()
    receiver.load_cmd_msg()
    assert CmdTarget.handle_usr_msg(MSG_A, 3, 4) == 1
    assert receiver.calls == [("a", 3, 4)]


def test_repeat_load_registers_once():
    receiver = Receiver()
    receiver.load_cmd_msg()
    receiver.load_cmd_msg()
    assert CmdTarget.handle_usr_msg(MSG_A, 1, 2) == 1


def test_each_instance_registered():
    first, second = Receiver(), Receiver()
    first.load_cmd_msg()
    second.load_cmd_msg()
    assert CmdTarget.handle_usr_msg(MSG_A, 5, 6) == 2
    assert first.calls == second.calls == [("a", 5, 6)]


def test_unknown_message_not_handled():
    Receiver().load_cmd_msg()
    assert CmdTarget.handle_usr_msg(MSG_B, 0, 0) == 0


def test_clear_removes_handlers():
    Receiver().load_cmd_msg()
    CmdTarget.clear_usr_msgs()
    assert CmdTarget.handle_usr_msg(MSG_A, 0, 0) == 0


def test_registry_full():
    with pytest.raises(RuntimeError):
        Many().load_cmd_msg()
    assert CmdTarget.handle_usr_msg(0, 0, 0) == 1


def test_invalid_entry_type_rejected():
    entry = MessageEntry(MsgType.INVALID, 1, None, CallbackType.VV, _noop)

    class Bad(CmdTarget):
        message_map = (entry,)

    with pytest.raises(ValueError):
        CmdTarget.load_cmd_msg(Bad())


def test_find_msg_entry():
    receiver = Receiver()
    entry = CmdTarget.find_msg_entry(receiver, MsgType.WND, CLICKED, 7)
    assert entry is Receiver.message_map[1]
    assert CmdTarget.find_msg_entry(receiver, MsgType.WND, CLICKED, 8) is None
    assert CmdTarget.find_msg_entry(receiver, MsgType.INVALID, CLICKED, 7) is None


def test_dispatch_by_callback_type():
    receiver = Receiver()
    receiver.dispatch(Receiver.message_map[1], 7, 99)
    receiver.dispatch(MessageEntry(MsgType.WND, 1, 2, CallbackType.VV, Receiver.on_plain), 2, 0)
    receiver.dispatch(MessageEntry(MsgType.WND, 1, 2, CallbackType.VVL, Receiver.on_param), 2, 42)
    receiver.dispatch(MessageEntry(MsgType.WND, 1, 2, CallbackType.VWL, Receiver.on_a), 2, 9)
    assert receiver.calls == [("click", 7), ("plain",), ("param", 42), ("a", 2, 9)]


def test_dispatch_unsupported_type():
    entry = MessageEntry(MsgType.WND, 1, 2, CallbackType.IWL, _noop)
    with pytest.raises(ValueError):
        Receiver().dispatch(entry, 2, 0)