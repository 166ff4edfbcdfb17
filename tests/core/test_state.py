# tests/core/test_state.py
"""
retro_chip8.core.stateモジュールの単体テスト。
"""
from retro_chip8.core.state import Chip8State, PROGRAM_START, STACK_DEPTH

class TestChip8State:
    def test_initial_values(self):
        state = Chip8State()
        assert state.pc == PROGRAM_START == 0x200
        assert state.v == [0] * 16
        assert state.i == 0
        assert state.sp == 0
        assert state.stack == [0] * STACK_DEPTH
        assert state.delay == 0
        assert state.sound == 0
        assert state.awaiting_key is None

    def test_instances_do_not_share_lists(self):
        a = Chip8State()
        b = Chip8State()
        a.v[0] = 1
        a.stack[0] = 0x300
        assert b.v[0] == 0
        assert b.stack[0] == 0

    def test_reset_restores_fields_in_place(self):
        state = Chip8State(i=0x300, pc=0x400, delay=7, sound=3, awaiting_key=2)
        state.v[5] = 0x55
        state.push(0x208)
        v, stack = state.v, state.stack
        state.reset()
        assert state.v is v and state.stack is stack
        assert state == Chip8State()

    def test_vf_is_register_f(self):
        state = Chip8State()
        state.vf = 1
        assert state.v[0xF] == 1
        state.v[0xF] = 0x80
        assert state.vf == 0x80

    def test_push_pop(self):
        state = Chip8State()
        state.push(0x202)
        state.push(0x304)
        assert state.sp == 2
        assert state.pop() == 0x304
        assert state.pop() == 0x202
        assert state.sp == 0

    # @intent:test_case_wrap 17回目のpushは最古のスロットを上書きし、例外は発生しません。
    def test_stack_pointer_wraps_mod_16(self):
        state = Chip8State()
        for n in range(17):
            state.push(0x200 + n * 2)
        assert state.sp == 1
        assert state.stack[0] == 0x200 + 16 * 2

    def test_pop_on_empty_stack_wraps(self):
        state = Chip8State()
        state.stack[15] = 0x456
        assert state.pop() == 0x456
        assert state.sp == 15
