import random
import unittest

from retro_chip8.core.cpu import Chip8Cpu
from retro_chip8.core.keypad import Keypad
from retro_chip8.display.framebuffer import Framebuffer
from retro_chip8.transport.bus import Memory


class StubKeypad(Keypad):
    def __init__(self):
        self.pressed = set()

    def is_pressed(self, key):
        return key in self.pressed


class ZeroRandom(random.Random):
    def randrange(self, *args, **kwargs):
        return 0xFF


class TestAluInstructions(unittest.TestCase):
    def setUp(self):
        self.memory = Memory()
        self.cpu = Chip8Cpu(self.memory, Framebuffer(), StubKeypad(), rng=random.Random(1234))
        self.state = self.cpu.get_state()

    def _execute(self, opcode):
        self.memory.write(0x200, opcode >> 8)
        self.memory.write(0x201, opcode & 0xFF)
        self.state.pc = 0x200
        return self.cpu.step()

    def test_ld_imm(self):
        # LD V3, #42
        self._execute(0x6342)
        self.assertEqual(self.state.v[3], 0x42)

    def test_add_imm_wraps_without_flag(self):
        self.state.v[2] = 0xFF
        self.state.vf = 0x55
        # ADD V2, #02
        self._execute(0x7202)
        self.assertEqual(self.state.v[2], 0x01)
        self.assertEqual(self.state.vf, 0x55) # VF is untouched

    def test_ld_or_and_xor(self):
        self.state.v[1] = 0b1100
        self.state.v[2] = 0b1010
        self._execute(0x8010) # LD V0, V1
        self.assertEqual(self.state.v[0], 0b1100)
        self._execute(0x8021) # OR V0, V2
        self.assertEqual(self.state.v[0], 0b1110)
        self._execute(0x8012) # AND V0, V1
        self.assertEqual(self.state.v[0], 0b1100)
        self._execute(0x8023) # XOR V0, V2
        self.assertEqual(self.state.v[0], 0b0110)

    def test_add_reg_carry(self):
        self.state.v[0] = 0xFF
        self.state.v[1] = 0x01
        self._execute(0x8014)
        self.assertEqual(self.state.v[0], 0x00)
        self.assertEqual(self.state.vf, 1)

    def test_add_reg_no_carry(self):
        self.state.v[0] = 0x01
        self.state.v[1] = 0x01
        self._execute(0x8014)
        self.assertEqual(self.state.v[0], 0x02)
        self.assertEqual(self.state.vf, 0)

    def test_sub_no_borrow(self):
        self.state.v[0] = 0x05
        self.state.v[1] = 0x03
        self._execute(0x8015)
        self.assertEqual(self.state.v[0], 0x02)
        self.assertEqual(self.state.vf, 1)

    def test_sub_borrow(self):
        self.state.v[0] = 0x03
        self.state.v[1] = 0x05
        self._execute(0x8015)
        self.assertEqual(self.state.v[0], 0xFE)
        self.assertEqual(self.state.vf, 0)

    def test_sub_equal_operands_is_no_borrow(self):
        self.state.v[0] = 0x07
        self.state.v[1] = 0x07
        self._execute(0x8015)
        self.assertEqual(self.state.v[0], 0x00)
        self.assertEqual(self.state.vf, 1)

    def test_subn(self):
        self.state.v[0] = 0x03
        self.state.v[1] = 0x05
        self._execute(0x8017)
        self.assertEqual(self.state.v[0], 0x02)
        self.assertEqual(self.state.vf, 1)

        self.state.v[0] = 0x05
        self.state.v[1] = 0x03
        self._execute(0x8017)
        self.assertEqual(self.state.v[0], 0xFE)
        self.assertEqual(self.state.vf, 0)

    def test_shr(self):
        self.state.v[4] = 0b00000101
        self._execute(0x8406)
        self.assertEqual(self.state.v[4], 0b00000010)
        self.assertEqual(self.state.vf, 1)

        self._execute(0x8406)
        self.assertEqual(self.state.v[4], 0b00000001)
        self.assertEqual(self.state.vf, 0)

    def test_shl(self):
        self.state.v[4] = 0b10000001
        self._execute(0x840E)
        self.assertEqual(self.state.v[4], 0b00000010)
        self.assertEqual(self.state.vf, 1)

        self._execute(0x840E)
        self.assertEqual(self.state.v[4], 0b00000100)
        self.assertEqual(self.state.vf, 0)

    def test_flag_wins_when_destination_is_vf(self):
        # ADD VF, V1 : 0x10 + 0x20 = 0x30 だが VF にはフラグ(0)が残る
        self.state.vf = 0x10
        self.state.v[1] = 0x20
        self._execute(0x8F14)
        self.assertEqual(self.state.vf, 0)

        # SUB VF, V1 : 0x30 - 0x20、ボローなしなので VF=1
        self.state.vf = 0x30
        self._execute(0x8F15)
        self.assertEqual(self.state.vf, 1)

    def test_shift_of_vf_shifts_the_flag(self):
        # SHR VF : VF = 0x03 の最下位ビット(1)を書いた後、その VF を右シフト
        self.state.vf = 0x03
        self._execute(0x8FF6)
        self.assertEqual(self.state.vf, 0x00)

        # SHL VF : VF = 0x81 の最上位ビット(1)を書いた後、その VF を左シフト
        self.state.vf = 0x81
        self._execute(0x8FFE)
        self.assertEqual(self.state.vf, 0x02)

        self.state.vf = 0x83
        self._execute(0x8FFE)
        self.assertEqual(self.state.vf, 0x02)

    def test_rnd_is_masked(self):
        cpu = Chip8Cpu(self.memory, Framebuffer(), StubKeypad(), rng=ZeroRandom())
        state = cpu.get_state()
        self.memory.write(0x200, 0xC5)
        self.memory.write(0x201, 0x0F)
        cpu.step()
        self.assertEqual(state.v[5], 0x0F)

    def test_rnd_with_zero_mask_is_always_zero(self):
        for _ in range(50):
            self.state.v[5] = 0xAA
            self._execute(0xC500)
            self.assertEqual(self.state.v[5], 0)

if __name__ == '__main__':
    unittest.main()
