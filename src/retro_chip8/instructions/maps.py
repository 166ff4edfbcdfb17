# src/retro_chip8/instructions/maps.py
"""
命令語と命令実装のマッピング定義。

上位4ビットが命令グループを選び、グループ 0/E/F では下位8ビット、
グループ 8 では下位4ビットが具体的な命令を選びます。
"""
from typing import Hashable

from . import alu
from . import control
from . import display
from . import load

# @intent:utility_function 命令語からマップ検索用のキーを求めます。
def dispatch_key(opcode: int) -> Hashable:
    group = (opcode >> 12) & 0xF
    if group in (0x0, 0xE, 0xF):
        return (group, opcode & 0xFF)
    if group == 0x8:
        return (group, opcode & 0xF)
    return (group, None)

# @intent:map キーからデコード関数へのマッピングテーブル。
DECODE_MAP = {
    # Control
    (0x0, 0xE0): control.decode_cls,
    (0x0, 0xEE): control.decode_ret,
    (0x1, None): control.decode_jp,
    (0x2, None): control.decode_call,
    (0x3, None): control.decode_se_imm,
    (0x4, None): control.decode_sne_imm,
    (0x5, None): control.decode_se_reg,
    (0x9, None): control.decode_sne_reg,
    (0xB, None): control.decode_jp_v0,
    (0xE, 0x9E): control.decode_skp,
    (0xE, 0xA1): control.decode_sknp,

    # ALU
    (0x6, None): alu.decode_ld_imm,
    (0x7, None): alu.decode_add_imm,
    (0x8, 0x0): alu.decode_ld_reg,
    (0x8, 0x1): alu.decode_or,
    (0x8, 0x2): alu.decode_and,
    (0x8, 0x3): alu.decode_xor,
    (0x8, 0x4): alu.decode_add_reg,
    (0x8, 0x5): alu.decode_sub,
    (0x8, 0x6): alu.decode_shr,
    (0x8, 0x7): alu.decode_subn,
    (0x8, 0xE): alu.decode_shl,
    (0xC, None): alu.decode_rnd,

    # Load/Store
    (0xA, None): load.decode_ld_i,
    (0xF, 0x07): load.decode_ld_vx_dt,
    (0xF, 0x0A): load.decode_ld_vx_k,
    (0xF, 0x15): load.decode_ld_dt_vx,
    (0xF, 0x18): load.decode_ld_st_vx,
    (0xF, 0x1E): load.decode_add_i,
    (0xF, 0x29): load.decode_ld_f,
    (0xF, 0x33): load.decode_ld_b,
    (0xF, 0x55): load.decode_ld_store,
    (0xF, 0x65): load.decode_ld_load,

    # Display
    (0xD, None): display.decode_drw,
}

# @intent:map キーから実行関数へのマッピングテーブル。
EXECUTE_MAP = {
    # Control
    (0x0, 0xE0): control.execute_cls,
    (0x0, 0xEE): control.execute_ret,
    (0x1, None): control.execute_jp,
    (0x2, None): control.execute_call,
    (0x3, None): control.execute_se_imm,
    (0x4, None): control.execute_sne_imm,
    (0x5, None): control.execute_se_reg,
    (0x9, None): control.execute_sne_reg,
    (0xB, None): control.execute_jp_v0,
    (0xE, 0x9E): control.execute_skp,
    (0xE, 0xA1): control.execute_sknp,

    # ALU
    (0x6, None): alu.execute_ld_imm,
    (0x7, None): alu.execute_add_imm,
    (0x8, 0x0): alu.execute_ld_reg,
    (0x8, 0x1): alu.execute_or,
    (0x8, 0x2): alu.execute_and,
    (0x8, 0x3): alu.execute_xor,
    (0x8, 0x4): alu.execute_add_reg,
    (0x8, 0x5): alu.execute_sub,
    (0x8, 0x6): alu.execute_shr,
    (0x8, 0x7): alu.execute_subn,
    (0x8, 0xE): alu.execute_shl,
    (0xC, None): alu.execute_rnd,

    # Load/Store
    (0xA, None): load.execute_ld_i,
    (0xF, 0x07): load.execute_ld_vx_dt,
    (0xF, 0x0A): load.execute_ld_vx_k,
    (0xF, 0x15): load.execute_ld_dt_vx,
    (0xF, 0x18): load.execute_ld_st_vx,
    (0xF, 0x1E): load.execute_add_i,
    (0xF, 0x29): load.execute_ld_f,
    (0xF, 0x33): load.execute_ld_b,
    (0xF, 0x55): load.execute_ld_store,
    (0xF, 0x65): load.execute_ld_load,

    # Display
    (0xD, None): display.execute_drw,
}
