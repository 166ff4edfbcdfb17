# src/retro_chip8/instructions/display.py
"""
描画命令 DRW の実装。
"""
from retro_chip8.core.operation import Operation
from .base import ExecutionContext, reg

# --- DRW Vx, Vy, n (Dxyn) ---
def decode_drw(opcode: int) -> Operation:
    return Operation(opcode, "DRW", [reg((opcode >> 8) & 0xF), reg((opcode >> 4) & 0xF), f"{opcode & 0xF}"])

# @intent:responsibility I から読んだ n バイトのスプライトを (Vx, Vy) にXOR描画し、衝突をVFに記録します。
# @intent:rationale VF は命令の先頭で 0 にクリアし、描画中に点灯ピクセルを消した場合のみ 1 にします。
#                  座標は VF をクリアする前に読み出します。
def execute_drw(ctx: ExecutionContext, op: Operation) -> bool:
    state = ctx.state
    x = state.v[op.x]
    y = state.v[op.y]
    state.vf = 0
    sprite = [ctx.memory.read(state.i + row) for row in range(op.n)]
    if ctx.framebuffer.draw_sprite(x, y, sprite, wrap=ctx.sprite_wrap):
        state.vf = 1
    return True
