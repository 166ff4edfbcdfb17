# retro_chip8/timer/timers.py
"""
タイマードライバ。

delay / sound の2つのカウンタを、命令の実行速度とは独立した一定の実時間レートで
0に向かって減算します。sound が0でない間はサウンドを鳴らすべき状態です。
"""
from retro_chip8.core.state import Chip8State

DEFAULT_RATE_HZ = 60
# tick 数算出時の丸め誤差の許容量
_EPSILON = 1e-9

# @intent:responsibility delay/sound タイマーの唯一の変更者として、飽和減算を行います。
class TimerDriver:
    # @intent:pre-condition rate_hzは正の値である必要があります。
    def __init__(self, state: Chip8State, rate_hz: float = DEFAULT_RATE_HZ):
        if rate_hz <= 0:
            raise ValueError(f"Timer rate must be positive: {rate_hz}")
        self._state = state
        self._rate_hz = rate_hz
        self._accumulator = 0.0

    @property
    def sound_active(self) -> bool:
        return self._state.sound > 0

    # @intent:responsibility 両タイマーを1だけ減算します。0より小さくはなりません。
    def tick(self) -> None:
        if self._state.delay > 0:
            self._state.delay -= 1
        if self._state.sound > 0:
            self._state.sound -= 1

    # @intent:responsibility 経過時間をtick単位で蓄積し、整数部の回数だけ tick を実行します。
    # @intent:return 実行した tick の回数。
    def advance(self, elapsed: float) -> int:
        if elapsed <= 0:
            return 0
        self._accumulator += elapsed * self._rate_hz
        ticks = int(self._accumulator + _EPSILON)
        self._accumulator = max(0.0, self._accumulator - ticks)
        for _ in range(ticks):
            self.tick()
        return ticks
