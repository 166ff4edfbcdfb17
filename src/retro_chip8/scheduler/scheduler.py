# retro_chip8/scheduler/scheduler.py
"""
メインサイクルスケジューラ。

入力イベントの処理と終了要求の確認、命令の実行、タイマーの進行、
フレームバッファ更新時の表示要求を順番に呼び出します。
スケジューラ自身は状態を直接変更せず、呼び出しの順序付けのみを行います。
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional

from retro_chip8.core.cpu import Chip8Cpu
from retro_chip8.display.framebuffer import Framebuffer
from retro_chip8.timer.timers import TimerDriver

logger = logging.getLogger(__name__)

DEFAULT_INSTRUCTIONS_PER_SECOND = 700
# 1スライスで取り戻す経過時間の上限（秒）
DEFAULT_MAX_CATCH_UP = 0.1
_EPSILON = 1e-9

# @intent:responsibility 外部イベントの取り込みと終了要求を提供する入力側の協調オブジェクト。
class InputSource(ABC):
    def poll(self) -> None:
        """
        保留中の外部イベントを処理します。イベントループ側で処理済みの場合は何もしません。
        """
        pass

    @abstractmethod
    def quit_requested(self) -> bool:
        pass

# @intent:responsibility フレームバッファを物理ディスプレイに反映する表示側の協調オブジェクト。
class Presenter(ABC):
    @abstractmethod
    def present(self, framebuffer: Framebuffer) -> None:
        """
        フレームバッファの内容で画面を更新します。
        """
        pass

    def set_sound(self, active: bool) -> None:
        """
        サウンドタイマーが0でない間 True で呼ばれます。既定では何もしません。
        """
        pass

# @intent:responsibility 実時間に基づいて命令スループットとタイマー周期を一定に保ちながらCPUを駆動します。
class Scheduler:
    """
    命令の実行レートを instructions_per_second に制限し、タイマーは実時間の経過量で進めます。
    ホストの実行速度が変わっても実効的なタイマー周期は変わりません。
    """
    # @intent:pre-condition instructions_per_second, max_catch_up は正の値である必要があります。
    def __init__(self, cpu: Chip8Cpu, timers: TimerDriver, input_source: InputSource, presenter: Presenter,
                 instructions_per_second: float = DEFAULT_INSTRUCTIONS_PER_SECOND,
                 max_catch_up: float = DEFAULT_MAX_CATCH_UP):
        if instructions_per_second <= 0:
            raise ValueError(f"instructions_per_second must be positive: {instructions_per_second}")
        if max_catch_up <= 0:
            raise ValueError(f"max_catch_up must be positive: {max_catch_up}")
        self._cpu = cpu
        self._timers = timers
        self._input = input_source
        self._presenter = presenter
        self._instructions_per_second = instructions_per_second
        self._max_catch_up = max_catch_up
        self._last_time: Optional[float] = None
        self._budget = 0.0
        self._sound_active = False
        self._running = True

    @property
    def running(self) -> bool:
        return self._running

    # @intent:responsibility イベントを処理し、終了要求があれば以降の実行を止めます。
    # @intent:return 実行を継続してよい場合 True。
    def _check_input(self) -> bool:
        self._input.poll()
        if self._input.quit_requested():
            if self._running:
                logger.info("Quit requested after %d instructions", self._cpu.instruction_count)
            self._running = False
        return self._running

    # @intent:responsibility 表示の更新とサウンド状態の通知を行います。
    def _flush_outputs(self) -> None:
        framebuffer = self._cpu.framebuffer
        if framebuffer.dirty:
            self._presenter.present(framebuffer)
            framebuffer.mark_clean()
        sound_active = self._timers.sound_active
        if sound_active != self._sound_active:
            self._sound_active = sound_active
            self._presenter.set_sound(sound_active)

    # @intent:responsibility 時刻 now までの経過時間に見合う数の命令を実行し、タイマーを進めます。
    # @intent:return 終了要求を受けた場合 False。
    def run_slice(self, now: float) -> bool:
        """
        1スライス分の処理を行います。

        1. 入力イベントの処理と終了要求の確認
        2. 経過時間 × instructions_per_second 個の命令を実行（上限 max_catch_up 秒分）
        3. 経過時間に応じたタイマーの tick
        4. フレームバッファが更新されていれば表示を要求
        """
        if not self._check_input():
            return False

        if self._last_time is None:
            self._last_time = now
            return True
        elapsed = min(max(now - self._last_time, 0.0), self._max_catch_up)
        self._last_time = now

        self._budget += elapsed * self._instructions_per_second
        count = int(self._budget + _EPSILON)
        self._budget = max(0.0, self._budget - count)

        for _ in range(count):
            self._cpu.step()

        self._timers.advance(elapsed)
        self._flush_outputs()
        return True

    # @intent:responsibility スロットリングなしで1命令だけ実行します。
    def step_once(self) -> bool:
        if not self._check_input():
            return False
        self._cpu.step()
        self._flush_outputs()
        return True
