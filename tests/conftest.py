import io
from contextlib import contextmanager
from typing import Callable, Iterable, List

import pytest
from blessed import Terminal
from blessed.keyboard import Keystroke

from lane_runner.config import GameConfig
from lane_runner.controls import InputEvent
from lane_runner.game import GameLoop
from lane_runner.renderer import screen_width
from lane_runner.screen import Screen


class ScriptedSampler:
    """Input sampler that jumps on the given (1-based) poll numbers."""

    def __init__(self, jump_on: Iterable[int] = ()):
        self.jump_on = set(jump_on)
        self.polls = 0
        self.started = False

    def poll(self) -> InputEvent:
        self.polls += 1
        return InputEvent.JUMP if self.polls in self.jump_on else InputEvent.NONE

    def wait_for_start(self):
        self.started = True


class FakeTerminal:
    """Just enough of blessed.Terminal for the input sampler."""

    def __init__(self, keys: Iterable = (), error: Exception = None):
        self.keys = list(keys)
        self.error = error
        self.timeouts: List = []
        self.cbreak_entered = 0
        self.cbreak_exited = 0

    def inkey(self, timeout=None):
        self.timeouts.append(timeout)
        if self.error is not None:
            raise self.error
        if not self.keys:
            return Keystroke('')
        key = self.keys.pop(0)
        return key if isinstance(key, Keystroke) else Keystroke(key)

    @contextmanager
    def cbreak(self):
        self.cbreak_entered += 1
        try:
            yield
        finally:
            self.cbreak_exited += 1


@pytest.fixture()
def term() -> Terminal:
    """Terminal writing to memory with styling off, so output is plain text."""
    return Terminal(stream=io.StringIO(), force_styling=None)


@pytest.fixture()
def quiet_config() -> GameConfig:
    """Reference settings, but obstacles only appear when a test places them."""
    return GameConfig(spawn_probability=0.0)


@pytest.fixture()
def make_loop(term) -> Callable[..., GameLoop]:
    def _make(config: GameConfig = None, jump_on: Iterable[int] = (),
              start: bool = True) -> GameLoop:
        config = config or GameConfig(spawn_probability=0.0)
        written: List[str] = []
        slept: List[float] = []
        loop = GameLoop(
            config,
            ScriptedSampler(jump_on),
            Screen(term, screen_width(config), config.frame_height),
            sleep=slept.append,
            write=written.append,
        )
        loop.written = written
        loop.slept = slept
        if start:
            loop.start()
        return loop

    return _make
