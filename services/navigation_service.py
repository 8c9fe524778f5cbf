import threading
from typing import Callable

from logger import get_logger
from models.screen import Screen

logger = get_logger()


class EmptyStackError(RuntimeError):
    """Raised when popping would leave the navigation stack empty."""


class NavigationController:
    """Stack of screens; the top entry is the one on display.

    The stack always holds at least one screen. Listeners are called with the
    new current screen after each successful transition.

    Notification order matches stack order only when navigation happens on a
    single thread.
    """

    def __init__(self, initial: Screen = Screen.LOGIN):
        _check_screen(initial)
        self._stack: list[Screen] = [initial]
        self._lock = threading.Lock()
        self._listeners: list[Callable[[Screen], None]] = []

    # ── State ────────────────────────────────────────────────────────────────
    @property
    def current(self) -> Screen:
        with self._lock:
            return self._stack[-1]

    @property
    def stack(self) -> tuple[Screen, ...]:
        """Snapshot of the stack, bottom first."""
        with self._lock:
            return tuple(self._stack)

    def can_pop(self) -> bool:
        with self._lock:
            return len(self._stack) > 1

    # ── Transitions ──────────────────────────────────────────────────────────
    def push(self, screen: Screen) -> Screen:
        _check_screen(screen)
        with self._lock:
            self._stack.append(screen)
            depth = len(self._stack)
        logger.debug("push %s (depth %d)", screen.name, depth)
        return self._notify(screen)

    def pop(self) -> Screen:
        with self._lock:
            if len(self._stack) <= 1:
                top = self._stack[-1]
                logger.warning("Refusing to pop last screen %s", top.name)
                raise EmptyStackError(f"Cannot pop {top.name}: it is the only screen on the stack.")
            removed = self._stack.pop()
            screen = self._stack[-1]
        logger.debug("pop %s -> %s", removed.name, screen.name)
        return self._notify(screen)

    def replace_top(self, screen: Screen) -> Screen:
        _check_screen(screen)
        with self._lock:
            replaced = self._stack[-1]
            self._stack[-1] = screen
        logger.debug("replace %s -> %s", replaced.name, screen.name)
        return self._notify(screen)

    def reset_to(self, screen: Screen) -> Screen:
        _check_screen(screen)
        with self._lock:
            dropped = len(self._stack)
            self._stack = [screen]
        logger.debug("reset to %s (dropped %d)", screen.name, dropped)
        return self._notify(screen)

    # ── Listeners ────────────────────────────────────────────────────────────
    def add_listener(self, callback: Callable[[Screen], None]) -> None:
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[Screen], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self, screen: Screen) -> Screen:
        # Called outside the lock so listeners may navigate again.
        for callback in list(self._listeners):
            callback(screen)
        return screen


def _check_screen(screen) -> None:
    if not isinstance(screen, Screen):
        raise TypeError(f"Expected a Screen, got {type(screen).__name__}: {screen!r}")
