import threading

import pytest

from models.screen import Screen
from services.navigation_service import EmptyStackError, NavigationController
from utils.constants import DASHBOARD_CARDS


class TestNavigationController:
    """Tests for the screen stack."""

    def test_starts_on_login(self, navigator):
        """Test a new controller holds only the login screen."""
        assert navigator.stack == (Screen.LOGIN,)
        assert navigator.current is Screen.LOGIN
        assert navigator.can_pop() is False

    def test_custom_initial_screen(self):
        """Test the initial screen can be chosen."""
        nav = NavigationController(initial=Screen.HOME)

        assert nav.stack == (Screen.HOME,)

    def test_push_then_pop(self, navigator):
        """Test push(Register) then pop() returns to [Login]."""
        navigator.push(Screen.REGISTER)
        assert navigator.stack == (Screen.LOGIN, Screen.REGISTER)
        assert navigator.current is Screen.REGISTER

        result = navigator.pop()

        assert result is Screen.LOGIN
        assert navigator.stack == (Screen.LOGIN,)

    def test_pop_last_screen_raises(self, navigator):
        """Test popping the only screen raises and leaves the stack unchanged."""
        with pytest.raises(EmptyStackError):
            navigator.pop()

        assert navigator.stack == (Screen.LOGIN,)

    def test_pop_after_emptying_to_root_raises(self, navigator):
        """Test pop fails again once the stack is back to one entry."""
        navigator.push(Screen.REGISTER)
        navigator.pop()

        with pytest.raises(EmptyStackError):
            navigator.pop()
        assert navigator.current is Screen.LOGIN

    def test_replace_top_keeps_length(self, navigator):
        """Test replace_top(Home) on [Login] yields [Home]."""
        navigator.replace_top(Screen.HOME)

        assert navigator.stack == (Screen.HOME,)

    def test_replaced_screen_is_unreachable(self, navigator):
        """Test the replaced screen cannot be popped back to."""
        navigator.push(Screen.REGISTER)
        navigator.replace_top(Screen.HOME)

        assert navigator.stack == (Screen.LOGIN, Screen.HOME)
        assert navigator.pop() is Screen.LOGIN
        assert Screen.REGISTER not in navigator.stack

    def test_reset_to_clears_stack(self):
        """Test reset_to(Login) on [Home, Profile, Settings] yields [Login]."""
        nav = NavigationController(initial=Screen.HOME)
        nav.push(Screen.PROFILE)
        nav.push(Screen.SETTINGS)

        nav.reset_to(Screen.LOGIN)

        assert nav.stack == (Screen.LOGIN,)
        with pytest.raises(EmptyStackError):
            nav.pop()

    def test_stack_never_empty_after_mixed_operations(self, navigator):
        """Test the stack keeps at least one entry through a long session."""
        navigator.push(Screen.REGISTER)
        navigator.pop()
        navigator.replace_top(Screen.HOME)
        navigator.push(Screen.EXPENSE_LIST)
        navigator.push(Screen.EXPENSE_LIST)
        navigator.replace_top(Screen.MESSAGES)
        navigator.reset_to(Screen.LOGIN)
        navigator.replace_top(Screen.HOME)

        assert len(navigator.stack) >= 1
        assert navigator.stack == (Screen.HOME,)

    def test_stack_is_a_snapshot(self, navigator):
        """Test mutating through the stack property is impossible."""
        snapshot = navigator.stack
        navigator.push(Screen.REGISTER)

        assert snapshot == (Screen.LOGIN,)
        assert isinstance(navigator.stack, tuple)

    @pytest.mark.parametrize("bad", ["home", None, 3])
    def test_rejects_non_screen_arguments(self, navigator, bad):
        """Test every mutating operation rejects values that are not Screens."""
        for op in (navigator.push, navigator.replace_top, navigator.reset_to):
            with pytest.raises(TypeError):
                op(bad)

        assert navigator.stack == (Screen.LOGIN,)

    def test_listeners_see_each_transition(self, navigator):
        """Test listeners receive the new current screen."""
        seen = []
        navigator.add_listener(seen.append)

        navigator.push(Screen.REGISTER)
        navigator.pop()
        navigator.replace_top(Screen.HOME)
        navigator.reset_to(Screen.LOGIN)

        assert seen == [Screen.REGISTER, Screen.LOGIN, Screen.HOME, Screen.LOGIN]

    def test_failed_pop_does_not_notify(self, navigator):
        """Test a rejected pop does not reach listeners."""
        seen = []
        navigator.add_listener(seen.append)

        with pytest.raises(EmptyStackError):
            navigator.pop()

        assert seen == []

    def test_remove_listener(self, navigator):
        """Test removed listeners stop receiving updates."""
        seen = []
        navigator.add_listener(seen.append)
        navigator.remove_listener(seen.append)
        navigator.remove_listener(seen.append)

        navigator.push(Screen.HOME)

        assert seen == []

    def test_listener_may_navigate(self, navigator):
        """Test a listener can trigger another transition without deadlocking."""
        def redirect(screen):
            if screen is Screen.MESSAGES:
                navigator.replace_top(Screen.HOME)

        navigator.add_listener(redirect)
        navigator.push(Screen.MESSAGES)

        assert navigator.stack == (Screen.LOGIN, Screen.HOME)

    def test_concurrent_reset_and_push_keep_invariant(self, navigator):
        """Test resets racing with pushes never leave an empty stack."""
        def pusher():
            for _ in range(500):
                navigator.push(Screen.EXPENSE_LIST)

        empty_seen = []

        def resetter():
            for _ in range(500):
                navigator.reset_to(Screen.HOME)
                if not navigator.stack:
                    empty_seen.append(True)

        threads = [threading.Thread(target=pusher), threading.Thread(target=resetter)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert empty_seen == []
        stack = navigator.stack
        assert stack[0] is Screen.HOME
        assert all(s is Screen.EXPENSE_LIST for s in stack[1:])


class TestScreen:
    """Tests for the Screen enumeration."""

    def test_every_screen_has_a_title(self):
        for screen in Screen:
            assert screen.title

    def test_lookup_by_value(self):
        assert Screen("expense_list") is Screen.EXPENSE_LIST
        assert Screen.EXPENSE_LIST.title == "Expenses"

    def test_dashboard_cards_target_screens(self):
        """Test every dashboard card points at a Screen member."""
        targets = [screen for *_, screen in DASHBOARD_CARDS]

        assert all(isinstance(s, Screen) for s in targets)
        assert targets[0] is Screen.EXPENSE_LIST
