"""Tests for LifecycleGuard."""

from PyQt6 import sip
from PyQt6.QtCore import QObject

from contactsync.core import LifecycleGuard


def test_runs_effect_while_mounted():
    guard = LifecycleGuard()
    calls = []

    guard.run_if_mounted(lambda: calls.append("ran"))

    assert guard.is_mounted
    assert calls == ["ran"]


def test_teardown_silences_effects_for_good():
    """No effect runs after teardown, however often teardown is repeated."""
    guard = LifecycleGuard()
    calls = []

    guard.teardown()
    guard.teardown()
    guard.run_if_mounted(lambda: calls.append("ran"))
    guard.teardown()
    guard.run_if_mounted(lambda: calls.append("ran again"))

    assert not guard.is_mounted
    assert calls == []


def test_guarded_wrapper_forwards_arguments():
    guard = LifecycleGuard()
    received = []
    callback = guard.guarded(lambda value, *, flag: received.append((value, flag)))

    callback(1, flag=True)
    guard.teardown()
    callback(2, flag=False)

    assert received == [(1, True)]


def test_bind_tears_down_when_owner_is_destroyed(qapp):
    owner = QObject()
    guard = LifecycleGuard("owner").bind(owner)
    assert guard.is_mounted

    sip.delete(owner)

    assert not guard.is_mounted
