"""Unit tests for the signal handler module in the lstree CLI."""

import os
import signal
import sys
from unittest.mock import MagicMock, patch

import pytest

from lstree.cli.signal_handler import (
    EXIT_SIGINT,
    EXIT_SIGPIPE,
    SignalHandler,
    cleanup,
    setup_signal_handling,
    signal_handler,
)


@pytest.fixture
def fresh_signal_handler():
    """Create a fresh SignalHandler instance so the singleton is not disturbed."""
    return SignalHandler()


@pytest.fixture
def clean_singleton():
    """Clear the singleton's events for the test and restore them afterwards."""
    saved = (signal_handler.sigpipe_received.is_set(), signal_handler.sigint_received.is_set())
    signal_handler.sigpipe_received.clear()
    signal_handler.sigint_received.clear()
    yield signal_handler
    for event, was_set in zip((signal_handler.sigpipe_received, signal_handler.sigint_received), saved):
        if was_set:
            event.set()
        else:
            event.clear()


@pytest.fixture
def mock_os():
    with patch("lstree.cli.signal_handler.os", autospec=True) as mock:
        mock.open.return_value = 123
        mock.devnull = "/dev/null"
        mock.O_WRONLY = os.O_WRONLY
        yield mock


def test_initial_state(fresh_signal_handler):
    assert not fresh_signal_handler.interrupted()
    assert fresh_signal_handler.exit_code() is None


def test_handle_sigpipe(fresh_signal_handler):
    with patch("signal.signal") as mock_signal:
        fresh_signal_handler.handle_sigpipe(signal.SIGPIPE, MagicMock())

    assert fresh_signal_handler.sigpipe_received.is_set()
    assert fresh_signal_handler.interrupted()
    assert fresh_signal_handler.exit_code() == EXIT_SIGPIPE == 141
    mock_signal.assert_called_once_with(signal.SIGPIPE, fresh_signal_handler.original_sigpipe_handler)


def test_handle_sigint(fresh_signal_handler):
    with patch("signal.signal") as mock_signal:
        fresh_signal_handler.handle_sigint(signal.SIGINT, None)

    assert fresh_signal_handler.sigint_received.is_set()
    assert fresh_signal_handler.exit_code() == EXIT_SIGINT == 130
    mock_signal.assert_called_once_with(signal.SIGINT, fresh_signal_handler.original_sigint_handler)


def test_sigpipe_takes_precedence(fresh_signal_handler):
    fresh_signal_handler.sigint_received.set()
    fresh_signal_handler.sigpipe_received.set()

    assert fresh_signal_handler.exit_code() == EXIT_SIGPIPE


def test_setup_signal_handling():
    with patch("signal.signal") as mock_signal:
        setup_signal_handling()

    assert mock_signal.call_count == 2
    mock_signal.assert_any_call(signal.SIGPIPE, signal_handler.handle_sigpipe)
    mock_signal.assert_any_call(signal.SIGINT, signal_handler.handle_sigint)


def test_cleanup_with_no_signals(clean_singleton, mock_os):
    cleanup()

    mock_os.open.assert_not_called()
    mock_os.dup2.assert_not_called()


@pytest.mark.parametrize("event_name", ["sigpipe_received", "sigint_received"])
def test_cleanup_after_signal(clean_singleton, mock_os, event_name):
    getattr(clean_singleton, event_name).set()

    with patch.object(sys, "stdout") as mock_stdout:
        mock_stdout.fileno.return_value = 1
        cleanup()

    mock_os.open.assert_called_once_with("/dev/null", os.O_WRONLY)
    mock_os.dup2.assert_called_once_with(123, 1)

