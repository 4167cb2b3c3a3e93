"""Unit tests for signal handling in rcscan CLI."""

import signal
from unittest.mock import patch

import pytest

from rcscan.cli.signal_handler import EXIT_SIGINT, EXIT_SIGPIPE, SignalHandler, cleanup, signal_handler


@pytest.fixture
def handler():
    return SignalHandler()


def test_initial_state(handler):
    assert not handler.interrupted
    assert handler.exit_code() is None


def test_install_registers_handlers(handler):
    with patch("rcscan.cli.signal_handler.signal.signal", return_value=signal.SIG_DFL) as mock_signal:
        handler.install()
    registered = {call.args[0] for call in mock_signal.call_args_list}
    assert signal.SIGINT in registered
    if hasattr(signal, "SIGPIPE"):
        assert signal.SIGPIPE in registered


def test_sigint_sets_flag_and_restores_previous(handler):
    sentinel = signal.default_int_handler
    with patch("rcscan.cli.signal_handler.signal.signal", return_value=sentinel) as mock_signal:
        handler.install()
        mock_signal.reset_mock()
        handler._handle(signal.SIGINT, None)

    assert handler.sigint_received.is_set()
    assert handler.interrupted
    assert handler.exit_code() == EXIT_SIGINT
    mock_signal.assert_called_once_with(signal.SIGINT, sentinel)


@pytest.mark.skipif(not hasattr(signal, "SIGPIPE"), reason="SIGPIPE not available on this platform")
def test_sigpipe_takes_precedence(handler):
    with patch("rcscan.cli.signal_handler.signal.signal"):
        handler._handle(signal.SIGINT, None)
        handler._handle(signal.SIGPIPE, None)
    assert handler.sigpipe_received.is_set()
    assert handler.exit_code() == EXIT_SIGPIPE


def test_reset(handler):
    handler.sigint_received.set()
    handler.reset()
    assert not handler.interrupted


def test_cleanup_redirects_stdout_after_interrupt():
    signal_handler.reset()
    signal_handler.sigpipe_received.set()
    try:
        with patch("rcscan.cli.signal_handler.os.open", return_value=99), patch(
            "rcscan.cli.signal_handler.os.dup2"
        ) as mock_dup2, patch("rcscan.cli.signal_handler.sys.stdout") as mock_stdout:
            mock_stdout.fileno.return_value = 1
            cleanup()
        mock_dup2.assert_called_once_with(99, 1)
    finally:
        signal_handler.reset()


def test_cleanup_does_nothing_without_interrupt():
    signal_handler.reset()
    with patch("rcscan.cli.signal_handler.os.dup2") as mock_dup2:
        cleanup()
    mock_dup2.assert_not_called()
