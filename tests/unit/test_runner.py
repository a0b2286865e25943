"""
Tests for ValidationRunner and ProgressChannel.

Tests cover:
- Channel ordering, capacity, close and receive timeouts
- Two updates per validator and a single close
- Single-use runners
- Background execution and repository persistence
"""

import queue
import threading
import time
from datetime import timedelta
from unittest.mock import patch

import pytest

from hyprpreflight.config import PreflightConfig
from hyprpreflight.context import ValidationContext
from hyprpreflight.errors import ChannelClosedError, RunnerAlreadyStartedError
from hyprpreflight.runner import ProgressChannel, ProgressUpdate, ValidationRunner
from hyprpreflight.validation import (
    InMemorySessionRepository,
    RequirementName,
    ValidationOrchestrator,
    ValidationOutcome,
    ValidationStatus,
)
from tests.fixtures.fake_detectors import FakeDiskSpaceDetector, LOW_SPACE, make_validators


def update(name=RequirementName.DISK_SPACE, message="msg"):
    return ProgressUpdate(requirement_name=name, status=None, message=message)


class TestProgressChannel:
    """Tests for ProgressChannel."""

    def test_fifo(self):
        """Should deliver updates in send order."""
        channel = ProgressChannel(5)
        for i in range(3):
            channel.send(update(message=str(i)))
        channel.close()
        assert [u.message for u in channel] == ["0", "1", "2"]

    def test_close_is_idempotent(self):
        """Should allow close() more than once."""
        channel = ProgressChannel(1)
        channel.close()
        channel.close()
        assert channel.closed
        assert channel.receive() is None

    def test_close_does_not_need_a_slot(self):
        """Should close a full channel without blocking."""
        channel = ProgressChannel(2)
        channel.send(update())
        channel.send(update())
        channel.close()
        assert len(list(channel)) == 2

    def test_send_after_close(self):
        """Should raise ChannelClosedError."""
        channel = ProgressChannel(1)
        channel.close()
        with pytest.raises(ChannelClosedError):
            channel.send(update())

    def test_send_blocks_until_space(self):
        """Should block a producer while the buffer is full."""
        channel = ProgressChannel(1)
        channel.send(update(message="first"))
        sent = threading.Event()

        def producer():
            channel.send(update(message="second"))
            sent.set()

        thread = threading.Thread(target=producer)
        thread.start()
        assert not sent.wait(0.05)
        assert channel.receive().message == "first"
        assert sent.wait(2)
        thread.join(2)
        assert channel.receive().message == "second"

    def test_blocked_sender_released_by_close(self):
        """Should wake a blocked sender with ChannelClosedError on close."""
        channel = ProgressChannel(1)
        channel.send(update())
        errors = []

        def producer():
            try:
                channel.send(update())
            except ChannelClosedError as e:
                errors.append(e)

        thread = threading.Thread(target=producer)
        thread.start()
        channel.close()
        thread.join(2)
        assert len(errors) == 1

    def test_receive_timeout(self):
        """Should raise queue.Empty when nothing arrives in time."""
        with pytest.raises(queue.Empty):
            ProgressChannel(1).receive(timeout=0.01)

    def test_invalid_capacity(self):
        """Should reject a zero capacity."""
        with pytest.raises(ValueError):
            ProgressChannel(0)


class TestRun:
    """Tests for ValidationRunner.run on the calling thread."""

    def test_two_updates_per_validator(self):
        """Should send an in-progress and a resolved update for every check."""
        runner = ValidationRunner(make_validators(), buffer_size=10)
        runner.run(ValidationContext.background())

        updates = list(runner.progress())
        assert len(updates) == 10
        assert [u.in_progress for u in updates] == [True, False] * 5
        assert updates[0].message == "Detecting Debian version..."
        assert updates[1].message == "Detected: trixie (13)"
        assert updates[1].status is ValidationStatus.PASS
        assert updates[1].result is runner.session().results()[0]
        assert runner.progress().closed

    def test_session_completed(self):
        """Should complete the session before closing the channel."""
        runner = ValidationRunner(make_validators(disk=FakeDiskSpaceDetector(LOW_SPACE)))
        runner.run()
        session = runner.session()
        assert session.is_completed
        assert session.overall_result is ValidationOutcome.BLOCKED
        messages = [u.message for u in runner.progress()]
        assert "Only 5.20 GB available" in messages

    def test_pre_cancelled_context(self):
        """Should still resolve every check and close the channel."""
        ctx = ValidationContext.background()
        ctx.cancel()
        runner = ValidationRunner(make_validators())
        runner.run(ctx)
        assert len(runner.session().results()) == 5
        assert len(list(runner.progress())) == 10

    def test_second_run_raises(self):
        """Should refuse a second run and leave the channel alone."""
        runner = ValidationRunner(make_validators())
        runner.run()
        with pytest.raises(RunnerAlreadyStartedError):
            runner.run()
        assert len(runner.progress()) == 10

    def test_empty_validators(self):
        """Should close immediately with a successful empty session."""
        runner = ValidationRunner([])
        runner.run()
        assert list(runner.progress()) == []
        assert runner.session().overall_result is ValidationOutcome.SUCCESS

    def test_channel_closed_on_failure(self):
        """Should close the channel even when the run raises."""
        runner = ValidationRunner(make_validators())
        with patch.object(ValidationOrchestrator, "execute_validations_with_progress",
                          side_effect=RuntimeError("boom")):
            with pytest.raises(RuntimeError):
                runner.run()
        assert runner.progress().closed

    def test_duration_excludes_idle_time(self):
        """Should start the session clock when the run begins."""
        runner = ValidationRunner(make_validators())
        created = runner.session().started_at
        time.sleep(0.1)
        before = time.monotonic()
        runner.run()
        session = runner.session()
        assert session.started_at - created >= timedelta(seconds=0.1)
        assert session.duration() <= timedelta(seconds=time.monotonic() - before)

    def test_saves_to_repository(self):
        """Should save the completed session."""
        repository = InMemorySessionRepository()
        runner = ValidationRunner(make_validators(), repository=repository)
        runner.run()
        assert repository.find_latest() is runner.session()


class TestStart:
    """Tests for background execution."""

    def test_background_with_consumer(self):
        """Should stream through a small buffer to a concurrent consumer."""
        runner = ValidationRunner(make_validators(), buffer_size=1)
        thread = runner.start(ValidationContext.background())
        updates = list(runner.progress())
        thread.join(5)

        assert not thread.is_alive()
        assert thread.daemon
        assert thread.name.startswith("preflight-")
        assert len(updates) == 10
        assert runner.session().is_completed

    def test_start_twice(self):
        """Should refuse to start twice."""
        runner = ValidationRunner(make_validators())
        thread = runner.start()
        with pytest.raises(RunnerAlreadyStartedError):
            runner.start()
        list(runner.progress())
        thread.join(5)

    def test_cancel_from_consumer(self):
        """Should finish quickly when the consumer cancels mid-run."""
        gate = threading.Event()
        ctx = ValidationContext.background()
        disk = FakeDiskSpaceDetector(LOW_SPACE, gate=gate)
        runner = ValidationRunner(make_validators(disk=disk))
        thread = runner.start(ctx)

        for received in runner.progress():
            if received.requirement_name is RequirementName.DISK_SPACE and received.in_progress:
                ctx.cancel()
                gate.set()
        thread.join(5)

        results = runner.session().results()
        assert len(results) == 5
        assert results[3].guidance.message == "Internet Connectivity check did not complete"


class TestDefault:
    """Tests for ValidationRunner.default."""

    def test_uses_config(self):
        """Should build the system validators and buffer size from config."""
        runner = ValidationRunner.default(PreflightConfig(progress_buffer_size=3))
        assert len(runner.validators) == 5
        assert runner.progress().capacity == 3
