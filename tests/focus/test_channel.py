"""Tests for the worker reporting channel."""

import queue

import pytest

from tasklog.focus import Channel, ChannelClosed


def test_fifo_order():
    channel = Channel()
    for i in range(3):
        assert channel.send(i)
    assert [channel.try_recv() for _ in range(3)] == [0, 1, 2]


def test_empty_while_open():
    with pytest.raises(queue.Empty):
        Channel().try_recv()


def test_closed_after_drain():
    channel = Channel()
    channel.send("last")
    channel.close()

    assert channel.closed
    assert channel.try_recv() == "last"
    with pytest.raises(ChannelClosed):
        channel.try_recv()


def test_send_after_detach_fails():
    channel = Channel()
    channel.detach()
    assert channel.send(1) is False


def test_send_after_close_fails():
    channel = Channel()
    channel.close()
    assert channel.send(1) is False
