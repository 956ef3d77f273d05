import asyncio
import io
import threading
from unittest import mock

import pytest
import websockets

from drills.chat_client import run_client
from drills.chat_server import Broadcaster, handle_connection

TIMEOUT = 5


class _BlockingInput:
    """Standard input that stays silent until released."""

    def __init__(self):
        self.release = threading.Event()

    def readline(self):
        self.release.wait(TIMEOUT)
        return ""


def _uri(server):
    port = server.sockets[0].getsockname()[1]
    return f"ws://127.0.0.1:{port}"


@pytest.mark.asyncio
async def test_prints_messages_and_stops_when_server_hangs_up(capsys):
    async def greet(websocket):
        await websocket.send("hi")

    stdin = _BlockingInput()
    async with websockets.serve(greet, "127.0.0.1", 0) as server:
        try:
            with mock.patch("sys.stdin", stdin):
                await asyncio.wait_for(run_client(_uri(server)), TIMEOUT)
        finally:
            stdin.release.set()
    assert "From server: hi" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_typed_lines_are_sent_without_line_endings():
    broadcaster = Broadcaster()
    listener = broadcaster.subscribe()
    async with websockets.serve(
        lambda ws: handle_connection(ws, broadcaster), "127.0.0.1", 0
    ) as server:
        with mock.patch("sys.stdin", io.StringIO("one\r\ntwo\n")):
            await asyncio.wait_for(run_client(_uri(server)), TIMEOUT)
        assert await asyncio.wait_for(listener.get(), TIMEOUT) == "one"
        assert await asyncio.wait_for(listener.get(), TIMEOUT) == "two"