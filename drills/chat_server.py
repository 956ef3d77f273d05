"""A websocket chat server that relays every message to every client."""

from __future__ import annotations

import argparse
import asyncio
from typing import Any, Sequence

import websockets
from websockets.exceptions import ConnectionClosedOK

WELCOME = "Welcome to chat! Type a message"
DEFAULT_CAPACITY = 16


class Broadcaster:
    """Fan messages out to every subscribed queue.

    Each subscriber keeps at most ``capacity`` unread messages; when it
    falls further behind, its oldest messages are dropped.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._subscribers: list[asyncio.Queue] = []

    def subscribe(self) -> asyncio.Queue:
        """Return a new queue that receives every message sent from now on."""
        inbox: asyncio.Queue = asyncio.Queue(maxsize=self.capacity)
        self._subscribers.append(inbox)
        return inbox

    def unsubscribe(self, queue: asyncio.Queue) -> None:
        """Stop delivering messages to the queue."""
        try:
            self._subscribers.remove(queue)
        except ValueError:
            pass

    def send(self, message: str) -> int:
        """Deliver a message to all subscribers; return how many there are."""
        for inbox in self._subscribers:
            if inbox.full():
                inbox.get_nowait()
            inbox.put_nowait(message)
        return len(self._subscribers)


async def handle_connection(websocket: Any, broadcaster: Broadcaster) -> None:
    """Relay a client's text messages to everyone and everyone's to it."""
    inbox = broadcaster.subscribe()
    address = getattr(websocket, "remote_address", None)
    incoming = None
    outgoing = None
    try:
        await websocket.send(WELCOME)
        incoming = asyncio.ensure_future(websocket.recv())
        outgoing = asyncio.ensure_future(inbox.get())
        while True:
            done, _ = await asyncio.wait(
                {incoming, outgoing}, return_when=asyncio.FIRST_COMPLETED
            )
            if incoming in done:
                try:
                    message = incoming.result()
                except ConnectionClosedOK:
                    return
                if isinstance(message, str):
                    print(f"From client {address!r} {message!r}")
                    broadcaster.send(message)
                incoming = asyncio.ensure_future(websocket.recv())
            if outgoing in done:
                await websocket.send(outgoing.result())
                outgoing = asyncio.ensure_future(inbox.get())
    finally:
        for task in (incoming, outgoing):
            if task is not None:
                task.cancel()
        broadcaster.unsubscribe(inbox)


async def serve(host: str = "127.0.0.1", port: int = 2000) -> None:
    """Accept chat clients until cancelled."""
    broadcaster = Broadcaster()

    async def accept(websocket: Any) -> None:
        print(f"New connection from {websocket.remote_address!r}")
        await handle_connection(websocket, broadcaster)

    async with websockets.serve(accept, host, port):
        print(f"listening on port {port}")
        await asyncio.Future()


def main(argv: Sequence[str] | None = None) -> None:
    """Run the chat server."""
    parser = argparse.ArgumentParser(description="Run a websocket chat server.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=2000)
    args = parser.parse_args(argv)
    try:
        asyncio.run(serve(args.host, args.port))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()