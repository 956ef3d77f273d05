"""Dining philosophers as cooperating asyncio tasks."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import AsyncIterator, Iterable, Sequence

PHILOSOPHERS = ("Socrates", "Hypatia", "Plato", "Aristotle", "Pythagoras")

_DONE = object()


async def _try_acquire(lock: asyncio.Lock) -> bool:
    """Take the lock if it is free right now, without waiting for it."""
    if lock.locked():
        return False
    await lock.acquire()
    return True


@dataclass
class Philosopher:
    """A philosopher who shares a fork with each neighbour."""

    name: str
    left_fork: asyncio.Lock
    right_fork: asyncio.Lock
    thoughts: asyncio.Queue
    eating_time: float = 0.005

    async def think(self) -> None:
        """Share a new idea."""
        await self.thoughts.put(f"Eureka! {self.name} has a new idea!")

    async def eat(self) -> None:
        """Keep trying until both forks are free, then eat."""
        while True:
            has_left = await _try_acquire(self.left_fork)
            has_right = await _try_acquire(self.right_fork)
            if has_left and has_right:
                break
            # Put down whatever was picked up and let the others progress.
            if has_left:
                self.left_fork.release()
            if has_right:
                self.right_fork.release()
            await asyncio.sleep(0.001)
        try:
            print(f"{self.name} is eating...")
            await asyncio.sleep(self.eating_time)
        finally:
            self.left_fork.release()
            self.right_fork.release()


async def _live(philosopher: Philosopher, rounds: int) -> None:
    for _ in range(rounds):
        await philosopher.think()
        await philosopher.eat()


async def dine(
    names: Iterable[str] = PHILOSOPHERS, rounds: int = 100
) -> AsyncIterator[str]:
    """Seat the philosophers at a round table and yield their thoughts.

    Each philosopher thinks and eats ``rounds`` times. A single philosopher
    could never hold the same fork twice, so that is rejected with ValueError.
    """
    names = list(names)
    if len(names) == 1:
        raise ValueError("at least two philosophers are needed to share forks")

    thoughts: asyncio.Queue = asyncio.Queue(maxsize=10)
    forks = [asyncio.Lock() for _ in names]
    philosophers = [
        Philosopher(name, forks[index], forks[(index + 1) % len(forks)], thoughts)
        for index, name in enumerate(names)
    ]
    tasks = [asyncio.create_task(_live(philosopher, rounds)) for philosopher in philosophers]

    async def finish() -> None:
        try:
            await asyncio.gather(*tasks)
        finally:
            await thoughts.put(_DONE)

    finisher = asyncio.create_task(finish())
    try:
        while True:
            thought = await thoughts.get()
            if thought is _DONE:
                break
            yield thought
        await finisher
    finally:
        for task in (*tasks, finisher):
            task.cancel()


async def _print_thoughts() -> None:
    async for thought in dine():
        print(f"Here is a thought: {thought}")


def main(argv: Sequence[str] | None = None) -> None:
    """Let the five philosophers dine and print their thoughts."""
    asyncio.run(_print_thoughts())


if __name__ == "__main__":
    main()