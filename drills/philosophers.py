"""Dining philosophers with threads and blocking locks."""

from __future__ import annotations

import queue
import threading
import time
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

PHILOSOPHERS = ("Socrates", "Hypatia", "Plato", "Aristotle", "Pythagoras")


@dataclass
class Philosopher:
    """A philosopher who shares a fork with each neighbour."""

    name: str
    left_fork: threading.Lock
    right_fork: threading.Lock
    thoughts: queue.Queue
    eating_time: float = 0.01

    def think(self) -> None:
        """Share a new idea."""
        self.thoughts.put(f"Eureka! {self.name} has a new idea!")

    def eat(self) -> None:
        """Pick up both forks, waiting as long as needed, then eat."""
        print(f"{self.name} is trying to eat")
        with self.left_fork, self.right_fork:
            print(f"{self.name} is eating...")
            time.sleep(self.eating_time)


def _live(philosopher: Philosopher, rounds: int) -> None:
    try:
        for _ in range(rounds):
            philosopher.eat()
            philosopher.think()
    finally:
        philosopher.thoughts.put(None)


def dine(names: Iterable[str] = PHILOSOPHERS, rounds: int = 100) -> Iterator[str]:
    """Seat the philosophers at a round table and yield their thoughts.

    Each philosopher eats and thinks ``rounds`` times. A single philosopher
    would need the same fork twice, so that is rejected with ValueError.
    """
    names = list(names)
    if len(names) == 1:
        raise ValueError("at least two philosophers are needed to share forks")

    thoughts: queue.Queue[Optional[str]] = queue.Queue(maxsize=10)
    forks = [threading.Lock() for _ in names]
    threads = []
    for index, name in enumerate(names):
        left, right = forks[index], forks[(index + 1) % len(forks)]
        # Break the symmetry so that the table cannot deadlock.
        if index == len(forks) - 1:
            left, right = right, left
        philosopher = Philosopher(name, left, right, thoughts)
        threads.append(
            threading.Thread(target=_live, args=(philosopher, rounds), name=name, daemon=True)
        )
    for thread in threads:
        thread.start()

    finished = 0
    while finished < len(threads):
        thought = thoughts.get()
        if thought is None:
            finished += 1
        else:
            yield thought
    for thread in threads:
        thread.join()


def main(argv: Sequence[str] | None = None) -> None:
    """Let the five philosophers dine and print their thoughts."""
    for thought in dine():
        print(thought)


if __name__ == "__main__":
    main()