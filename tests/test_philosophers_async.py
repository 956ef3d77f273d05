import asyncio
import collections

import pytest

from drills.philosophers_async import Philosopher, dine


def _philosopher(name="Plato"):
    return Philosopher(name, asyncio.Lock(), asyncio.Lock(), asyncio.Queue(), eating_time=0.001)


@pytest.mark.asyncio
async def test_think_shares_an_idea():
    philosopher = _philosopher("Plato")
    await philosopher.think()
    assert philosopher.thoughts.get_nowait() == "Eureka! Plato has a new idea!"


@pytest.mark.asyncio
async def test_eat_releases_forks(capsys):
    philosopher = _philosopher("Hypatia")
    await philosopher.eat()
    assert not philosopher.left_fork.locked()
    assert not philosopher.right_fork.locked()
    assert "Hypatia is eating..." in capsys.readouterr().out


@pytest.mark.asyncio
async def test_eat_waits_while_a_fork_is_held():
    philosopher = _philosopher()
    await philosopher.left_fork.acquire()
    eating = asyncio.create_task(philosopher.eat())
    await asyncio.sleep(0.02)
    assert not eating.done()
    assert not philosopher.right_fork.locked()
    philosopher.left_fork.release()
    await asyncio.wait_for(eating, timeout=5)
    assert not philosopher.left_fork.locked()
    assert not philosopher.right_fork.locked()


@pytest.mark.asyncio
async def test_dine_collects_every_thought():
    names = ["Socrates", "Hypatia", "Plato", "Aristotle", "Pythagoras"]
    rounds = 3
    thoughts = [thought async for thought in dine(names, rounds)]
    assert len(thoughts) == len(names) * rounds
    tally = collections.Counter(thoughts)
    assert tally == {f"Eureka! {name} has a new idea!": rounds for name in names}


@pytest.mark.asyncio
async def test_dine_with_nobody():
    assert [thought async for thought in dine([], 4)] == []


@pytest.mark.asyncio
async def test_single_philosopher_is_rejected():
    with pytest.raises(ValueError):
        [thought async for thought in dine(["Socrates"], 1)]