import dataclasses

import pytest

from drills.elevator import (
    ButtonPressed,
    CarArrived,
    CarDoorClosed,
    CarDoorOpened,
    CarFloor,
    Direction,
    LobbyCall,
    car_arrived,
    car_door_closed,
    car_door_opened,
    car_floor_button_pressed,
    lobby_call_button_pressed,
    main,
)


def test_car_arrived():
    assert car_arrived(3) == CarArrived(3)
    assert car_arrived(3) != CarArrived(4)


def test_door_events():
    assert car_door_opened() == CarDoorOpened()
    assert car_door_closed() == CarDoorClosed()
    assert car_door_opened() != car_door_closed()


def test_lobby_call():
    event = lobby_call_button_pressed(0, Direction.UP)
    assert event == ButtonPressed(LobbyCall(Direction.UP, 0))
    assert event != lobby_call_button_pressed(0, Direction.DOWN)


def test_car_floor_button():
    assert car_floor_button_pressed(3) == ButtonPressed(CarFloor(3))


def test_event_fields_hold_the_arguments():
    event = lobby_call_button_pressed(7, Direction.DOWN)
    assert dataclasses.astuple(event) == ((Direction.DOWN, 7),)


def test_events_are_immutable():
    event = car_arrived(2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.floor = 5
    assert event == CarArrived(2)
    assert dataclasses.astuple(event) == (2,)


def test_main_prints_each_event(capsys):
    main()
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 6
    assert lines[2].startswith("The car door opened: ")
    assert lines[-1].startswith("The car has arrived on the 3rd floor: ")