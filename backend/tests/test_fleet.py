"""
Tests for the fleet records, the capacity-bounded Fleet and the console menu.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fleet import AddResult, Fleet, Vehicle, VehicleKind  # noqa: E402
import cli.fleet_menu as fleet_menu  # noqa: E402
from cli.fleet_menu import FleetConsole  # noqa: E402


def make_car(n=1):
    return Vehicle.car(f"Model{n}", f"Make{n}", 1000 * n, "45", "Sedan", "5")


def make_booking():
    return Vehicle.booking("Civic", "Honda", 500, "30", "2025-01-01", "2025-01-05")


class TestVehicle:
    """Tests for the Vehicle record."""

    def test_car_fields(self):
        car = make_car()

        assert car.kind is VehicleKind.CAR
        assert car.car_type == "Sedan"
        assert car.start_date is None
        assert car.is_available is True

    def test_car_details(self):
        assert make_car().details() == [
            ("Model", "Model1"),
            ("Make", "Make1"),
            ("Mileage", "1000"),
            ("Rate Per Day", "45"),
            ("Type", "Sedan"),
            ("Seating Capacity", "5"),
        ]

    def test_booking_details(self):
        details = dict(make_booking().details())

        assert details["Start Date"] == "2025-01-01"
        assert details["End Date"] == "2025-01-05"
        assert "Type" not in details

    def test_rental_transitions(self):
        car = make_car()

        assert car.end_rental() is False
        assert car.start_rental() is True
        assert car.is_available is False
        assert car.start_rental() is False
        assert car.end_rental() is True
        assert car.is_available is True

    def test_negative_mileage_raises(self):
        with pytest.raises(ValueError):
            Vehicle.car("A", "B", -1, "10", "Sedan", "4")


class TestFleet:
    """Tests for Fleet capacity handling."""

    def test_add_until_full(self):
        fleet = Fleet(capacity=2)

        assert fleet.add_car(make_car(1)) is AddResult.ADDED
        assert fleet.add_car(make_car(2)) is AddResult.ADDED
        assert fleet.is_full is True
        assert fleet.add_car(make_car(3)) is AddResult.CAPACITY_EXCEEDED
        assert len(fleet) == 2
        assert [car.model for car in fleet.cars()] == ["Model1", "Model2"]

    def test_booking_capacity_is_separate(self):
        fleet = Fleet(capacity=1, booking_capacity=1)
        fleet.add_car(make_car())

        assert fleet.add_booking(make_booking()) is AddResult.ADDED
        assert fleet.add_booking(make_booking()) is AddResult.CAPACITY_EXCEEDED
        assert len(fleet.bookings()) == 1

    def test_wrong_kind_raises(self):
        fleet = Fleet()

        with pytest.raises(ValueError):
            fleet.add_car(make_booking())
        with pytest.raises(ValueError):
            fleet.add_booking(make_car())

    def test_cars_is_a_snapshot(self):
        fleet = Fleet()
        cars = fleet.cars()
        fleet.add_car(make_car())

        assert cars == ()

    def test_non_positive_capacity_raises(self):
        with pytest.raises(ValueError):
            Fleet(capacity=0)


def run_console(inputs, fleet=None):
    fleet = fleet or Fleet()
    answers = iter(inputs)
    output = []

    def input_fn(prompt):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    FleetConsole(fleet, input_fn=input_fn, output_fn=output.append).run()
    return fleet, output


class TestFleetConsole:
    """Tests for the console menu with scripted input."""

    def test_add_then_view(self):
        fleet, output = run_console([
            "2", "Corolla", "Toyota", "lots", "12000", "45", "Sedan", "5",
            "1",
            "3",
        ])

        assert len(fleet) == 1
        assert "Please enter a whole number." in output
        assert "New car added successfully!" in output
        assert "Mileage: 12000" in output
        assert "---- Car #1 ----" in output
        assert "Make: Toyota" in output
        assert "Model: Corolla" in output
        assert output[-1] == "Goodbye!"

    def test_view_empty_fleet(self):
        _, output = run_console(["1", "3"])

        assert "No cars added yet." in output

    def test_invalid_option(self):
        _, output = run_console(["7", "abc", "3"])

        assert "Invalid option!" in output
        assert "Please enter a whole number." in output

    def test_negative_mileage_reprompts(self):
        fleet, output = run_console(["2", "A", "B", "-5", "10", "40", "SUV", "7", "3"])

        assert "Please enter a number of at least 0." in output
        assert fleet.cars()[0].mileage == 10

    def test_full_fleet(self):
        fleet = Fleet(capacity=1)
        fleet.add_car(make_car())

        _, output = run_console(["2", "3"], fleet=fleet)

        assert "Fleet is full!" in output
        assert len(fleet) == 1

    def test_end_of_input_exits(self):
        _, output = run_console(["2", "Corolla"])

        assert output[-1] == "Goodbye!"

    def test_main_uses_capacity_flag(self, monkeypatch, capsys):
        answers = iter(["2", "A", "B", "1", "10", "SUV", "7", "2", "3"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

        assert fleet_menu.main(["--capacity", "1"]) == 0

        out = capsys.readouterr().out
        assert "New car added successfully!" in out
        assert "Fleet is full!" in out
        assert "Goodbye!" in out
