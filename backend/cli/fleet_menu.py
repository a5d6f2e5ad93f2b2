#!/usr/bin/env python3
"""
Console menu for the car-rental fleet.

Options:
  1: View Cars  - list make and model of every car in the fleet
  2: Add Car    - prompt for the car's fields and store it (if there is room)
  3: Exit

Usage:
    python backend/cli/fleet_menu.py [--capacity 10]
"""

import argparse
import logging
import os
import sys
from typing import Callable, Optional

# Add backend to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import LOG_FORMAT, load_settings  # noqa: E402
from fleet import AddResult, Fleet, Vehicle  # noqa: E402

BANNER = "************** Welcome to CAR RENTAL MANAGEMENT *****************"


class FleetConsole:
    """Menu loop over a Fleet; input and output are injectable for tests."""

    def __init__(
        self,
        fleet: Fleet,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
    ):
        self.fleet = fleet
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print

    def ask(self, prompt: str) -> str:
        return self.input_fn(prompt).strip()

    def ask_int(self, prompt: str, minimum: Optional[int] = None) -> int:
        """Re-prompt until a whole number (>= minimum, if given) is entered."""
        while True:
            raw = self.ask(prompt)
            try:
                value = int(raw)
            except ValueError:
                self.output_fn("Please enter a whole number.")
                continue
            if minimum is not None and value < minimum:
                self.output_fn(f"Please enter a number of at least {minimum}.")
                continue
            return value

    def view_cars(self) -> None:
        self.output_fn("Viewing all cars in the fleet:")

        cars = self.fleet.cars()
        if not cars:
            self.output_fn("No cars added yet.")
            return

        for number, car in enumerate(cars, start=1):
            self.output_fn(f"---- Car #{number} ----")
            self.output_fn(f"Make: {car.make}")
            self.output_fn(f"Model: {car.model}")
            self.output_fn("")

    def add_car(self) -> Optional[AddResult]:
        if self.fleet.is_full:
            self.output_fn("Fleet is full!")
            return AddResult.CAPACITY_EXCEEDED

        self.output_fn("Adding a new car to the fleet")
        model = self.ask("Enter Car Model: ")
        make = self.ask("Enter Car Make: ")
        mileage = self.ask_int("Enter the current mileage: ", minimum=0)
        rate_per_day = self.ask("Enter Rate per Day: ")
        car_type = self.ask("Enter Car Type: ")
        seating_capacity = self.ask("Enter Seating Capacity: ")

        car = Vehicle.car(model, make, mileage, rate_per_day, car_type, seating_capacity)
        result = self.fleet.add_car(car)
        if result is AddResult.CAPACITY_EXCEEDED:
            self.output_fn("Fleet is full!")
            return result

        self.output_fn("New car added successfully!")
        for label, value in car.details():
            self.output_fn(f"{label}: {value}")
        self.output_fn("")
        return result

    def run(self) -> None:
        self.output_fn(BANNER)
        while True:
            self.output_fn("Menu - Select an option:")
            self.output_fn("1: View Cars")
            self.output_fn("2: Add Car")
            self.output_fn("3: Exit")

            try:
                choice = self.ask_int("Choice: ")
            except EOFError:
                self.output_fn("Goodbye!")
                return
            self.output_fn("")

            if choice == 1:
                self.view_cars()
            elif choice == 2:
                try:
                    self.add_car()
                except EOFError:
                    self.output_fn("Goodbye!")
                    return
            elif choice == 3:
                self.output_fn("Goodbye!")
                return
            else:
                self.output_fn("Invalid option!")


def main(argv=None) -> int:
    settings = load_settings()

    parser = argparse.ArgumentParser(description="Track the car-rental fleet from the console.")
    parser.add_argument("--capacity", type=int, default=settings.fleet_capacity,
                        help=f"Maximum number of cars (default: {settings.fleet_capacity}).")
    parser.add_argument("--booking-capacity", type=int, default=settings.booking_capacity,
                        help=f"Maximum number of bookings (default: {settings.booking_capacity}).")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    fleet = Fleet(capacity=args.capacity, booking_capacity=args.booking_capacity)
    try:
        FleetConsole(fleet).run()
    except KeyboardInterrupt:
        print("\nGoodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
