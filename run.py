# run.py

import sys

from bankqueue.errors import InvalidParameter
from bankqueue.logging_config import configure_from_env
from bankqueue.models import SimulationRequest
from bankqueue.report import format_banner, format_report
from bankqueue.simulation import simulate


def read_number(prompt: str, cast):
    try:
        value = cast(input(prompt).strip())
    except (ValueError, EOFError):
        return None
    return value if value > 0 else None


def main() -> int:
    configure_from_env()

    print("--- Welcome to the Bank Queue Simulator ---")
    print("This program will simulate an 8-hour bank day.\n")

    lambda_ = read_number("Enter the average number of customers arriving *per minute* (lambda): ", float)
    if lambda_ is None:
        print("Invalid input. Please enter a positive number.")
        return 1

    tellers = read_number("Enter the number of tellers working: ", int)
    if tellers is None:
        print("Invalid input. Please enter a positive number of tellers.")
        return 1

    req = SimulationRequest(arrival_rate=lambda_, tellers=tellers)
    print()
    print(format_banner(req))
    try:
        res = simulate(req)
    except InvalidParameter as exc:
        print(f"Invalid input. {exc}")
        return 1
    print("... Simulation complete.\n")
    print(format_report(res))
    return 0


if __name__ == '__main__':
    sys.exit(main())
