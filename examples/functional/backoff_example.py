"""
Backoff Example - Fluent sleeping with a fakeable pause

Polls a flaky operation, pausing between attempts. Running the script sleeps
for real; setting PYSLEEP_FAKE=1 records the pauses instead, which is how a
test suite would exercise the same code.

Run:
    python examples/functional/backoff_example.py
    PYSLEEP_FAKE=1 python examples/functional/backoff_example.py
"""

import random

from pysleep import Sleep, configure_logging


def fetch_status(attempt: int) -> bool:
    """Pretend to call a service that succeeds on a later attempt."""
    return attempt >= 3 or random.random() < 0.2


def poll(max_attempts: int = 5) -> int:
    """Retry fetch_status, backing off 100ms more each attempt."""
    for attempt in range(1, max_attempts + 1):
        if fetch_status(attempt):
            return attempt

        # No pause after the final attempt
        with Sleep.for_(attempt * 100).milliseconds().unless(attempt == max_attempts):
            print(f"Attempt {attempt} failed, backing off")

    return max_attempts


def main():
    configure_logging(level="DEBUG")

    Sleep.when_faking_sleep(lambda duration: print(f"(faked pause of {duration})"))

    attempts = poll()
    print(f"Succeeded after {attempts} attempt(s)")
    print(f"Recorded pauses: {Sleep.recorded()}")


if __name__ == "__main__":
    main()
