import time
from collections.abc import Mapping
from contextlib import contextmanager

from diagpair.utils.tally import Tally


@contextmanager
def time_this(label: str = "", tallies: Mapping[str, Tally] | None = None):
    """
    A context manager to time the execution of a code block, then report
    how many elements each of `tallies` had pulled by the time it finished.
    """
    start_time = time.perf_counter()

    try:
        if len(label) != 0:
            label = f"{label}: "
            print(f">>> {label}...")

        yield
    finally:
        end_time = time.perf_counter()
        elapsed_time = end_time - start_time
        print(f"<<< {label}{elapsed_time:.4f} seconds")

        for name, tally in (tallies or {}).items():
            print(f"    {name}: {tally.pulled} pulled")
