"""Time sorting of queues filled with random strings"""

import argparse
import logging
import time

import numpy as np
import timeout_decorator  # type: ignore
from tqdm import tqdm

from strqueue.collections import Queue
from strqueue.logging import VERBOSE
from strqueue.utils import random_strings, summarize

logger = logging.getLogger(__name__)


class VerboseFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno == VERBOSE


def time_sort(values: list[str]) -> float:
    """Sort a queue holding ``values`` and return the elapsed seconds."""
    queue = Queue()
    for value in values:
        queue.insert_tail(value)
    t0 = time.perf_counter()
    queue.sort()
    t1 = time.perf_counter()
    if list(queue.values()) != sorted(values):
        raise AssertionError(f"Queue of size {len(values)} not sorted")
    queue.clear()
    return t1 - t0


def main(parsed_args: argparse.Namespace) -> None:
    rng = np.random.default_rng(parsed_args.seed)
    time_sort_with_timeout = timeout_decorator.timeout(parsed_args.timeout)(
        time_sort
    )
    with open(
        parsed_args.timing_log_file, "w", encoding="utf-8"
    ) as timing_log_file:
        timing_log_file.write("Size\tMean seconds\tStd seconds\n")
        for size in tqdm(parsed_args.sizes):
            durations = []
            for _ in range(parsed_args.repeats):
                values = random_strings(rng, size, parsed_args.string_length)
                try:
                    durations.append(time_sort_with_timeout(values))
                except timeout_decorator.TimeoutError:
                    logger.warning(
                        "Sorting %d strings exceeded %s seconds",
                        size,
                        parsed_args.timeout,
                    )
                    break
            if not durations:
                continue
            mean, std = summarize(np.array(durations))
            logger.info("Size %d: %.6f s (std %.6f)", size, mean, std)
            timing_log_file.write(f"{size}\t{mean}\t{std}\n")


if __name__ == "__main__":
    if __debug__:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        default=[1_000, 2_000, 5_000, 10_000, 20_000, 50_000, 100_000],
    )
    parser.add_argument("--repeats", type=int, default=5)
    parser.add_argument("--string_length", type=int, default=8)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--timeout", type=float, default=60.0)
    parser.add_argument("--timing_log_file", required=True, type=str)
    parser.add_argument(
        "--verbose_only",
        action="store_true",
        help="Only show records at the VERBOSE level",
    )
    args = parser.parse_args()
    if args.verbose_only:
        logging.getLogger("strqueue").setLevel(VERBOSE)
        for handler in logging.getLogger().handlers:
            handler.addFilter(VerboseFilter())
    main(args)
