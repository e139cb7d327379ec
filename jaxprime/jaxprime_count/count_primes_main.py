"""Prints the number of primes in a closed range of u32 integers.

Usage:
  python -m jaxprime.jaxprime_count.count_primes_main \
      --lower_bound=0 --upper_bound=100000000
"""

from collections.abc import Sequence
import logging

from absl import app
from absl import flags
from jaxprime.jaxprime_count import prime_count
from jaxprime.jaxprime_lib import parameters
from jaxprime.jaxprime_lib import prime_types

_LOWER_BOUND = flags.DEFINE_integer(
    "lower_bound",
    parameters.DEFAULT_LOWER_BOUND,
    "Smallest candidate, inclusive.",
    lower_bound=0,
    upper_bound=prime_types.U32_MAX,
)
_UPPER_BOUND = flags.DEFINE_integer(
    "upper_bound",
    parameters.DEFAULT_UPPER_BOUND,
    "Largest candidate, inclusive.",
    lower_bound=0,
    upper_bound=prime_types.U32_MAX,
)
_BATCH_SIZE = flags.DEFINE_integer(
    "batch_size",
    parameters.DEFAULT_BATCH_SIZE,
    "Candidates tested per compiled call.",
    lower_bound=1,
)
_NUM_WORKERS = flags.DEFINE_integer(
    "num_workers", 1, "Range partitions counted concurrently.", lower_bound=1
)


def main(argv: Sequence[str]) -> None:
  if len(argv) > 1:
    raise app.UsageError("Too many command-line arguments.")

  params = parameters.CountParameters(
      lower_bound=_LOWER_BOUND.value,
      upper_bound=_UPPER_BOUND.value,
      batch_size=_BATCH_SIZE.value,
      num_workers=_NUM_WORKERS.value,
  )
  count = prime_count.count_primes_in(params)
  logging.info(f"found {count} primes")
  print(count)


def run() -> None:
  app.run(main)


if __name__ == "__main__":
  run()
