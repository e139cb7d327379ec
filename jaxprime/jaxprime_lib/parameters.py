"""Class encapsulating params for a prime count."""

import dataclasses

from jaxprime.jaxprime_lib import prime_types

# The range scanned when nothing else is configured.
DEFAULT_LOWER_BOUND = 0
DEFAULT_UPPER_BOUND = 100_000_000
DEFAULT_BATCH_SIZE = 1 << 16


@dataclasses.dataclass(frozen=True)
class CountParameters:
  """Parameters for counting the primes in the closed range [lower, upper]."""

  # Smallest candidate, inclusive.
  lower_bound: int = DEFAULT_LOWER_BOUND

  # Largest candidate, inclusive. A range with lower_bound > upper_bound is
  # empty.
  upper_bound: int = DEFAULT_UPPER_BOUND

  # Number of candidates handed to the vectorized oracle at once.
  batch_size: int = DEFAULT_BATCH_SIZE

  # Number of range partitions counted concurrently.
  num_workers: int = 1

  # Number of candidates in the range.
  num_candidates: int = dataclasses.field(init=False)

  def __post_init__(self) -> None:
    object.__setattr__(
        self,
        'lower_bound',
        prime_types.check_u32('lower_bound', self.lower_bound),
    )
    object.__setattr__(
        self,
        'upper_bound',
        prime_types.check_u32('upper_bound', self.upper_bound),
    )
    if self.batch_size < 1:
      raise ValueError(f'batch_size must be positive, got {self.batch_size}')
    if self.num_workers < 1:
      raise ValueError(f'num_workers must be positive, got {self.num_workers}')
    object.__setattr__(
        self,
        'num_candidates',
        max(0, self.upper_bound - self.lower_bound + 1),
    )
