"""Counting the primes in a closed range of unsigned 32-bit integers.

All ranges here are closed: [lo, hi] includes both endpoints, and lo > hi
denotes the empty range.
"""

import concurrent.futures
import functools
import logging

import jax
import jax.numpy as jnp
from jaxprime.jaxprime_lib import parameters
from jaxprime.jaxprime_lib import primality
from jaxprime.jaxprime_lib import prime_types


def count_primes(lo: int, hi: int) -> prime_types.PrimeCount:
  """Counts the primes in [lo, hi] with one scalar oracle call per candidate."""
  lo = prime_types.check_u32("lo", lo)
  hi = prime_types.check_u32("hi", hi)
  if lo > hi:
    return 0
  return sum(1 for n in range(lo, hi + 1) if primality.is_prime(n))


@jax.named_call
@functools.partial(jax.jit, static_argnames="batch_size")
def _count_batch(start: jax.Array, hi: jax.Array, batch_size: int) -> jax.Array:
  """Counts the primes in [start, min(start + batch_size - 1, hi)]."""
  # Offsets are built in u64 so a batch reaching past 2**32 - 1 cannot wrap.
  candidates = start + jnp.arange(batch_size, dtype=jnp.uint64)
  in_range = candidates <= hi
  n = jnp.where(in_range, candidates, 0).astype(jnp.uint32)
  return jnp.sum(primality.jax_is_prime(n) & in_range, dtype=jnp.uint64)


def jax_count_primes(
    lo: int, hi: int, batch_size: int = parameters.DEFAULT_BATCH_SIZE
) -> prime_types.PrimeCount:
  """Counts the primes in [lo, hi] with the vectorized oracle.

  Args:
    lo: The smallest candidate, inclusive.
    hi: The largest candidate, inclusive.
    batch_size: The number of candidates tested per compiled call. The last
      batch is padded and masked, so every call shares one compilation.

  Returns:
    The number of primes in [lo, hi].
  """
  lo = prime_types.check_u32("lo", lo)
  hi = prime_types.check_u32("hi", hi)
  if batch_size < 1:
    raise ValueError(f"batch_size must be positive, got {batch_size}")
  if lo > hi:
    return 0

  total = 0
  hi_u64 = jnp.uint64(hi)
  for start in range(lo, hi + 1, batch_size):
    batch_count = int(_count_batch(jnp.uint64(start), hi_u64, batch_size))
    logging.debug(f"batch at {start}: {batch_count} primes")
    total += batch_count
  return total


def partition_range(lo: int, hi: int, num_parts: int) -> list[tuple[int, int]]:
  """Splits [lo, hi] into at most num_parts contiguous closed segments.

  Segment lengths differ by at most one and the segments cover [lo, hi]
  exactly. An empty range gives no segments.

  Args:
    lo: The smallest candidate, inclusive.
    hi: The largest candidate, inclusive.
    num_parts: The maximum number of segments.

  Returns:
    A list of (segment_lo, segment_hi) pairs in increasing order.
  """
  if num_parts < 1:
    raise ValueError(f"num_parts must be positive, got {num_parts}")
  if lo > hi:
    return []

  total = hi - lo + 1
  num_parts = min(num_parts, total)
  base, extra = divmod(total, num_parts)
  segments = []
  cur = lo
  for i in range(num_parts):
    length = base + (1 if i < extra else 0)
    segments.append((cur, cur + length - 1))
    cur += length
  return segments


def parallel_count_primes(
    lo: int,
    hi: int,
    num_workers: int,
    batch_size: int = parameters.DEFAULT_BATCH_SIZE,
) -> prime_types.PrimeCount:
  """Counts the primes in [lo, hi] over num_workers concurrent partitions."""
  lo = prime_types.check_u32("lo", lo)
  hi = prime_types.check_u32("hi", hi)
  segments = partition_range(lo, hi, num_workers)
  logging.info(f"counting [{lo}, {hi}] in {len(segments)} partitions")

  with concurrent.futures.ThreadPoolExecutor(
      max_workers=num_workers
  ) as executor:
    futures = [
        executor.submit(jax_count_primes, segment_lo, segment_hi, batch_size)
        for segment_lo, segment_hi in segments
    ]
    return sum(future.result() for future in futures)


def count_primes_in(
    params: parameters.CountParameters,
) -> prime_types.PrimeCount:
  """Counts the primes in the range configured by params."""
  logging.info(
      f"counting primes in [{params.lower_bound}, {params.upper_bound}]"
      f" ({params.num_candidates} candidates)"
  )
  if params.num_workers > 1:
    return parallel_count_primes(
        params.lower_bound,
        params.upper_bound,
        params.num_workers,
        params.batch_size,
    )
  return jax_count_primes(
      params.lower_bound, params.upper_bound, params.batch_size
  )
