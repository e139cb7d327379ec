"""Deterministic primality oracle for unsigned 32-bit integers."""

import jax
import jax.numpy as jnp
from jaxprime.jaxprime_lib import prime_types
from jaxprime.jaxprime_lib import strong_prime

# Every odd integer from 3 to 61; composites among them are harmless.
TRIAL_DIVISORS = tuple(range(3, 62, 2))

# The smallest strong pseudoprime to all of these bases is 4759123141,
# which is above 2**32.
WITNESS_BASES = (2, 7, 61)


def is_prime(n: prime_types.Candidate) -> bool:
  """Returns whether the u32 integer n is prime, exactly.

  Args:
    n: The candidate, in [0, 2**32 - 1].

  Returns:
    True iff n is prime.

  Raises:
    ValueError: if n is outside the u32 domain.
  """
  n = prime_types.check_u32("n", n)
  if n <= 2:
    return n == 2
  if n & 1 == 0:
    return False

  for divisor in TRIAL_DIVISORS:
    if n == divisor:
      return True
    if n % divisor == 0:
      return False

  return all(
      strong_prime.is_strong_probable_prime(base, n) for base in WITNESS_BASES
  )


@jax.named_call
@jax.jit
def jax_is_prime(n: jax.Array) -> jax.Array:
  """Vectorized is_prime over an array of u32 candidates."""
  n = jnp.asarray(n, dtype=jnp.uint32)
  divisors = jnp.array(TRIAL_DIVISORS, dtype=jnp.uint32)
  is_divisor = jnp.any(n[..., None] == divisors, axis=-1)
  has_small_factor = jnp.any(n[..., None] % divisors == 0, axis=-1)

  passes_all_bases = jnp.ones(n.shape, dtype=bool)
  for base in WITNESS_BASES:
    passes_all_bases &= strong_prime.jax_is_strong_probable_prime(base, n)

  return jnp.where(
      n <= 2,
      n == 2,
      jnp.where(
          (n & 1) == 0,
          False,
          jnp.where(
              is_divisor,
              True,
              jnp.where(has_small_factor, False, passes_all_bases),
          ),
      ),
  )
