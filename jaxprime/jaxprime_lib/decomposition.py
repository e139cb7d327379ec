"""Power-of-two decomposition: x = odd_part * 2**num_trailing_zeros."""

import operator

import jax
import jax.numpy as jnp


def decompose_pow2(x: int) -> tuple[int, int]:
  """Splits a positive integer into its power of two and its odd part.

  Args:
    x: A positive integer.

  Returns:
    A tuple (s, d) with d odd and x == d * 2**s.

  Raises:
    ValueError: if x is not positive.
  """
  x = operator.index(x)
  if x <= 0:
    raise ValueError(f"cannot decompose non-positive value {x}")
  # x & -x isolates the lowest set bit.
  num_trailing_zeros = (x & -x).bit_length() - 1
  return num_trailing_zeros, x >> num_trailing_zeros


@jax.named_call
@jax.jit
def count_trailing_zeros(x: jax.Array) -> jax.Array:
  """Number of trailing zero bits of each u32 element; 32 for a zero input."""
  x = jnp.asarray(x, dtype=jnp.uint32)
  # ~x + 1 is the two's complement negation, wrapping in u32.
  lowest_set_bit = x & (~x + 1)
  return jax.lax.population_count(lowest_set_bit - 1)


@jax.named_call
@jax.jit
def jax_decompose_pow2(x: jax.Array) -> tuple[jax.Array, jax.Array]:
  """Vectorized decompose_pow2 over u32 arrays. Zero lanes are unspecified."""
  x = jnp.asarray(x, dtype=jnp.uint32)
  num_trailing_zeros = count_trailing_zeros(x)
  return num_trailing_zeros, x >> num_trailing_zeros
