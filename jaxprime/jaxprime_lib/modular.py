"""Modular multiplication and exponentiation over unsigned 32-bit words.

Operands and results are u32. Every product of two residues is formed as a
u64 before it is reduced, so (2**32 - 1)**2 never wraps.
"""

import jax
import jax.numpy as jnp
from jaxprime.jaxprime_lib import prime_types

jax.config.update("jax_enable_x64", True)


def mulmod(value_a: int, value_b: int, modulus: int) -> int:
  """Returns value_a * value_b mod modulus for residues below 2**32."""
  return value_a * value_b % modulus


def powmod(base: int, exponent: int, modulus: int) -> int:
  """Computes base**exponent mod modulus by right-to-left square and multiply.

  Args:
    base: The u32 base.
    exponent: The u32 exponent.
    modulus: The u32 modulus, must be non-zero.

  Returns:
    base**exponent mod modulus. The accumulator starts at 1 and is only
    reduced through multiplication, so an exponent of 0 always yields 1.

  Raises:
    ValueError: if an argument is outside the u32 domain or modulus is 0.
  """
  base = prime_types.check_u32("base", base)
  exponent = prime_types.check_u32("exponent", exponent)
  modulus = prime_types.check_u32("modulus", modulus)
  if modulus == 0:
    raise ValueError("modulus must be non-zero")

  power = base % modulus
  result = 1
  while exponent:
    if exponent & 1:
      result = mulmod(result, power, modulus)
    power = mulmod(power, power, modulus)
    exponent >>= 1
  return result


@jax.named_call
@jax.jit
def jax_mulmod(
    value_a: jax.Array, value_b: jax.Array, modulus: jax.Array
) -> jax.Array:
  """Elementwise value_a * value_b mod modulus with a u64 intermediate."""
  product = jnp.asarray(value_a, dtype=jnp.uint64) * jnp.asarray(
      value_b, dtype=jnp.uint64
  )
  return (product % jnp.asarray(modulus, dtype=jnp.uint64)).astype(jnp.uint32)


@jax.named_call
@jax.jit
def jax_powmod(
    base: jax.Array, exponent: jax.Array, modulus: jax.Array
) -> jax.Array:
  """Elementwise base**exponent mod modulus over broadcast u32 arrays.

  The loop keeps squaring until the exponent of every lane has been shifted
  down to zero; lanes that finish early keep their result. A zero modulus
  gives an unspecified value instead of an error, so callers must mask such
  lanes themselves.

  Args:
    base: u32 bases.
    exponent: u32 exponents.
    modulus: u32 moduli.

  Returns:
    A u32 array of the broadcast shape of the inputs.
  """
  base, exponent, modulus = jnp.broadcast_arrays(
      jnp.asarray(base, dtype=jnp.uint32),
      jnp.asarray(exponent, dtype=jnp.uint32),
      jnp.asarray(modulus, dtype=jnp.uint32),
  )
  power = base % modulus
  result = jnp.ones_like(power)

  def any_exponent_left(state):
    _, _, exponent = state
    return jnp.any(exponent != 0)

  def square_and_multiply(state):
    result, power, exponent = state
    result = jnp.where(
        (exponent & 1) == 1, jax_mulmod(result, power, modulus), result
    )
    power = jax_mulmod(power, power, modulus)
    return result, power, exponent >> 1

  result, _, _ = jax.lax.while_loop(
      any_exponent_left, square_and_multiply, (result, power, exponent)
  )
  return result
