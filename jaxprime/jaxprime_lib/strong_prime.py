"""Strong probable prime (Miller-Rabin) test for a single prime witness base.

If n is prime and coprime to the base a, Fermat gives a**(n-1) = 1 mod n.
Modulo a prime the only square roots of 1 are 1 and n - 1: n divides
(x - 1)(x + 1), so by Euclid's lemma it divides one of the factors.

Writing n - 1 = d * 2**e with d odd, the chain a**d, a**(2d), ..., a**(n-1)
must therefore either start at 1, or reach n - 1 right before its first 1.
A candidate that breaks this pattern is composite. One that keeps it is a
strong probable prime to base a, which some composites also are.
"""

import functools

import jax
import jax.numpy as jnp
from jaxprime.jaxprime_lib import decomposition
from jaxprime.jaxprime_lib import modular
from jaxprime.jaxprime_lib import prime_types


def is_strong_probable_prime(
    base: prime_types.WitnessBase, n: prime_types.Candidate
) -> bool:
  """Checks whether n is a strong probable prime to base.

  The base is assumed to be prime; this is not verified.

  Args:
    base: The prime witness base.
    n: The u32 candidate.

  Returns:
    True iff n passes the strong-pseudoprime criterion for base.
  """
  base = prime_types.check_u32("base", base)
  n = prime_types.check_u32("n", n)
  if n <= 2:
    return n == 2
  if n & 1 == 0:
    return False

  # Since the base is prime, this is the only coprimality check needed.
  if n % base == 0:
    return n == base

  num_squarings, odd_part = decomposition.decompose_pow2(n - 1)
  power = modular.powmod(base, odd_part, n)

  # 1 stays 1 under squaring.
  if power == 1:
    return True

  # Otherwise the chain has to pass through n - 1 to reach 1.
  for _ in range(num_squarings):
    if power == n - 1:
      return True
    power = modular.mulmod(power, power, n)

  return False


@jax.named_call
@functools.partial(jax.jit, static_argnames="base")
def jax_is_strong_probable_prime(
    base: prime_types.WitnessBase, n: jax.Array
) -> jax.Array:
  """Vectorized is_strong_probable_prime for a fixed base over u32 lanes.

  Lanes decided without exponentiation (n <= 2, even n, multiples of base)
  run the squaring chain against the modulus 3 and are masked out at the
  end. The chain runs a fixed 32 rounds; round i only counts as a witness
  when i is below the lane's number of trailing zeros of n - 1.

  Args:
    base: The prime witness base, static for compilation.
    n: u32 candidates.

  Returns:
    A boolean array shaped like n.
  """
  n = jnp.asarray(n, dtype=jnp.uint32)
  is_small = n <= 2
  is_even = (n & 1) == 0
  is_multiple = (n % base) == 0
  needs_chain = ~(is_small | is_even | is_multiple)

  modulus = jnp.where(needs_chain, n, jnp.uint32(3))
  n_minus_one = modulus - 1
  num_squarings, odd_part = decomposition.jax_decompose_pow2(n_minus_one)
  power = modular.jax_powmod(jnp.uint32(base), odd_part, modulus)

  def squaring_round(i, state):
    witnessed, power = state
    in_chain = i.astype(jnp.uint32) < num_squarings
    witnessed = witnessed | (in_chain & (power == n_minus_one))
    return witnessed, modular.jax_mulmod(power, power, modulus)

  witnessed, _ = jax.lax.fori_loop(
      0, prime_types.U32_BITS, squaring_round, (power == 1, power)
  )
  return jnp.where(
      is_small,
      n == 2,
      jnp.where(is_even, False, jnp.where(is_multiple, n == base, witnessed)),
  )
