"""A module containing basic types and bounds for 32-bit primality."""

import operator

Candidate = int
WitnessBase = int
PrimeCount = int

U32_BITS = 32
U32_MAX = (1 << U32_BITS) - 1


def check_u32(name: str, value: int) -> int:
  """Returns value as a Python int, or raises unless it is a u32 integer.

  Any integer type is accepted, including numpy and JAX scalars; the result
  is always a plain int so callers can rely on int-only methods.

  Args:
    name: The argument name, used in the error message.
    value: The value to check.

  Returns:
    The value converted to int.

  Raises:
    TypeError: if value is not an integer.
    ValueError: if value is outside [0, 2**32 - 1].
  """
  value = operator.index(value)
  if value < 0 or value > U32_MAX:
    raise ValueError(
        f"{name}={value} is not an unsigned 32-bit integer (0 to {U32_MAX})"
    )
  return value
