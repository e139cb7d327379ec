"""Tests for power-of-two decomposition."""

import hypothesis
from hypothesis import strategies
import jax.numpy as jnp
from jaxprime.jaxprime_lib import decomposition
import numpy as np
from absl.testing import absltest  # fmt: skip

NUM_BITS = 32


class DecomposePow2Test(absltest.TestCase):

  def test_specific_examples(self):
    self.assertEqual(decomposition.decompose_pow2(1), (0, 1))
    self.assertEqual(decomposition.decompose_pow2(12), (2, 3))
    # 2047 - 1 and 3215031751 - 1
    self.assertEqual(decomposition.decompose_pow2(2046), (1, 1023))
    self.assertEqual(decomposition.decompose_pow2(3215031750), (1, 1607515875))
    self.assertEqual(decomposition.decompose_pow2(1 << 31), (31, 1))

  def test_accepts_numpy_integers(self):
    self.assertEqual(decomposition.decompose_pow2(np.uint32(2046)), (1, 1023))
    self.assertEqual(
        decomposition.decompose_pow2(np.int64(3215031750)), (1, 1607515875)
    )

  def test_rejects_non_positive(self):
    with self.assertRaises(ValueError):
      decomposition.decompose_pow2(0)
    with self.assertRaises(ValueError):
      decomposition.decompose_pow2(-4)

  @hypothesis.settings(deadline=None)
  @hypothesis.given(
      strategies.integers(min_value=1, max_value=2**NUM_BITS - 1)
  )
  def test_exact_reconstruction(self, x: int):
    num_trailing_zeros, odd_part = decomposition.decompose_pow2(x)
    self.assertEqual(odd_part % 2, 1)
    self.assertEqual(odd_part << num_trailing_zeros, x)


class JaxDecomposePow2Test(absltest.TestCase):

  def test_count_trailing_zeros(self):
    x = jnp.array([1, 2, 3, 8, 96, 1 << 31, 2**32 - 2, 0], dtype=jnp.uint32)
    np.testing.assert_array_equal(
        decomposition.count_trailing_zeros(x), [0, 1, 0, 3, 5, 31, 1, 32]
    )

  def test_matches_scalar(self):
    rng = np.random.default_rng(0)
    x = rng.integers(1, 2**NUM_BITS, size=512, dtype=np.uint64).astype(
        np.uint32
    )
    num_trailing_zeros, odd_part = decomposition.jax_decompose_pow2(x)
    expected = [decomposition.decompose_pow2(int(value)) for value in x]
    np.testing.assert_array_equal(
        num_trailing_zeros, [s for s, _ in expected]
    )
    np.testing.assert_array_equal(odd_part, [d for _, d in expected])


if __name__ == '__main__':
  absltest.main()
