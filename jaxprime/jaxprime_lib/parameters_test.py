"""Tests for CountParameters."""

from jaxprime.jaxprime_lib import parameters
import numpy as np
from absl.testing import absltest
from absl.testing import parameterized


class CountParametersTest(parameterized.TestCase):

  def test_defaults_scan_first_hundred_million(self):
    params = parameters.CountParameters()
    self.assertEqual(params.lower_bound, 0)
    self.assertEqual(params.upper_bound, 100_000_000)
    self.assertEqual(params.num_workers, 1)
    self.assertEqual(params.num_candidates, 100_000_001)

  def test_normalizes_numpy_bounds(self):
    params = parameters.CountParameters(
        lower_bound=np.uint32(10), upper_bound=np.int64(20)
    )
    self.assertIs(type(params.lower_bound), int)
    self.assertIs(type(params.upper_bound), int)
    self.assertEqual(params.num_candidates, 11)

  def test_empty_range(self):
    params = parameters.CountParameters(lower_bound=10, upper_bound=9)
    self.assertEqual(params.num_candidates, 0)

  @parameterized.named_parameters(
      dict(testcase_name='negative_lower', lower_bound=-1),
      dict(testcase_name='upper_too_large', upper_bound=2**32),
      dict(testcase_name='zero_batch', batch_size=0),
      dict(testcase_name='zero_workers', num_workers=0),
  )
  def test_rejects_invalid(self, **kwargs):
    with self.assertRaises(ValueError):
      parameters.CountParameters(**kwargs)


if __name__ == '__main__':
  absltest.main()
