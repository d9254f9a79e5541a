# Copyright 2025 Google Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
import functools
import unittest

from parameterized import parameterized

from mapbuilder import comparators


class ComparatorsTest(unittest.TestCase):

  @parameterized.expand([
      [1, 2, -1],
      [2, 1, 1],
      [2, 2, 0],
      ['a', 'b', -1],
  ])
  def test_natural_order(self, a, b, expected):
    self.assertEqual(comparators.natural_order(a, b), expected)
    self.assertEqual(comparators.reverse_order(a, b), -expected)

  def test_reversed_order(self):
    cmp = comparators.reversed_order(comparators.natural_order)
    words = ['pear', 'apple', 'fig']
    self.assertEqual(sorted(words, key=functools.cmp_to_key(cmp)),
                     ['pear', 'fig', 'apple'])

  def test_comparing(self):
    cmp = comparators.comparing(len)
    words = ['pear', 'apple', 'fig']
    self.assertEqual(sorted(words, key=functools.cmp_to_key(cmp)),
                     ['fig', 'pear', 'apple'])


if __name__ == '__main__':
  unittest.main()
