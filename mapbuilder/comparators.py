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
"""Two-argument key comparators.

A comparator takes two keys and returns a negative number, zero or a positive
number when the first key sorts before, together with, or after the second.
"""

from typing import Any, Callable

Comparator = Callable[[Any, Any], int]


def natural_order(a: Any, b: Any) -> int:
  """Compares keys using their own < operator."""
  return (b < a) - (a < b)


def reverse_order(a: Any, b: Any) -> int:
  """Reverse of natural_order."""
  return natural_order(b, a)


def reversed_order(comparator: Comparator) -> Comparator:
  """Returns a comparator that sorts in the opposite order of `comparator`."""
  return lambda a, b: comparator(b, a)


def comparing(key: Callable[[Any], Any]) -> Comparator:
  """Returns a comparator ordering keys by the natural order of key(k)."""
  return lambda a, b: natural_order(key(a), key(b))
