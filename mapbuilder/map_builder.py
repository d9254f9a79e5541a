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
"""Builder for immutable maps with a selectable iteration order."""

import enum
import functools
from collections.abc import Iterable, Mapping
from typing import Dict, Generic, Optional, Tuple, TypeVar, Union

from absl import logging
import sortedcontainers

from mapbuilder import comparators
from mapbuilder import errors
from mapbuilder import immutable_map

KT = TypeVar('KT')  # Key type.
VT = TypeVar('VT')  # Value type.


class OrderMode(enum.Enum):
  """Iteration order of maps produced by OrderedMapBuilder.build()."""

  UNORDERED = 'unordered'
  NATURAL = 'natural'
  COMPARATOR = 'comparator'
  INSERTION = 'insertion'


class OrderedMapBuilder(Generic[KT, VT]):
  """Accumulates entries and builds immutable maps from them.

  Entries are staged in insertion order. Putting an existing key replaces its
  value but keeps its original position. The order mode is last-wins and may be
  chosen before, after or between puts.

  build() never clears the staged entries, so one builder can produce several
  maps. The builder itself is not thread-safe; callers sharing one must lock
  around it.

  Example:
    m = (OrderedMapBuilder()
         .put('b', 2)
         .put('a', 1)
         .natural_order()
         .build())
    list(m.items())  # [('a', 1), ('b', 2)]
  """

  def __init__(self):
    self._entries: Dict[KT, VT] = {}
    self._order = OrderMode.UNORDERED
    self._comparator: Optional[comparators.Comparator] = None

  @property
  def order_mode(self) -> OrderMode:
    return self._order

  def __len__(self) -> int:
    return len(self._entries)

  def put(self, key: KT, value: VT) -> 'OrderedMapBuilder[KT, VT]':
    """Stages `value` under `key`. None values are allowed, None keys are not."""
    if key is None:
      raise errors.InvalidArgumentError('Key must not be None')
    try:
      self._entries[key] = value
    except TypeError as e:
      raise errors.InvalidArgumentError(
          'Key must be hashable: %r' % (key,)) from e
    return self

  def put_all(
      self, entries: Union[Mapping[KT, VT], Iterable[Tuple[KT, VT]]]
  ) -> 'OrderedMapBuilder[KT, VT]':
    """Stages every entry of a mapping or an iterable of pairs, in order."""
    items = entries.items() if isinstance(entries, Mapping) else entries
    for key, value in items:
      self.put(key, value)
    return self

  def insertion_order(self) -> 'OrderedMapBuilder[KT, VT]':
    self._order = OrderMode.INSERTION
    self._comparator = None
    return self

  def sorted_order(
      self, comparator: comparators.Comparator
  ) -> 'OrderedMapBuilder[KT, VT]':
    """Orders built maps by a two-argument comparator over keys."""
    if comparator is None or not callable(comparator):
      raise errors.InvalidArgumentError(
          'Comparator must be callable, got %r' % (comparator,))
    self._order = OrderMode.COMPARATOR
    self._comparator = comparator
    return self

  def natural_order(self) -> 'OrderedMapBuilder[KT, VT]':
    """Orders built maps by the keys' own comparison.

    Comparability is only checked by build().
    """
    self._order = OrderMode.NATURAL
    self._comparator = None
    return self

  def build(self) -> immutable_map.ImmutableMap[KT, VT]:
    """Copies the staged entries into a new immutable map.

    Raises:
      OrderingTypeError: natural order is selected and the staged keys cannot
        be compared with each other.
    """
    logging.debug('Building map of %d entries in %s order',
                  len(self._entries), self._order.value)
    if self._order == OrderMode.NATURAL:
      try:
        # Sorting never compares a lone key, so compare each key to the first.
        first = next(iter(self._entries), None)
        _ = [k < first for k in self._entries]
        backing = sortedcontainers.SortedDict(self._entries)
      except TypeError as e:
        raise errors.OrderingTypeError(
            'Keys do not support natural ordering: %s' % e) from e
    elif self._order == OrderMode.COMPARATOR:
      backing = sortedcontainers.SortedDict(
          functools.cmp_to_key(self._comparator), self._entries)
    else:
      # Both modes keep staging order; UNORDERED makes no promise about it.
      backing = dict(self._entries)
    return immutable_map.ImmutableMap(backing)
