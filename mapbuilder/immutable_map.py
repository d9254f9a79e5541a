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
"""A read-only dictionary view."""

from collections.abc import Iterator, Mapping
from typing import Any, Dict, Generic, TypeVar

from mapbuilder import errors

KT = TypeVar('KT')  # Key type.
VT = TypeVar('VT')  # Value type.


class ImmutableMap(Mapping, Generic[KT, VT]):
  """Dictionary whose contents are fixed once constructed.

  Wraps a backing mapping that the caller hands over and no longer touches.
  Iteration follows the backing mapping's order. Every write, including writes
  that would change nothing, raises UnsupportedMutationError.

  Safe to share between threads for reading once the reference is published.
  """

  def __init__(self, backing: Mapping[KT, VT]):
    self._dict = backing

  def _reject(self, *args, **kwargs):
    raise errors.UnsupportedMutationError(
        '%s does not support mutation' % type(self).__name__)

  __setitem__ = _reject
  __delitem__ = _reject
  __ior__ = _reject
  clear = _reject
  pop = _reject
  popitem = _reject
  setdefault = _reject
  update = _reject

  def __getitem__(self, k: KT) -> VT:
    return self._dict[k]

  def __contains__(self, k: Any) -> bool:
    return k in self._dict

  def __iter__(self) -> Iterator[KT]:
    return iter(self._dict)

  def __len__(self) -> int:
    return len(self._dict)

  def __repr__(self) -> str:
    return '%s({%s})' % (
        type(self).__name__,
        ', '.join('%r: %r' % (k, v) for k, v in self.items()))

  def copy(self) -> Dict[KT, VT]:
    """Returns a mutable dict with the same entries in the same order."""
    return dict(self.items())
