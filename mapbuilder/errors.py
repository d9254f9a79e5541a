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
"""Errors raised by the map builder and the maps it builds."""


class MapBuilderError(Exception):
  """Base class for map builder errors."""


class OrderingTypeError(MapBuilderError, TypeError):
  """Natural ordering was requested for keys that cannot be compared."""


class UnsupportedMutationError(MapBuilderError, TypeError):
  """A built map was asked to change."""


class InvalidArgumentError(MapBuilderError, ValueError):
  """A builder method received an argument it cannot use."""
