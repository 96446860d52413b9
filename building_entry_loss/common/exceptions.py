# Copyright (c) Meta Platforms, Inc. and affiliates.

# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from typing import Type


class BuildingEntryLossException(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DomainError(BuildingEntryLossException):
    def __init__(self, message: str) -> None:
        super().__init__(message)


def bel_assert(
    condition: bool,
    message: str = "",
    exception_type: Type[BuildingEntryLossException] = BuildingEntryLossException,
) -> None:
    if not condition:
        raise exception_type(message)
