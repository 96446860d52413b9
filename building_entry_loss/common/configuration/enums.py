# Copyright (c) Meta Platforms, Inc. and affiliates.

# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import logging
from enum import Enum
from typing import List, Union


class EnumParser(Enum):
    def to_string(self) -> str:
        return self.name

    # To make the name case-insensitive
    @classmethod
    def from_string(cls, label: Union[str, int]) -> "EnumParser":
        if isinstance(label, str):
            return cls[label.upper()]
        elif isinstance(label, int):
            return cls(label)
        raise Exception(f"Invalid input: {label}")

    @classmethod
    def names(cls) -> List[str]:
        return [e.name for e in cls]


class BuildingClass(EnumParser):
    TRADITIONAL = 1
    THERMALLY_EFFICIENT = 2


class LoggerLevel(EnumParser):
    NOTSET = logging.NOTSET
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL
