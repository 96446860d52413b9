# Copyright (c) Meta Platforms, Inc. and affiliates.

# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from typing import Union

from pyre_extensions import assert_is_instance

from building_entry_loss.common.configuration.enums import BuildingClass
from building_entry_loss.common.constants import (
    THERMALLY_EFFICIENT_COEFFICIENTS,
    TRADITIONAL_COEFFICIENTS,
)
from building_entry_loss.common.structs import CoefficientSet


def get_coefficient_set(
    building_class: Union[int, str, BuildingClass]
) -> CoefficientSet:
    """
    Look up the empirical constants of a building class. Only the thermally
    efficient class has its own constants, every other class value falls back
    to the traditional ones.

    @param building_class: class number, class name (case-insensitive) or
        BuildingClass
    """
    if isinstance(building_class, str):
        building_class = assert_is_instance(
            BuildingClass.from_string(building_class), BuildingClass
        )
    if isinstance(building_class, BuildingClass):
        building_class = building_class.value
    if building_class == BuildingClass.THERMALLY_EFFICIENT.value:
        return THERMALLY_EFFICIENT_COEFFICIENTS
    return TRADITIONAL_COEFFICIENTS
