# Copyright (c) Meta Platforms, Inc. and affiliates.

# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import unittest

from building_entry_loss.common.configuration.enums import BuildingClass
from building_entry_loss.common.constants import (
    THERMALLY_EFFICIENT_COEFFICIENTS,
    TRADITIONAL_COEFFICIENTS,
)
from building_entry_loss.common.rf.coefficients import get_coefficient_set
from building_entry_loss.common.structs import CoefficientSet


class TestCoefficientSet(unittest.TestCase):
    def test_traditional(self) -> None:
        self.assertEqual(
            get_coefficient_set(BuildingClass.TRADITIONAL),
            CoefficientSet(12.64, 3.72, 0.96, 9.6, 2.0, 9.1, -3.0, 4.5, -2.0),
        )
        self.assertIs(get_coefficient_set(1), TRADITIONAL_COEFFICIENTS)
        self.assertIs(
            get_coefficient_set("traditional"), TRADITIONAL_COEFFICIENTS
        )

    def test_thermally_efficient(self) -> None:
        self.assertEqual(
            get_coefficient_set(BuildingClass.THERMALLY_EFFICIENT),
            CoefficientSet(
                28.19, -3.00, 8.48, 13.5, 3.8, 27.8, -2.9, 9.4, -2.1
            ),
        )
        self.assertIs(get_coefficient_set(2), THERMALLY_EFFICIENT_COEFFICIENTS)
        self.assertIs(
            get_coefficient_set("THERMALLY_EFFICIENT"),
            THERMALLY_EFFICIENT_COEFFICIENTS,
        )

    def test_unknown_class_falls_back_to_traditional(self) -> None:
        for building_class in [0, 3, 99, -2]:
            self.assertIs(
                get_coefficient_set(building_class), TRADITIONAL_COEFFICIENTS
            )

    def test_unknown_class_name(self) -> None:
        with self.assertRaises(KeyError):
            get_coefficient_set("glass")

    def test_coefficients_are_immutable(self) -> None:
        with self.assertRaises(AttributeError):
            TRADITIONAL_COEFFICIENTS.r = 0.0  # pyre-ignore
