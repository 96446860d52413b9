# Copyright (c) Meta Platforms, Inc. and affiliates.

# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import math

from building_entry_loss.common.constants import (
    QI_C0,
    QI_C1,
    QI_C2,
    QI_D1,
    QI_D2,
    QI_D3,
)
from building_entry_loss.common.exceptions import DomainError, bel_assert


def qi_transform(y: float) -> float:
    """
    T(y) = sqrt(-2 * ln(y)), defined for 0 < y <= 1
    """
    bel_assert(
        0 < y <= 1,
        f"Tail probability {y} is outside the valid domain (0, 1].",
        DomainError,
    )
    return math.sqrt(-2 * math.log(y))


def qi_correction(z: float) -> float:
    """
    Rational polynomial correction C(z) subtracted from T(z)
    """
    tz = qi_transform(z)
    return ((QI_C2 * tz + QI_C1) * tz + QI_C0) / (
        ((QI_D3 * tz + QI_D2) * tz + QI_D1) * tz + 1
    )


def qi(x: float) -> float:
    """
    Approximation to the inverse complementary cumulative normal distribution,
    i.e. the value exceeded by a standard normal variable with probability x.

    The rational approximation only holds on (0, 0.5], the upper half is
    obtained by symmetry: Qi(x) = -Qi(1 - x).

    @param x: tail probability, 0 < x < 1
    """
    if x <= 0.5:
        return qi_transform(x) - qi_correction(x)
    return -(qi_transform(1 - x) - qi_correction(1 - x))


def norm_inv(p: float, mu: float, sigma: float) -> float:
    """
    Value not exceeded with probability p by a normal distribution with mean
    mu and standard deviation sigma.

    @param p: probability (0-1)
    @param mu: mean of the normal distribution (dB)
    @param sigma: standard deviation of the normal distribution (dB)
    """
    return mu + sigma * qi(1 - p)
