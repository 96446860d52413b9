# Copyright (c) Meta Platforms, Inc. and affiliates.

# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import logging
import math
from typing import Union

from building_entry_loss.common.configuration.enums import BuildingClass
from building_entry_loss.common.constants import (
    CLUTTER_FLOOR_LOSS,
    ELEVATION_LOSS_PER_DEGREE,
    MAX_ELEVATION_ANGLE,
    MAX_FREQUENCY_GHZ,
    MAX_PERCENTAGE,
    MIN_FREQUENCY_GHZ,
    MIN_PERCENTAGE,
)
from building_entry_loss.common.exceptions import DomainError, bel_assert
from building_entry_loss.common.rf.coefficients import get_coefficient_set
from building_entry_loss.common.rf.inverse_normal import norm_inv
from building_entry_loss.common.structs import (
    BuildingEntryLossComponents,
    CoefficientSet,
)

logger: logging.Logger = logging.getLogger(__name__)


def elevation_loss(elevation_deg: float) -> float:
    """
    Loss (dB) added by the elevation angle at the building facade
    """
    return ELEVATION_LOSS_PER_DEGREE * abs(elevation_deg)


def horizontal_path_loss(
    frequency_ghz: float, coefficients: CoefficientSet
) -> float:
    """
    Median loss (dB) for horizontal paths.
    Lh = r + s * log10(f) + t * log10(f)^2
    """
    log_f = _log10_frequency(frequency_ghz)
    return coefficients.r + coefficients.s * log_f + coefficients.t * log_f**2


def power_sum_db(*levels_db: float) -> float:
    """
    Combine dB quantities by adding them as linear powers and converting the
    sum back to dB. A level too large for a float linear power gives an
    infinite sum.
    """
    try:
        linear_sum = sum(10 ** (0.1 * level) for level in levels_db)
    except OverflowError:
        return math.inf
    return 10 * math.log10(linear_sum)


def _log10_frequency(frequency_ghz: float) -> float:
    bel_assert(
        frequency_ghz > 0,
        f"Frequency {frequency_ghz} GHz must be positive.",
        DomainError,
    )
    return math.log10(frequency_ghz)


def get_bel_components(
    frequency_ghz: float,
    probability_percent: float,
    building_class: Union[int, str, BuildingClass],
    elevation_deg: float,
) -> BuildingEntryLossComponents:
    """
    Evaluate the building entry loss model and keep every intermediate term.

    The frequency domain of the model is 0.08 to 100 GHz, but it is not
    enforced: any positive frequency is extrapolated with a warning.

    @param frequency_ghz: frequency (GHz)
    @param probability_percent: probability (%) with which the loss is not
        exceeded, 0 < p < 100
    @param building_class: 2 for thermally efficient buildings, any other value
        for traditional buildings
    @param elevation_deg: elevation angle of the path at the building facade
        (degrees above the horizontal), -90 <= th <= 90
    """
    bel_assert(
        -MAX_ELEVATION_ANGLE <= elevation_deg <= MAX_ELEVATION_ANGLE,
        "Elevation angle is outside the valid domain [-90, 90] degrees",
        DomainError,
    )
    bel_assert(
        MIN_PERCENTAGE < probability_percent < MAX_PERCENTAGE,
        "Percentage of locations is outside the valid domain (0, 100)%",
        DomainError,
    )
    # 1 - p / 100 must stay below 1 once rounded to a double
    bel_assert(
        1 - probability_percent / 100 < 1,
        f"Percentage of locations {probability_percent}% is too small to be "
        "resolved in double precision",
        DomainError,
    )
    if not MIN_FREQUENCY_GHZ <= frequency_ghz <= MAX_FREQUENCY_GHZ:
        logger.warning(
            f"Frequency {frequency_ghz} GHz is outside the domain of the model "
            f"[{MIN_FREQUENCY_GHZ}, {MAX_FREQUENCY_GHZ}] GHz, the building "
            "entry loss is extrapolated."
        )

    coefficients = get_coefficient_set(building_class)
    log_f = _log10_frequency(frequency_ghz)

    le = elevation_loss(elevation_deg)
    lh = horizontal_path_loss(frequency_ghz, coefficients)

    sigma2 = coefficients.y + coefficients.z * log_f
    sigma1 = coefficients.u + coefficients.v * log_f

    mu2 = coefficients.w + coefficients.x * log_f
    mu1 = lh + le
    c = CLUTTER_FLOOR_LOSS

    a = norm_inv(probability_percent / 100, mu1, sigma1)
    b = norm_inv(probability_percent / 100, mu2, sigma2)
    loss_db = power_sum_db(a, b, c)

    logger.debug(
        f"Building entry loss at {frequency_ghz} GHz, p = {probability_percent}%: "
        f"mu1 = {mu1}, sigma1 = {sigma1}, mu2 = {mu2}, sigma2 = {sigma2}, "
        f"A = {a}, B = {b}, L = {loss_db}"
    )
    return BuildingEntryLossComponents(
        le=le,
        lh=lh,
        mu1=mu1,
        sigma1=sigma1,
        mu2=mu2,
        sigma2=sigma2,
        a=a,
        b=b,
        c=c,
        loss_db=loss_db,
    )


def bel(
    frequency_ghz: float,
    probability_percent: float,
    building_class: Union[int, str, BuildingClass],
    elevation_deg: float,
) -> float:
    """
    Building entry loss (dB) not exceeded for the probability
    probability_percent, according to Recommendation ITU-R P.2109.

    L = 10 * log10(10^(0.1 * A) + 10^(0.1 * B) + 10^(0.1 * C))
    """
    return get_bel_components(
        frequency_ghz, probability_percent, building_class, elevation_deg
    ).loss_db
