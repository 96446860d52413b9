# Copyright (c) Meta Platforms, Inc. and affiliates.

# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from building_entry_loss.common.structs import CoefficientSet

# Documented frequency domain of the model, in GHz. Not enforced.
MIN_FREQUENCY_GHZ = 0.08
MAX_FREQUENCY_GHZ = 100.0
# Valid elevation angle at the building facade, in degrees
MAX_ELEVATION_ANGLE = 90.0
# Exceedance probability is given in percent on the open interval (0, 100)
MIN_PERCENTAGE = 0.0
MAX_PERCENTAGE = 100.0

# Elevation angle dependent loss per degree, in dB
ELEVATION_LOSS_PER_DEGREE = 0.212
# Clutter floor term combined with both log-normal components, in dB
CLUTTER_FLOOR_LOSS = -3.0

TRADITIONAL_COEFFICIENTS = CoefficientSet(
    r=12.64, s=3.72, t=0.96, u=9.6, v=2.0, w=9.1, x=-3.0, y=4.5, z=-2.0
)
THERMALLY_EFFICIENT_COEFFICIENTS = CoefficientSet(
    r=28.19, s=-3.00, t=8.48, u=13.5, v=3.8, w=27.8, x=-2.9, y=9.4, z=-2.1
)

# Rational approximation constants of the inverse complementary cumulative
# normal distribution
QI_C0 = 2.515517
QI_C1 = 0.802853
QI_C2 = 0.010328
QI_D1 = 1.432788
QI_D2 = 0.189269
QI_D3 = 0.001308
