# Copyright (c) Meta Platforms, Inc. and affiliates.

# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from typing import NamedTuple


class CoefficientSet(NamedTuple):
    """
    Empirical constants of the building entry loss model for one building
    class. r, s, t shape the horizontal path loss, u, v the spread of the
    first log-normal component, w, x the median of the second one and y, z
    its spread.
    """

    r: float
    s: float
    t: float
    u: float
    v: float
    w: float
    x: float
    y: float
    z: float


class BuildingEntryLossComponents(NamedTuple):
    le: float
    lh: float
    mu1: float
    sigma1: float
    mu2: float
    sigma2: float
    a: float
    b: float
    c: float
    loss_db: float
