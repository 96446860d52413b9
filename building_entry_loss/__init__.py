# Copyright (c) Meta Platforms, Inc. and affiliates.

# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from building_entry_loss.common.configuration.enums import (
    BuildingClass,
    LoggerLevel,
)
from building_entry_loss.common.exceptions import DomainError
from building_entry_loss.common.rf.building_entry_loss import (
    bel,
    get_bel_components,
)
from building_entry_loss.common.utils import set_package_logger
