# Copyright (c) Meta Platforms, Inc. and affiliates.

# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import logging
from typing import Optional, Union

from pyre_extensions import assert_is_instance

from building_entry_loss.common.configuration.enums import LoggerLevel

PACKAGE_LOGGER_NAME = "building_entry_loss"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def set_package_logger(
    logger_level: Union[LoggerLevel, str],
    log_file: Optional[str] = None,
    to_stderr: bool = True,
) -> logging.Logger:
    """
    Route the records of the building entry loss computation, i.e. the
    intermediate terms at DEBUG and the extrapolated frequency warning, to a
    file and/or stderr. Only the package logger is touched, the handlers of
    the root logger are left to the application.

    @param logger_level: LoggerLevel or its case-insensitive name
    @param log_file: file the records are appended to, if any
    @param to_stderr: whether the records are also written to stderr
    """
    if isinstance(logger_level, str):
        logger_level = assert_is_instance(
            LoggerLevel.from_string(logger_level), LoggerLevel
        )
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(logger_level.value)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    if log_file is not None:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)
    if to_stderr:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(stream_handler)
    # Records already handled here are not handled again by the root logger
    logger.propagate = not logger.handlers
    return logger
