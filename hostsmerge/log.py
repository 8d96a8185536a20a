# -*- coding: utf-8 -*-

# Copyright (c) Huoty, All rights reserved
# Author: Huoty <sudohuoty@163.com>

import os
import sys
import logging
import datetime
from logging.handlers import RotatingFileHandler


from . import config


default_logger = logging.getLogger("hostsmerge")

info = default_logger.info
warn = default_logger.warning
warning = default_logger.warning
debug = default_logger.debug
error = default_logger.error
exception = default_logger.exception

default_format = "%(asctime)s - %(levelname)s - %(message)s"

_log = logging.getLogger(__name__)


class ColoredStreamHandler(logging.StreamHandler):
    """带色彩的流日志处理器"""

    C_RED = '\033[0;31m'
    C_BROWN = '\033[0;33m'
    C_DARK_GREY = '\033[1;30m'
    C_LIGHT_RED = '\033[1;31m'

    C_RESET = "\033[0m"

    def __init__(self, *args, **kwargs):
        self._colors = {logging.DEBUG: self.C_DARK_GREY,
                        logging.INFO: self.C_RESET,
                        logging.WARNING: self.C_BROWN,
                        logging.ERROR: self.C_RED,
                        logging.CRITICAL: self.C_LIGHT_RED}
        super(ColoredStreamHandler, self).__init__(*args, **kwargs)

    @property
    def is_tty(self):
        isatty = getattr(self.stream, 'isatty', None)
        return isatty and isatty()

    def emit(self, record):
        try:
            message = self.format(record)
            stream = self.stream
            if not self.is_tty:
                stream.write(message)
            else:
                message = self._colors[record.levelno] + message + self.C_RESET
                stream.write(message)
            stream.write(getattr(self, 'terminator', '\n'))
            self.flush()
        except (KeyboardInterrupt, SystemExit):
            raise
        except Exception:
            self.handleError(record)


class SystemLogFormatter(logging.Formatter):
    """支持微秒的日志格式器"""

    converter = datetime.datetime.fromtimestamp

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        if datefmt:
            s = ct.strftime(datefmt)
        else:
            t = ct.strftime("%Y-%m-%d %H:%M:%S")
            s = "%s,%03d" % (t, record.msecs)
        return s


def basic_config(level=None, format=None, verbose=True):
    """加载配置前使用的日志设置，非 verbose 时丢弃所有日志"""
    level = level or logging.INFO
    if isinstance(level, str):
        level = getattr(logging, level.upper())
    format = format or default_format
    logger = logging.getLogger()
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
    logger.setLevel(level)
    if verbose:
        stream_handler = ColoredStreamHandler(sys.stdout)
        formatter = SystemLogFormatter(format,
                                       datefmt='%Y-%m-%d %H:%M:%S,%f')
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)
    else:
        logger.addHandler(logging.NullHandler())
    return logger


def setup_logging(verbose=False, log_file=None, level=None,
                  enable_rotate_log=None, reset=False):
    """配置日志处理器

    仅在 verbose 时输出日志到标准输出，配置了日志文件时追加写入日志文件
    """
    logger = logging.getLogger()

    if len(logger.handlers) > 0 and not reset:
        _log.debug("logging has been set up")
        return logger

    for handler in logger.handlers:
        handler.close()
    logger.handlers = []  # 重置处理器
    logger.setLevel(getattr(logging, (level or config.LOGLEVEL).upper()))

    log_format = config.LOG_FORMAT or default_format
    log_file = log_file or config.LOG_FILE
    if enable_rotate_log is None:
        enable_rotate_log = config.ENABLE_ROTATE_LOG

    formatter = SystemLogFormatter(log_format, datefmt='%Y-%m-%d %H:%M:%S,%f')

    # 添加标准流日志处理器
    if verbose:
        stream_handler = ColoredStreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    # 添加文件日志处理器，可选自动轮转
    if log_file:
        log_dir = os.path.dirname(os.path.abspath(log_file))
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)
        if enable_rotate_log:
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=int(config.LOG_MAXSIZE or (20 * 1024 * 1024)),
                backupCount=int(config.LOG_BACKUPS or 10),
                encoding="utf-8",
            )
        else:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        _log.debug("Added file log handler, logfile: %s",
                   file_handler.baseFilename)

    # 未配置任何处理器时，避免 logging 将警告及错误输出到标准错误
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
