# -*- coding:utf-8 -*-

from . import status
from .config import HttpConfig, configure, get_config
from .errors import PrimalError, ResponseFinished, StatusCodeError
from .handler import RequestHandler
from .request import Request
from .response import Finished, Response
from .status import STATUS_MESSAGES


def debug(msg, *args):
    get_config().get_logger().debug(msg, *args)


def info(msg, *args):
    get_config().get_logger().info(msg, *args)


def warning(msg, *args):
    get_config().get_logger().warning(msg, *args)


def error(msg, *args):
    get_config().get_logger().error(msg, *args)


def exception(msg, *args):
    get_config().get_logger().exception(msg, *args)
