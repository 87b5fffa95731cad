# -*- coding:utf-8 -*-

import logging


class HttpConfig:
    def __init__(self):
        self.logger = None      # type: logging.Logger or None
        self.logger_level = logging.INFO   # 日志等级
        self.default_protocol = "HTTP/1.0"  # 请求中没有声明协议版本时使用
        self.cookie_lifetime = 3600 * 24 * 30   # Cookie默认30天过期
        self.json_content_type = "application/json"
        self.charset = "utf-8"

    def set_logger(self, logger):
        self.logger = logger

    def set_logger_level(self, level):
        self.logger_level = level

    def set_default_protocol(self, protocol):
        if not protocol.startswith("HTTP/"):
            raise ValueError("protocol must look like HTTP/x.y, got {0!r}".format(protocol))
        self.default_protocol = protocol

    def set_cookie_lifetime(self, seconds):
        if seconds <= 0:
            raise ValueError("cookie lifetime must be positive")
        self.cookie_lifetime = int(seconds)

    def set_json_content_type(self, content_type):
        self.json_content_type = content_type

    def set_charset(self, charset):
        self.charset = charset

    def get_logger(self):
        if self.logger is None:
            return logging.getLogger("primal")
        return self.logger


# 模块单例对象
_config = None    # type: HttpConfig or None


def configure(config:HttpConfig):
    """
    设置进程默认的配置，同时应用日志等级
    :param config:
    :return:
    """
    global _config
    if not isinstance(config, HttpConfig):
        raise ValueError("config must be an instance of HttpConfig")
    if config.logger is None:
        config.logger = logging.getLogger("primal")
    config.logger.setLevel(config.logger_level)
    _config = config
    return config


def get_config():
    global _config
    if _config is None:
        _config = HttpConfig()
    return _config


def reset_config():
    global _config
    _config = None
