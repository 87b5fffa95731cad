# -*- coding:utf-8 -*-

import pytest

from primal import config


@pytest.fixture(autouse=True)
def fresh_config():
    # 每个测试使用新的默认配置
    config.reset_config()
    yield
    config.reset_config()
