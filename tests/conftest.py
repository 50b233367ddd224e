"""
测试配置和fixtures
为所有测试提供共享的配置和fixtures
"""

import pytest

from tests.utils.mock_utils import MockBuilder


@pytest.fixture(scope="function")
def mock_generator():
    """返回固定PNG字节的生成器"""
    return MockBuilder.create_mock_generator()


@pytest.fixture(scope="function")
def mock_storage():
    """上传成功并返回固定URL的存储"""
    return MockBuilder.create_mock_storage()


@pytest.fixture(scope="function")
def cos_config():
    """完整的测试COS配置"""
    return MockBuilder.create_cos_config()


# 测试标记配置
def pytest_configure(config):
    """配置pytest标记"""
    config.addinivalue_line("markers", "unit: 单元测试")
    config.addinivalue_line("markers", "integration: 集成测试")
    config.addinivalue_line("markers", "prompt: 提示词相关测试")
    config.addinivalue_line("markers", "generation: 图片生成相关测试")
    config.addinivalue_line("markers", "storage: 存储相关测试")
    config.addinivalue_line("markers", "handler: 请求处理相关测试")
    config.addinivalue_line("markers", "logging: 日志相关测试")
