"""
存储服务模块
提供统一的存储服务访问接口，支持多种存储适配器
"""

from typing import Optional

from postcard.core.cos import COSConfig, validate_cos_config
from postcard.core.storage.adapters.tencent_cos import TencentCosAdapter
from postcard.core.storage.base_storage import BaseStorage
from postcard.core.storage.exceptions import (
    ClientError,
    ConfigurationError,
    StorageError,
    UploadError,
)
from postcard.core.storage.factory import (
    create_adapter,
    list_available_adapters,
    register_adapter,
)
from postcard.core.storage.models import StoredArtifact, UploadResult

# 自动注册腾讯云COS适配器
register_adapter(TencentCosAdapter.ADAPTER_NAME, TencentCosAdapter)


def get_storage_service(config: COSConfig, adapter_name: Optional[str] = None) -> BaseStorage:
    """
    获取存储服务实例

    Args:
        config: 存储配置
        adapter_name: 适配器名称（如 'tencent_cos'），不指定则自动检测

    Raises:
        ConfigurationError: 没有可用的存储服务时抛出
    """
    if adapter_name is None:
        if not validate_cos_config(config):
            raise ConfigurationError("没有可用的存储服务。请配置腾讯云COS存储")
        adapter_name = TencentCosAdapter.ADAPTER_NAME

    return create_adapter(adapter_name, config)


__all__ = [
    'get_storage_service',
    'create_adapter',
    'list_available_adapters',
    'register_adapter',
    'BaseStorage',
    'TencentCosAdapter',
    'StorageError',
    'ConfigurationError',
    'ClientError',
    'UploadError',
    'UploadResult',
    'StoredArtifact',
]
