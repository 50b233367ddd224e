"""
存储适配器
"""

from postcard.core.storage.adapters.tencent_cos import TencentCosAdapter

__all__ = ['TencentCosAdapter']
