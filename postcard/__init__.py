"""
打卡明信片生成服务
"""

__version__ = "1.0.0"
