"""
工具函数
"""
