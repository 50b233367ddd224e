"""
v1 API端点
"""
