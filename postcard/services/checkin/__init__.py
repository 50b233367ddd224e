"""
打卡明信片服务
"""
