"""
日志消息模板模块
统一管理所有业务日志消息模板，便于维护和国际化
"""

from typing import Dict, Any


class LogMessages:
    """日志消息模板类"""

    # ==================== 通用日志消息 ====================
    OPERATION_SUCCESS = "操作成功完成: {operation_name}"

    # ==================== 打卡明信片流水线 ====================
    POSTCARD_START = "打卡图片生成开始: 位置 {latitude}, {longitude}"
    POSTCARD_PROMPT_BUILT = "明信片提示词构建完成"
    POSTCARD_GENERATION_SUCCESS = "Gemini图片生成成功，大小: {size} bytes"
    POSTCARD_GENERATION_FAILED = "Gemini图片生成失败"
    POSTCARD_UPLOAD_SUCCESS = "明信片图片已上传: {path}"
    POSTCARD_UPLOAD_FAILED = "明信片图片上传失败"
    POSTCARD_COMPLETED = "打卡图片生成完成: {url}"

    # ==================== 请求处理 ====================
    VALIDATION_FAILED = "请求验证失败"
    REQUEST_FAILED = "打卡图片请求处理异常"

    @classmethod
    def format_message(cls, message_template: str, **kwargs: Any) -> str:
        """格式化日志消息模板"""
        return message_template.format(**kwargs)

    @classmethod
    def get_structured_data(cls, **kwargs: Any) -> Dict[str, Any]:
        """获取结构化日志数据"""
        return kwargs


# 全局实例
log_messages = LogMessages()
