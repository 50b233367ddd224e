"""
明信片提示词服务
基于YAML模板生成打卡明信片的文生图提示词
"""

from postcard.prompts.utils import load_prompt_template


class PostcardPromptService:
    """明信片提示词服务"""

    TEMPLATE_PATH = 'checkin/postcard_image'

    def __init__(self, location_label: str = "惠州"):
        """
        初始化提示词服务

        Args:
            location_label: 明信片上 "Greetings from ..." 使用的固定地名
        """
        self.location_label = location_label
        self.template = load_prompt_template(self.TEMPLATE_PATH)

    def build_prompt(self, latitude: float, longitude: float, has_reference_image: bool) -> str:
        """
        生成明信片提示词

        坐标原样写入提示词，不做范围校验

        Args:
            latitude: 纬度
            longitude: 经度
            has_reference_image: 是否附带参考图片（头像）

        Returns:
            str: 格式化后的提示词
        """
        return self.template.render(
            latitude=latitude,
            longitude=longitude,
            location_label=self.location_label,
            has_reference_image=bool(has_reference_image)
        )
