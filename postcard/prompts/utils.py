"""
Prompt工具模块
负责加载YAML提示词模板
"""

from pathlib import Path
from typing import Any, Dict

import yaml
from jinja2 import Template

from postcard.core.log_utils import get_logger

logger = get_logger(__name__)

PROMPTS_DIR = Path(__file__).parent


def load_prompt_template_config(template_path: str) -> Dict[str, Any]:
    """
    加载提示词模板配置

    Args:
        template_path: 模板路径（相对于 postcard/prompts/ 目录，不含扩展名）

    Returns:
        Dict: 模板文件内容（template、parameters、version等）

    Raises:
        FileNotFoundError: 模板文件不存在时抛出
    """
    file_path = PROMPTS_DIR / f"{template_path}.yml"
    if not file_path.exists():
        raise FileNotFoundError(f"模板文件不存在: {file_path}")

    with open(file_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_prompt_template(template_path: str) -> Template:
    """
    加载提示词模板

    Example:
        template = load_prompt_template('checkin/postcard_image')
        prompt = template.render(latitude=22.5, longitude=114.1,
                                 location_label="惠州", has_reference_image=False)
    """
    data = load_prompt_template_config(template_path)
    template_content = data.get('template', '')
    if not template_content:
        raise ValueError(f"模板中未找到template: {template_path}")

    template = Template(template_content, trim_blocks=True, lstrip_blocks=True)
    logger.info(f"成功加载提示词模板: {template_path}")
    return template
