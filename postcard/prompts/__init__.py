"""
Prompt模板
"""

from postcard.prompts.utils import load_prompt_template, load_prompt_template_config

__all__ = ["load_prompt_template", "load_prompt_template_config"]
