"""Settings for the scraping service, merged from defaults, a JSON file and the environment."""

import json
import os
from typing import Any, Dict, Optional


class ConfigError(ValueError):
    """Missing or unreadable configuration."""


DEFAULT_CONFIG = {
    "api_url": "https://api.firecrawl.dev",
    "api_key": "",
    "timeout": 60,
    "wait_for": 10000,
    "only_main_content": False,
    "include_tags": [
        'title', 'meta', 'header', 'nav', 'main', 'section', 'article', 'aside', 'footer',
        'div', 'span', 'p', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'img', 'a', 'ul', 'ol', 'li',
        'form', 'input', 'button', 'table', 'video', 'iframe'
    ],
    "exclude_tags": ['script', 'style', 'noscript'],
    "remove_base64_images": False,
}

# Environment variables override file values
ENV_OVERRIDES = {
    "FIRECRAWL_API_KEY": "api_key",
    "FIRECRAWL_API_URL": "api_url",
}


def load_config(config_path: Optional[str] = None,
                overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    config = dict(DEFAULT_CONFIG)

    if config_path:
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                file_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Error reading config file {config_path}: {e}") from e
        if not isinstance(file_config, dict):
            raise ConfigError(f"Config file {config_path} must contain a JSON object")
        config.update(file_config)

    for env_key, config_key in ENV_OVERRIDES.items():
        value = os.environ.get(env_key, "").strip()
        if value:
            config[config_key] = value

    if overrides:
        config.update(overrides)

    return config
