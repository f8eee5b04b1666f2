import logging
from dataclasses import dataclass
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "configs/config.yml"


@dataclass
class ResolverConfig:
    html_parser: str = "lxml"          # any BeautifulSoup tree builder
    log_level: str = "INFO"


def _build_config(cfg_block: dict) -> ResolverConfig:
    return ResolverConfig(
        html_parser = cfg_block.get("html_parser", "lxml"),
        log_level   = str(cfg_block.get("log_level", "INFO")).upper(),
    )


def load_config(config_path: Optional[str] = DEFAULT_CONFIG_PATH) -> ResolverConfig:
    """Read the YAML config; a missing file just means defaults."""
    cfg = {}
    if config_path:
        try:
            with open(config_path) as f:
                cfg = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.debug("config %s not found, using defaults", config_path)
    if not isinstance(cfg, dict):
        logger.warning("config %s is not a mapping, using defaults", config_path)
        cfg = {}
    block = cfg.get("resolver") or {}
    return _build_config(block if isinstance(block, dict) else {})
