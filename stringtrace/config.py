#!/usr/bin/env python3
"""
stringtrace Configuration Management
"""

import copy
import os
from typing import Any

from .config_schemas import StringTraceConfig, create_default_config
from .config_store import ConfigStore


class Config:
    """Configuration manager for stringtrace"""

    DEFAULT_CONFIG = create_default_config().to_dict()

    def __init__(self, config_path: str | None = None):
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        self.config_path = config_path

        # Load configuration if exists
        if self.config_path and os.path.exists(self.config_path):
            self.load_config()

    def load_config(self) -> None:
        """Load configuration from file"""
        user_config = ConfigStore.load(self.config_path) if self.config_path else None
        if user_config:
            self._merge_config(user_config)

    def save_config(self, path: str | None = None) -> None:
        """Save configuration to file"""
        target = path or self.config_path
        if not target:
            raise ValueError("No config path to save to")
        ConfigStore.save(target, self.config)

    def _merge_config(self, user_config: dict[str, Any]) -> None:
        """Merge user configuration with defaults"""
        for section, settings in user_config.items():
            if section in self.config and isinstance(settings, dict):
                self.config[section].update(settings)
            else:
                self.config[section] = settings

    def get(self, section: str, key: str | None = None, default=None):
        """Get configuration value"""
        if key is None:
            return self.config.get(section, default)
        return self.config.get(section, {}).get(key, default)

    def set(self, section: str, key: str, value) -> None:
        """Set configuration value"""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value

    def to_schema(self) -> StringTraceConfig:
        """Validate the merged configuration into typed schemas"""
        known = {k: v for k, v in self.config.items() if k in ("analysis", "tracker")}
        return StringTraceConfig.from_dict(known)

    def __getitem__(self, key):
        """Allow dict-like access"""
        return self.config[key]

    def __contains__(self, key):
        """Allow 'in' operator"""
        return key in self.config
