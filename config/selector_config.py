import json
from pathlib import Path
from typing import Dict, List, Optional

from utils import load_json_from_project


DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_COMBINATORS = [" ", "+", "~", ">"]


class SelectorConfig:
    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path) if config_path else None
        self._config = self._load_config() if self.config_path else {}

    def _load_config(self) -> dict:
        with open(self.config_path, 'r', encoding='utf-8') as f:
            return json.load(f)

    @classmethod
    def default(cls) -> "SelectorConfig":
        """Configuration with every setting at its default"""
        return cls()

    @classmethod
    def from_dict(cls, config: Dict) -> "SelectorConfig":
        instance = cls()
        instance._config = dict(config)
        return instance

    @classmethod
    def from_project(cls, json_path: str, project_root: Optional[str] = None) -> "SelectorConfig":
        """
        Input: json_path (str) - filename or path relative to project_root
               project_root (str) - directory to search from, defaults to cwd
        Functionality: Locate the config file inside the project and load it
        Output: SelectorConfig
        """
        return cls.from_dict(load_json_from_project(json_path, project_root))

    @property
    def log_level(self) -> str:
        return self._config.get('logging', {}).get('level', DEFAULT_LOG_LEVEL)

    @property
    def allowed_combinators(self) -> List[str]:
        return list(self._config.get('combinators', {}).get('allowed', DEFAULT_COMBINATORS))

    @property
    def strict_combinators(self) -> bool:
        """When True, combine() only accepts the allowed combinators"""
        return bool(self._config.get('combinators', {}).get('strict', False))
