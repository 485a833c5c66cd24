import os
import json
import logging
import platform
from typing import Any, Dict, Optional

# GlueClone Imports
from glueclone.utils.execution_environment import running_on_lambda, running_on_glue

# Site settings GlueClone knows about
SITE_KEYS = ("AWS_PROFILE", "GLUECLONE_ROLE")


class ConfigManager:
    """ConfigManager (Singleton): GlueClone site settings (AWS profile, role to assume)

    Lookup order:
        1. The JSON file named by GLUECLONE_CONFIG
        2. The per-user file (see site_config_file())
        3. AWS_PROFILE / GLUECLONE_ROLE environment variables

    Per-workflow clone settings are not kept here, see core/clone_config.py
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._ready = False
        return cls._instance

    def __init__(self):
        if self._ready:
            return
        self.log = logging.getLogger("glueclone")
        self.site_config_path: Optional[str] = None
        self.using_default_config = False
        self.config = self._read_site_config()

        # Managed runtimes authenticate with their execution role, a laptop profile means nothing there
        if running_on_lambda() or running_on_glue():
            self.log.important("AWS managed runtime: ignoring AWS_PROFILE, GLUECLONE_ROLE comes from the env")
            self.config.pop("AWS_PROFILE", None)
            if "GLUECLONE_ROLE" in os.environ:
                self.config["GLUECLONE_ROLE"] = os.environ["GLUECLONE_ROLE"]
        self._ready = True

    def get_config(self, key: str, default_value: Any = None) -> Any:
        return self.config.get(key, default_value)

    def get_all_config(self) -> Dict[str, Any]:
        """Copy of every site setting"""
        return dict(self.config)

    def set_config(self, key: str, value: Any):
        """Override a site setting for the rest of this process (nothing is written to disk)"""
        self.config[key] = value

    @staticmethod
    def site_config_file() -> str:
        """Per-user config file: %LOCALAPPDATA%-style on Windows, a dot directory elsewhere"""
        home = os.path.expanduser("~")
        if platform.system() == "Windows":
            return os.path.join(home, "AppData", "Local", "GlueClone", "glueclone_config.json")
        return os.path.join(home, ".glueclone", "glueclone_config.json")

    def _read_site_config(self) -> Dict[str, Any]:
        path = os.environ.get("GLUECLONE_CONFIG")
        if path is None and os.path.exists(self.site_config_file()):
            path = self.site_config_file()
        if path is None:
            return self._config_from_env()

        self.site_config_path = path
        self.log.info(f"Reading site settings from {path}")
        try:
            with open(path) as fp:
                return json.load(fp)
        except (OSError, json.JSONDecodeError) as e:
            self.log.error(f"Unusable site config {path} ({e}), falling back to env vars")
            return self._config_from_env()

    def _config_from_env(self) -> Dict[str, Any]:
        self.using_default_config = True
        return {key: os.environ[key] for key in SITE_KEYS if key in os.environ}
