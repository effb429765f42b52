"""
設定ファイルローダー

INI形式の設定ファイルを読み込み、${VAR} 形式の環境変数参照を展開する。
"""
import os
import re
import configparser
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

_ENV_PATTERN = re.compile(r"\$\{([^}]+)\}")


class ConfigLoader:
    """環境変数展開付きの設定ローダー"""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """
        初期化

        Args:
            config_path: 設定ファイルのパス（Noneの場合は METEO_CONFIG か
                カレントディレクトリの config.ini を参照し、存在しなければ空設定）

        Raises:
            FileNotFoundError: 明示的に指定したファイルが存在しない場合
        """
        load_dotenv()

        self.config = configparser.ConfigParser(interpolation=None)

        if config_path is None:
            default_path = os.getenv("METEO_CONFIG") or str(Path.cwd() / "config.ini")
            self.config_path = Path(default_path)
            if self.config_path.exists():
                self._load()
        else:
            self.config_path = Path(config_path)
            if not self.config_path.exists():
                raise FileNotFoundError(f"設定ファイルが見つかりません: {self.config_path}")
            self._load()

    def _load(self):
        with open(self.config_path, "r", encoding="utf-8") as f:
            self.config.read_file(f)

    @staticmethod
    def _expand_env_vars(value: str) -> str:
        """${VAR} を環境変数の値で置き換える（未定義の場合は空文字列）"""
        return _ENV_PATTERN.sub(lambda m: os.getenv(m.group(1), ""), value)

    def get(self, section, key, default=None):
        """文字列として取得"""
        try:
            value = self.config.get(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError):
            return default
        value = self._expand_env_vars(value).strip()
        # 空欄・未定義の環境変数はデフォルト値扱い
        return value if value else default

    def getint(self, section, key, default=None):
        """整数として取得（変換できない場合はデフォルト値）"""
        value = self.get(section, key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def getfloat(self, section, key, default=None):
        """浮動小数点数として取得"""
        value = self.get(section, key)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            return default

    def getboolean(self, section, key, default=False):
        """真偽値として取得"""
        value = self.get(section, key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    def sections(self):
        return self.config.sections()
