"""
Конфигурация для генерации TypeScript клиента
"""

import os
from typing import Optional
import toml
from dataclasses import dataclass

CONFIG_FILE_NAME = "typed-fetch.toml"


@dataclass
class TypedFetchConfig:
    """Конфигурация генератора typed-fetch"""

    openapi: Optional[str] = None
    output: Optional[str] = None
    url_types: bool = False

    @classmethod
    def from_file(
        cls, config_path: str = CONFIG_FILE_NAME, search_dir: str = None
    ) -> Optional["TypedFetchConfig"]:
        """Загрузка конфигурации из файла"""
        # Если указана директория для поиска, ищем конфиг там
        if search_dir and os.path.isdir(search_dir):
            config_in_dir = os.path.join(search_dir, CONFIG_FILE_NAME)
            if os.path.exists(config_in_dir):
                config_path = config_in_dir

        if not os.path.exists(config_path):
            return None

        try:
            config_data = toml.load(config_path)
        except (OSError, toml.TomlDecodeError):
            return None

        return cls(
            openapi=config_data.get("openapi"),
            output=config_data.get("output"),
            url_types=bool(config_data.get("url_types", False)),
        )

    def save_to_file(self, config_path: str = CONFIG_FILE_NAME) -> None:
        """Сохранение конфигурации в файл"""
        # toml не умеет None - пропускаем пустые значения
        config_data = {
            key: value
            for key, value in (
                ("openapi", self.openapi),
                ("output", self.output),
                ("url_types", self.url_types),
            )
            if value is not None
        }

        with open(config_path, "w", encoding="utf-8") as f:
            toml.dump(config_data, f)

    def merge_with_args(self, args) -> "TypedFetchConfig":
        """Объединение с аргументами командной строки"""
        return TypedFetchConfig(
            openapi=args.openapi or self.openapi,
            output=args.output or self.output,
            url_types=args.url_types or self.url_types,
        )
