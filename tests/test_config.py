"""
Тесты для системы конфигурации
"""

import os
import tempfile
from typed_fetch.config import TypedFetchConfig


class TestTypedFetchConfig:
    """Тесты конфигурации typed-fetch"""

    def test_config_creation(self):
        """Тест создания конфигурации"""
        config = TypedFetchConfig(openapi="petstore.yaml", output="client.ts")

        assert config.openapi == "petstore.yaml"
        assert config.output == "client.ts"
        assert config.url_types is False

    def test_config_save_and_load(self):
        """Тест сохранения и загрузки конфигурации"""
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = os.path.join(temp_dir, "test-typed-fetch.toml")

            # Создаем и сохраняем конфиг
            original_config = TypedFetchConfig(
                openapi="https://api.example.com/openapi.json", url_types=True
            )
            original_config.save_to_file(config_path)

            # Загружаем конфиг
            loaded_config = TypedFetchConfig.from_file(config_path)

            assert loaded_config is not None
            assert loaded_config.openapi == "https://api.example.com/openapi.json"
            assert loaded_config.output is None
            assert loaded_config.url_types is True

    def test_config_search_dir(self, tmp_path):
        """Тест поиска конфига в директории"""
        TypedFetchConfig(openapi="spec.json").save_to_file(
            str(tmp_path / "typed-fetch.toml")
        )

        loaded_config = TypedFetchConfig.from_file("missing.toml", search_dir=str(tmp_path))

        assert loaded_config is not None
        assert loaded_config.openapi == "spec.json"

    def test_config_file_not_exists(self):
        """Тест загрузки несуществующего конфига"""
        config = TypedFetchConfig.from_file("nonexistent.toml")
        assert config is None

    def test_broken_config(self, tmp_path):
        """Тест загрузки поврежденного конфига"""
        config_path = tmp_path / "typed-fetch.toml"
        config_path.write_text("openapi = [unterminated")

        assert TypedFetchConfig.from_file(str(config_path)) is None

    def test_config_merge_with_args(self):
        """Тест объединения конфига с аргументами"""
        config = TypedFetchConfig(openapi="old.yaml", output="client.ts")

        # Мокаем args
        class MockArgs:
            def __init__(self):
                self.openapi = "new.yaml"
                self.output = None
                self.url_types = False

        merged = config.merge_with_args(MockArgs())

        assert merged.openapi == "new.yaml"  # Переписан из args
        assert merged.output == "client.ts"  # Остался из config
        assert merged.url_types is False

    def test_default_values(self):
        """Тест значений по умолчанию"""
        config = TypedFetchConfig()

        assert config.openapi is None
        assert config.output is None
        assert config.url_types is False
