import argparse
import json
import logging
import os
import sys
from typing import Any, Dict
from urllib.parse import urlparse

import httpx
import yaml

from typed_fetch.config import CONFIG_FILE_NAME, TypedFetchConfig
from typed_fetch.generator import TypedFetchGenerator
from typed_fetch.internal.generator.client_generator import GeneratorOptions
from typed_fetch.internal.types.errors import TypedFetchError


def _status(message: str):
    """Статус в stderr - stdout занят сгенерированным кодом"""
    print(message, file=sys.stderr)


def _document_format(source: str) -> str:
    """Формат документа по расширению: json или yaml"""
    path = urlparse(source).path if _is_url(source) else source

    if path.endswith(".json"):
        return "json"
    if path.endswith((".yaml", ".yml")):
        return "yaml"

    raise ValueError(f"Unsupported file format: {source}")


def _decode_document(text: str, source: str) -> Dict[str, Any]:
    """Декодирование JSON/YAML по расширению"""
    if _document_format(source) == "json":
        return json.loads(text)
    return yaml.safe_load(text)


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def load_openapi_document(source: str) -> Dict[str, Any]:
    """Загрузка OpenAPI документа из файла или по URL"""
    if _is_url(source):
        # Проверяем расширение до сетевого запроса
        _document_format(source)
        response = httpx.get(source, follow_redirects=True)
        response.raise_for_status()
        return _decode_document(response.text, source)

    with open(source, "r", encoding="utf-8") as f:
        return _decode_document(f.read(), source)


def _write_output(source_code: str, output: str = None):
    """Запись результата в файл или stdout"""
    if not output:
        print(source_code)
        return

    output_dir = os.path.dirname(output)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    with open(output, "w", encoding="utf-8") as f:
        f.write(source_code)

    _status(f"📦 Клиент создан в: {os.path.abspath(output)}")


def _generate_source(config: TypedFetchConfig) -> str:
    """Ядро генерации - загрузка спецификации и сборка TypeScript"""
    _status(f"🚀 Генерация клиента из {config.openapi}")

    _status("📥 Загрузка OpenAPI спецификации...")
    openapi_spec = load_openapi_document(config.openapi)

    _status("⚙️ Генерация кода...")
    generator = TypedFetchGenerator(
        openapi_spec, GeneratorOptions(url_types=config.url_types)
    )
    return generator.generate()


def generate():
    """Команда генерации typed-fetch клиента"""
    parser = argparse.ArgumentParser(
        description="Генерация TypeScript fetch-клиента из OpenAPI"
    )
    parser.add_argument(
        "--openapi", type=str, help="Путь или URL к спецификации (.json, .yaml, .yml)"
    )
    parser.add_argument(
        "--output", type=str, help="Файл для результата (по умолчанию stdout)"
    )
    parser.add_argument(
        "--url-types", action="store_true", help="Генерировать литеральные типы URL"
    )
    parser.add_argument(
        "--config", type=str, default=CONFIG_FILE_NAME, help="Путь к typed-fetch.toml"
    )
    parser.add_argument(
        "--init-config", action="store_true", help="Создать конфиг файл typed-fetch.toml"
    )
    parser.add_argument("--verbose", action="store_true", help="Отладочный вывод")

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    # Инициализация конфига
    if args.init_config:
        config = TypedFetchConfig(
            openapi=args.openapi, output=args.output, url_types=args.url_types
        )
        config.save_to_file(args.config)
        _status(f"✅ Создан конфиг файл {args.config}")
        return

    file_config = TypedFetchConfig.from_file(args.config)
    if file_config:
        _status(f"📋 Используется конфиг из {args.config}")
        final_config = file_config.merge_with_args(args)
    else:
        final_config = TypedFetchConfig(
            openapi=args.openapi, output=args.output, url_types=args.url_types
        )

    if not final_config.openapi:
        _status("❌ Ошибка: Укажите --openapi или создайте конфиг с --init-config")
        sys.exit(1)

    try:
        source_code = _generate_source(final_config)
        _write_output(source_code, final_config.output)
    except (TypedFetchError, ValueError, OSError, httpx.HTTPError, yaml.YAMLError) as e:
        _status(f"❌ Ошибка генерации: {e}")
        sys.exit(1)

    _status("✅ Генерация завершена успешно!")


if __name__ == "__main__":
    generate()
