"""ConfigLoaderのテスト"""
import logging
from pathlib import Path

import pytest

from cartline.domain.value_objects.application_config import ApplicationConfig
from cartline.infrastructure.config.config_loader import ConfigLoader


@pytest.fixture
def config_loader(tmp_path: Path) -> ConfigLoader:
    """.envのないディレクトリを指すConfigLoader"""
    return ConfigLoader(project_root=tmp_path)


def test_load_config_defaults(clean_env, config_loader: ConfigLoader):
    """環境変数がない場合に既定値が使われることのテスト"""
    config = config_loader.load_config()

    assert config.log_level == "INFO"
    assert config.id_hash_algorithm == "sha1"
    assert config.id_key_order == "sorted"


def test_load_config_from_environment(clean_env, config_loader: ConfigLoader):
    """環境変数から設定が読み込まれることのテスト"""
    clean_env.setenv("CARTLINE_LOG_LEVEL", "debug")
    clean_env.setenv("CARTLINE_ID_HASH_ALGORITHM", "SHA256")
    clean_env.setenv("CARTLINE_ID_KEY_ORDER", "Insertion")

    config = config_loader.load_config()

    assert config.log_level == "DEBUG"
    assert config.id_hash_algorithm == "sha256"
    assert config.id_key_order == "insertion"


def test_load_config_from_dotenv(clean_env, tmp_path: Path):
    """.envファイルから設定が読み込まれることのテスト"""
    (tmp_path / ".env").write_text(
        "CARTLINE_ID_HASH_ALGORITHM=md5\nCARTLINE_ID_KEY_ORDER=insertion\n",
        encoding="utf-8",
    )

    config = ConfigLoader(project_root=tmp_path).load_config()

    assert config.id_hash_algorithm == "md5"
    assert config.id_key_order == "insertion"


def test_invalid_values_fall_back_with_warning(clean_env, config_loader: ConfigLoader, caplog):
    """不正な値が警告とともに既定値に置き換えられることのテスト"""
    clean_env.setenv("CARTLINE_ID_HASH_ALGORITHM", "crc32")
    clean_env.setenv("CARTLINE_ID_KEY_ORDER", "random")
    caplog.set_level(logging.WARNING, logger="cartline.infrastructure.config.config_loader")

    config = config_loader.load_config()

    assert config.id_hash_algorithm == "sha1"
    assert config.id_key_order == "sorted"
    assert "CARTLINE_ID_HASH_ALGORITHM" in caplog.text
    assert "CARTLINE_ID_KEY_ORDER" in caplog.text


def test_application_config_rejects_invalid_values():
    """ApplicationConfigが不正な値を拒否することのテスト"""
    with pytest.raises(ValueError):
        ApplicationConfig(id_hash_algorithm="crc32")

    with pytest.raises(ValueError):
        ApplicationConfig(id_key_order="random")
