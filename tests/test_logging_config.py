import sysconfig
from pathlib import Path

import pytest

from vec2.logging_config import DEFAULT_LOG_DIR


@pytest.mark.parametrize("install_path", ["stdlib", "platstdlib", "purelib", "platlib"])
def test_default_log_dir_is_outside_the_interpreter(install_path: str) -> None:
    prefix = Path(sysconfig.get_paths()[install_path]).resolve()

    assert prefix not in DEFAULT_LOG_DIR.resolve().parents
    assert DEFAULT_LOG_DIR.resolve() != prefix
