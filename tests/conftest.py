import pytest
from cyrcipher import BAG_SEQUENCE

@pytest.fixture
def write_file(tmp_path):
    def _write(name: str, content: str) -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write

@pytest.fixture
def bag_sequence():
    return list(BAG_SEQUENCE)
