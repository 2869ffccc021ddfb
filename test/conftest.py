import os
from typing import Callable

import pytest


@pytest.fixture
def workdir(tmp_path, monkeypatch) -> str:
    monkeypatch.chdir(tmp_path)
    return str(tmp_path)


@pytest.fixture
def make_input(workdir: str) -> Callable[[bytes], str]:
    def make(content: bytes, name: str = "input.bin") -> str:
        path = os.path.join(workdir, name)
        with open(path, "wb") as f:
            f.write(content)
        return path

    return make


@pytest.fixture
def read_chunks() -> Callable[[str], list[bytes]]:
    def read(prefix: str) -> list[bytes]:
        chunks = []
        i = 1
        while os.path.exists(f"{prefix}_{i}"):
            with open(f"{prefix}_{i}", "rb") as f:
                chunks.append(f.read())
            i += 1
        return chunks

    return read
