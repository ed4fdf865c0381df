import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from tetrix.audio import Audio


def test_missing_file_raises_runtime_error(tmp_path):
    missing = tmp_path / "missing.ogg"
    with pytest.raises(RuntimeError) as info:
        Audio(missing)
    assert str(missing) in str(info.value)


def test_garbage_file_raises_runtime_error(tmp_path):
    bogus = tmp_path / "bogus.ogg"
    bogus.write_bytes(b"this is not audio data at all")
    with pytest.raises(RuntimeError) as info:
        Audio(bogus)
    assert "No se pudo cargar el archivo de audio" in str(info.value)


def test_announces_load_attempt(tmp_path, capsys):
    missing = tmp_path / "nothing.ogg"
    with pytest.raises(RuntimeError):
        Audio(missing)
    out = capsys.readouterr().out
    assert out.startswith("Intentando cargar el archivo de audio: ")
    assert str(missing) in out