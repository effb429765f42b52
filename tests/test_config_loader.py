import os
from tempfile import NamedTemporaryFile

import pytest

from MeteoCommonPy.utils.config_loader import ConfigLoader


def _write_config(text):
    tmp = NamedTemporaryFile('w+', suffix='.ini', delete=False, encoding='utf-8')
    tmp.write(text)
    tmp.flush()
    tmp.close()
    return tmp.name


def test_config_loader_env_expansion(monkeypatch):
    monkeypatch.setenv('TEST_VAR', 'expanded')
    path = _write_config('[section]\nkey=${TEST_VAR}')
    try:
        loader = ConfigLoader(config_path=path)
        assert loader.get('section', 'key') == 'expanded'
    finally:
        os.unlink(path)


def test_undefined_env_falls_back_to_default(monkeypatch):
    monkeypatch.delenv('METEO_UNDEFINED_VAR', raising=False)
    path = _write_config('[server]\nhost=${METEO_UNDEFINED_VAR}\nport=\n')
    try:
        loader = ConfigLoader(config_path=path)
        assert loader.get('server', 'host', '127.0.0.1') == '127.0.0.1'
        assert loader.getint('server', 'port', 56700) == 56700
    finally:
        os.unlink(path)


def test_typed_getters():
    path = _write_config(
        '[net]\nbuf=512\ninterval=0.25\nflag=true\noff=no\nbad=abc\n'
    )
    try:
        loader = ConfigLoader(config_path=path)
        assert loader.getint('net', 'buf') == 512
        assert loader.getfloat('net', 'interval') == 0.25
        assert loader.getboolean('net', 'flag') is True
        assert loader.getboolean('net', 'off') is False
        assert loader.getint('net', 'bad', 7) == 7
        assert loader.getint('missing', 'key', 3) == 3
        assert loader.getboolean('net', 'missing', True) is True
        assert loader.sections() == ['net']
    finally:
        os.unlink(path)


def test_missing_explicit_file():
    with pytest.raises(FileNotFoundError):
        ConfigLoader(config_path='/nonexistent/meteo/config.ini')


def test_default_path_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    loader = ConfigLoader()
    assert loader.sections() == []
    assert loader.get('server', 'host', 'x') == 'x'


def test_default_path_from_env(tmp_path, monkeypatch):
    config = tmp_path / 'meteo.ini'
    config.write_text('[server]\nport=60000\n', encoding='utf-8')
    monkeypatch.setenv('METEO_CONFIG', str(config))
    assert ConfigLoader().getint('server', 'port') == 60000
