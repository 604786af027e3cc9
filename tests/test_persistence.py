import logging
import os

from services import persistence
from utils.paths import resolve_data_dir, DATA_DIR_ENV


def test_missing_files_load_empty():
    assert persistence.load_list('projects') == []
    assert persistence.load_dict('profile') == {}


def test_corrupt_json_defaults_and_warns(data_dir, caplog):
    (data_dir / 'ideas.json').write_text('{not json', encoding='utf-8')
    with caplog.at_level(logging.WARNING, logger='services.persistence'):
        assert persistence.load_list('ideas') == []
    assert "Could not load ideas" in caplog.text


def test_wrong_shape_defaults(data_dir):
    (data_dir / 'projects.json').write_text('{"id": "x"}', encoding='utf-8')
    (data_dir / 'profile.json').write_text('[1, 2]', encoding='utf-8')
    assert persistence.load_list('projects') == []
    assert persistence.load_dict('profile') == {}


def test_atomic_write_leaves_no_temp_files(data_dir):
    persistence.replace_all('check_ins', [{"date": "2024-01-01"}])
    persistence.append_item('check_ins', {"date": "2024-01-02"})
    assert [c["date"] for c in persistence.load_list('check_ins')] == ["2024-01-01", "2024-01-02"]
    assert sorted(os.listdir(data_dir)) == ['check_ins.json']


def test_writer_creates_missing_directory(tmp_path, monkeypatch):
    nested = tmp_path / 'nested' / 'dir'
    monkeypatch.setattr('services.persistence.DATA_DIR', str(nested))
    persistence.save_dict('profile', {"name": "Sam"})
    assert persistence.load_dict('profile') == {"name": "Sam"}


def test_clear_removes_file(data_dir):
    persistence.save_dict('profile', {"name": "Sam"})
    persistence.clear('profile')
    persistence.clear('profile')
    assert not (data_dir / 'profile.json').exists()


def test_resolve_data_dir_order(tmp_path, monkeypatch):
    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path / 'env'))
    assert resolve_data_dir(str(tmp_path / 'explicit')) == str(tmp_path / 'explicit')
    assert resolve_data_dir() == str(tmp_path / 'env')
    monkeypatch.delenv(DATA_DIR_ENV)
    assert resolve_data_dir().endswith('data')
