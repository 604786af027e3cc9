import pytest


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    # Redirect data dir for isolation
    path = tmp_path / 'data'
    path.mkdir()
    monkeypatch.setattr('services.persistence.DATA_DIR', str(path))
    return path
