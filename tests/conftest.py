import pytest

from param_dashboard import create_app


@pytest.fixture()
def app():
    app = create_app({
        'TESTING': True,
        'RATELIMIT_ENABLED': False,
    })
    return app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def csv_file(tmp_path):
    path = tmp_path / "measurements.csv"
    path.write_text("site,depth,temp\nA,1.5,12.0\nB,2.0,\nC,3.5,9.5\n", encoding="utf-8")
    return path


@pytest.fixture()
def tsv_file(tmp_path):
    path = tmp_path / "measurements.tsv"
    path.write_text("site\tdepth\nA\t1.5\nB\t2.0\n", encoding="utf-8")
    return path
