import io
import os
import tempfile

import pytest

from param_dashboard.components.file_upload import (
    FileUploadService,
    file_extension,
    load_file,
    summarise_table,
)
from param_dashboard.core import ValidationError

INVALID_MESSAGE = "Invalid file; Please upload a .csv or .tsv file"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("data.csv", "csv"),
        ("DATA.TSV", "tsv"),
        ("archive.tar.gz", "gz"),
        ("README", ""),
        ("", ""),
    ],
)
def test_file_extension(name, expected):
    assert file_extension(name) == expected


def test_load_csv(csv_file):
    frame = load_file("measurements.csv", csv_file)

    assert list(frame.columns) == ["site", "depth", "temp"]
    assert len(frame) == 3


def test_load_tsv_uses_tab_delimiter(tsv_file):
    frame = load_file("measurements.tsv", tsv_file)

    assert list(frame.columns) == ["site", "depth"]
    assert frame["depth"].tolist() == [1.5, 2.0]


def test_extension_comes_from_upload_name_not_path(tsv_file):
    # Browsers upload to temp paths with no useful extension
    frame = load_file("measurements.tsv", str(tsv_file))
    assert len(frame) == 2

    with pytest.raises(ValidationError):
        load_file("measurements.xlsx", str(tsv_file))


def test_invalid_extension_message(csv_file):
    with pytest.raises(ValidationError) as excinfo:
        load_file("measurements.json", csv_file)

    assert excinfo.value.message == INVALID_MESSAGE
    assert excinfo.value.to_dict() == {"error": INVALID_MESSAGE}


def test_summarise_table_replaces_missing_values(csv_file):
    frame = load_file("measurements.csv", csv_file)

    preview = summarise_table(frame, n_rows=2)

    assert preview["columns"] == ["site", "depth", "temp"]
    assert preview["n_rows"] == 3
    assert preview["rows"] == [
        {"site": "A", "depth": 1.5, "temp": 12.0},
        {"site": "B", "depth": 2.0, "temp": None},
    ]


def test_service_custom_extensions(tmp_path):
    path = tmp_path / "values.txt"
    path.write_text("a;b\n1;2\n", encoding="utf-8")
    service = FileUploadService({
        "UPLOAD_EXTENSIONS": {"txt": ";"},
        "UPLOAD_ERROR_MESSAGE": "Only .txt files",
        "PREVIEW_ROWS": 10,
    })

    preview = service.preview_upload("values.txt", path)
    assert preview["columns"] == ["a", "b"]
    assert preview["filename"] == "values.txt"

    with pytest.raises(ValidationError, match="Only .txt files"):
        service.preview_upload("values.csv", path)


def test_api_upload_csv(client):
    data = {"file": (io.BytesIO(b"x,y\n1,2\n3,4\n"), "points.csv")}

    response = client.post("/api/upload", data=data, content_type="multipart/form-data")

    assert response.status_code == 200
    body = response.get_json()
    assert body["filename"] == "points.csv"
    assert body["columns"] == ["x", "y"]
    assert body["n_rows"] == 2
    assert body["rows"][0] == {"x": 1, "y": 2}


def test_api_upload_tsv(client):
    data = {"file": (io.BytesIO(b"x\ty\n1\t2\n"), "points.tsv")}

    response = client.post("/api/upload", data=data, content_type="multipart/form-data")

    assert response.status_code == 200
    assert response.get_json()["columns"] == ["x", "y"]


def test_api_upload_invalid_extension(client):
    data = {"file": (io.BytesIO(b"x,y\n1,2\n"), "points.xlsx")}

    response = client.post("/api/upload", data=data, content_type="multipart/form-data")

    assert response.status_code == 400
    assert response.get_json() == {"error": INVALID_MESSAGE}


def test_api_upload_empty_file(client):
    data = {"file": (io.BytesIO(b""), "empty.csv")}

    response = client.post("/api/upload", data=data, content_type="multipart/form-data")

    assert response.status_code == 400
    assert "error" in response.get_json()


def test_api_upload_without_file_halts_silently(client):
    response = client.post("/api/upload", data={}, content_type="multipart/form-data")

    assert response.status_code == 204
    assert response.get_data() == b""


def test_api_upload_non_ascii_name(client):
    data = {"file": (io.BytesIO(b"x,y\n1,2\n"), "日本.csv")}

    response = client.post("/api/upload", data=data, content_type="multipart/form-data")

    assert response.status_code == 200
    body = response.get_json()
    assert body["filename"] == "日本.csv"
    assert body["columns"] == ["x", "y"]


@pytest.fixture()
def temp_uploads(monkeypatch):
    created = []
    real_mkstemp = tempfile.mkstemp

    def recording_mkstemp(*args, **kwargs):
        fd, path = real_mkstemp(*args, **kwargs)
        created.append(path)
        return fd, path

    monkeypatch.setattr(tempfile, "mkstemp", recording_mkstemp)
    return created


@pytest.mark.parametrize(
    "content, filename, status",
    [
        (b"x,y\n1,2\n", "points.csv", 200),
        (b"x,y\n1,2\n", "points.xlsx", 400),
        (b"", "empty.csv", 400),
    ],
)
def test_api_upload_removes_temp_copy(client, temp_uploads, content, filename, status):
    data = {"file": (io.BytesIO(content), filename)}

    response = client.post("/api/upload", data=data, content_type="multipart/form-data")

    assert response.status_code == status
    assert len(temp_uploads) == 1
    assert not os.path.exists(temp_uploads[0])
