import logging
from unittest.mock import MagicMock

import pytest

from hydrophone.conf import Config
from hydrophone.core.client import ServerVersion
from hydrophone.core.errors import ClusterVersionError, OutputDirectoryError
from hydrophone.core.validate import ensure_output_dir, validate_args

HOST = "https://127.0.0.1:6443"


def reachable_client():
    client = MagicMock()
    client.server_version.return_value = ServerVersion(major="1", minor="28", git_version="v1.28.0")
    return client


def messages(caplog):
    return [r.getMessage() for r in caplog.records if r.name == "hydrophone.core.validate"]


def test_validate_args_logs_banner(tmp_path, caplog):
    caplog.set_level(logging.INFO)
    output_dir = tmp_path / "results"
    config = Config(focus="[Conformance]", output_dir=str(output_dir))

    validate_args(reachable_client(), MagicMock(host=HOST), config)

    logged = messages(caplog)
    assert logged[0] == f"API endpoint : {HOST}"
    assert "v1.28.0" in logged[1]
    assert "Running tests : '[Conformance]'" in logged
    assert not any(m.startswith("Skipping tests") for m in logged)
    assert "Using conformance image : 'registry.k8s.io/conformance:v1.28.0'" in logged
    assert "Using busybox image : 'registry.k8s.io/e2e-test-images/busybox:1.36.1-1'" in logged
    assert logged[-1] == "Test framework will start '1' threads and use verbosity '4'"
    assert output_dir.is_dir()


def test_validate_args_logs_skip(tmp_path, caplog):
    caplog.set_level(logging.INFO)
    config = Config(focus="sig-auth", skip="Serial|Disruptive", output_dir=str(tmp_path))

    validate_args(reachable_client(), MagicMock(host=HOST), config)

    assert "Skipping tests : 'Serial|Disruptive'" in messages(caplog)


def test_validate_args_version_failure(tmp_path, caplog):
    caplog.set_level(logging.INFO)
    output_dir = tmp_path / "results"
    config = Config(focus="[Conformance]", output_dir=str(output_dir))
    client = MagicMock()
    client.server_version.side_effect = ClusterVersionError(ConnectionRefusedError("connection refused"))

    with pytest.raises(ClusterVersionError):
        validate_args(client, MagicMock(host=HOST), config)

    logged = messages(caplog)
    assert len(logged) == 1
    assert logged[0].startswith("Error fetching server version: ")
    assert not output_dir.exists()


def test_ensure_output_dir_creates_parents(tmp_path):
    path = tmp_path / "a" / "b" / "c"
    ensure_output_dir(str(path))

    assert path.is_dir()


def test_ensure_output_dir_existing(tmp_path):
    (tmp_path / "marker").write_text("kept")
    ensure_output_dir(str(tmp_path))

    assert (tmp_path / "marker").read_text() == "kept"


def test_ensure_output_dir_failure(tmp_path, caplog):
    blocker = tmp_path / "file"
    blocker.write_text("")
    path = blocker / "results"

    with pytest.raises(OutputDirectoryError) as exc_info:
        ensure_output_dir(str(path))

    assert exc_info.value.path == str(path)
    assert f"Error creating output directory [{path}]" in caplog.text
