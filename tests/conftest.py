import json
import os
import shutil
import tempfile

import pytest

# Importing hello_service.app builds the module-level app, which creates ./logs.
# Collection runs after pytest_configure, so that directory lands in a scratch dir.
_original_cwd = None
_scratch_dir = None


def pytest_configure(config):
    global _original_cwd, _scratch_dir
    _original_cwd = os.getcwd()
    _scratch_dir = tempfile.mkdtemp(prefix="hello-service-tests-")
    os.chdir(_scratch_dir)


def pytest_unconfigure(config):
    if _original_cwd is not None:
        os.chdir(_original_cwd)
    if _scratch_dir is not None:
        shutil.rmtree(_scratch_dir, ignore_errors=True)


@pytest.fixture
def write_settings(tmp_path):
    """Writes a settings file below tmp_path; keyword arguments override serverSettings, None drops a key."""

    def _write(name="settings.json", **server_settings):
        server = {"host": "127.0.0.1", "port": 8080, "debug": False}
        server.update(server_settings)
        server = {key: value for key, value in server.items() if value is not None}
        path = tmp_path / name
        path.write_text(
            json.dumps(
                {
                    "serverSettings": server,
                    "loggingSettings": {
                        "logDirectory": str(tmp_path / "logs"),
                        "logFileName": "test.log",
                        "maxBytes": 10240,
                        "backupCount": 1,
                        "level": "DEBUG",
                    },
                }
            ),
            encoding="utf-8",
        )
        return path

    return _write


@pytest.fixture
def settings_file(write_settings):
    return write_settings()


@pytest.fixture
def app(settings_file):
    from hello_service.app import create_app

    flask_app = create_app(settings_file=str(settings_file))
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
