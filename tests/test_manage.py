import logging

import pytest
from flask import Flask

import manage
from plantsite.config import DEFAULT_PORT, port_from_env


@pytest.fixture(autouse=True)
def startup_env(monkeypatch, plant_service):
    monkeypatch.setenv("ENV", "test")
    monkeypatch.setattr(manage, "get_plant_service", lambda: plant_service)


def test_main_exits_when_store_init_fails(monkeypatch, plant_service, caplog):
    plant_service.fail = True
    run_calls = []
    monkeypatch.setattr(Flask, "run", lambda self, **kwargs: run_calls.append(kwargs))

    with caplog.at_level(logging.INFO):
        with pytest.raises(SystemExit) as excinfo:
            manage.main()

    assert excinfo.value.code == 1
    assert "Error initializing DB" in caplog.text
    assert run_calls == []


def test_main_starts_server_after_init(monkeypatch, caplog):
    run_calls = []
    monkeypatch.setattr(Flask, "run", lambda self, **kwargs: run_calls.append((self, kwargs)))

    with caplog.at_level(logging.INFO):
        manage.main()

    assert len(run_calls) == 1
    app, kwargs = run_calls[0]
    assert kwargs["port"] == app.config["PORT"]
    assert kwargs["host"] == "0.0.0.0"
    assert f"Server started on port {app.config['PORT']}" in caplog.text


def test_port_defaults_to_8080():
    assert DEFAULT_PORT == 8080
    assert port_from_env({}) == 8080
    assert port_from_env({"PORT": ""}) == 8080


def test_port_from_environment():
    assert port_from_env({"PORT": "3000"}) == 3000
