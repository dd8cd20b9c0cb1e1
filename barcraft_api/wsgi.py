"""WSGI entrypoint: ``gunicorn barcraft_api.wsgi:app``."""
from __future__ import annotations

from flask import Flask

from . import create_app
from .config import AppConfig
from .env import load_environment

load_environment()
app = create_app(AppConfig.from_env())


def get_app() -> Flask:
    return app
