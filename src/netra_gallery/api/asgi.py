"""ASGI entrypoint for the gallery API."""

from netra_gallery.api.app import create_app
from netra_gallery.containers import build_container

app = create_app(build_container())
