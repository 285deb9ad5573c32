"""Chart images served under /data."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.testclient import TestClient

from ifr_sketchpad.web.app import mount_chart_images


def test_missing_directory_is_not_mounted(tmp_path, caplog):
    target = FastAPI()
    missing = tmp_path / "no-such-dir"
    with caplog.at_level(logging.WARNING, logger="ifr_sketchpad.web.app"):
        assert mount_chart_images(target, str(missing)) is False
    assert "no-such-dir" in caplog.text

    with TestClient(target) as c:
        resp = c.get("/data/LLBG-SUVAS1.png")
    assert resp.status_code == 404


def test_existing_directory_serves_images(tmp_path):
    (tmp_path / "LLBG-SUVAS1.png").write_bytes(b"\x89PNG")
    target = FastAPI()
    assert mount_chart_images(target, str(tmp_path)) is True

    with TestClient(target) as c:
        found = c.get("/data/LLBG-SUVAS1.png")
        missing = c.get("/data/LLBG-NOPE1.png")
    assert found.status_code == 200
    assert found.content == b"\x89PNG"
    assert missing.status_code == 404


def test_app_image_request_without_directory_is_404(client):
    resp = client.get("/data/LLBG-SUVAS1.png")
    assert resp.status_code == 404
