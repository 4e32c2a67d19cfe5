from pathlib import Path

import pytest
from loguru import logger

from bundle_report.models import BundleReport
from tests.helpers import make_node


@pytest.fixture
def demo_report() -> BundleReport:
    return BundleReport(
        name="Demo",
        version="1.0",
        install_size=2048,
        download_size=None,
        artifacts=[
            make_node(
                "Demo.app",
                2048,
                [make_node("Demo.app/Assets.car", 1024, [make_node("x", 1024)])],
            )
        ],
    )


@pytest.fixture
def ipa_file(tmp_path: Path) -> Path:
    path = tmp_path / "App.ipa"
    path.write_bytes(b"PK\x03\x04")
    return path


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()
