"""Tests for the asset download orchestrator."""

import pytest

from zeplin_cli.models import AssetFormat, ClassifiedAsset
from zeplin_cli.services.asset_downloader import AssetDownloader, download_all_assets, output_file_name
from tests.conftest import png, svg


def classified(name, content, fmt=AssetFormat.PNG, icon=False):
    return ClassifiedAsset(display_name=name, file_name=name, format=fmt, is_icon=icon, content=content)


class FakeFetch:
    def __init__(self, fail_urls=()):
        self.fail_urls = set(fail_urls)
        self.urls = []

    def __call__(self, url):
        self.urls.append(url)
        if url in self.fail_urls:
            raise RuntimeError("Download failed: 500 Internal Server Error")
        return f"bytes:{url}".encode()


class FakeReencode:
    def __init__(self):
        self.calls = []

    def __call__(self, data, codec, quality):
        self.calls.append((codec, quality))
        return b"webp:" + data


@pytest.fixture
def three_assets():
    return [
        classified("first", png(2, "https://cdn.test/1.png")),
        classified("second", png(2, "https://cdn.test/2.png")),
        classified("third", png(2, "https://cdn.test/3.png")),
    ]


def test_output_file_names():
    assert output_file_name(classified("close", svg(), AssetFormat.SVG, icon=True)) == "close.svg"
    assert output_file_name(classified("close", png(2), icon=True)) == "close.png"
    assert output_file_name(classified("hero", png(2))) == "hero.webp"


def test_one_failure_does_not_stop_others(tmp_path, three_assets):
    fetch = FakeFetch(fail_urls={"https://cdn.test/2.png"})
    result = download_all_assets(three_assets, tmp_path, fetch=fetch, reencode=FakeReencode())

    assert [f.file_name for f in result.success] == ["first.webp", "third.webp"]
    assert [f.file_name for f in result.failed] == ["second.webp"]
    assert "500" in result.failed[0].error
    assert len(fetch.urls) == 3
    assert result.get_stats() == {"success": 2, "failed": 1}
    assert (tmp_path / "first.webp").exists()
    assert not (tmp_path / "second.webp").exists()


def test_only_non_icon_rasters_are_reencoded(tmp_path):
    reencode = FakeReencode()
    assets = [
        classified("ic_close", svg("https://cdn.test/close.svg"), AssetFormat.SVG, icon=True),
        classified("ic_menu", png(2, "https://cdn.test/menu.png"), icon=True),
        classified("hero", png(2, "https://cdn.test/hero.png")),
    ]
    downloader = AssetDownloader(fetch=FakeFetch(), reencode=reencode, quality=75)
    downloader.download_all(assets, tmp_path)

    assert reencode.calls == [("WEBP", 75)]
    assert (tmp_path / "ic_close.svg").read_bytes() == b"bytes:https://cdn.test/close.svg"
    assert (tmp_path / "ic_menu.png").read_bytes() == b"bytes:https://cdn.test/menu.png"
    assert (tmp_path / "hero.webp").read_bytes() == b"webp:bytes:https://cdn.test/hero.png"


def test_reencode_failure_is_recorded(tmp_path):
    def broken(data, codec, quality):
        raise OSError("cannot identify image file")

    result = download_all_assets([classified("hero", png(2))], tmp_path, fetch=FakeFetch(), reencode=broken)
    assert result.success == []
    assert result.failed[0].error == "cannot identify image file"


def test_creates_missing_output_dir(tmp_path):
    target = tmp_path / "nested" / "assets"
    download_all_assets([classified("hero", png(2))], target, fetch=FakeFetch(), reencode=FakeReencode())
    assert (target / "hero.webp").exists()


def test_parallel_matches_sequential(tmp_path, three_assets):
    fetch = FakeFetch(fail_urls={"https://cdn.test/2.png"})
    sequential = download_all_assets(three_assets, tmp_path / "seq", fetch=fetch, reencode=FakeReencode())
    parallel = download_all_assets(
        three_assets, tmp_path / "par", fetch=fetch, reencode=FakeReencode(), workers=3
    )

    assert [f.file_name for f in parallel.success] == [f.file_name for f in sequential.success]
    assert [f.file_name for f in parallel.failed] == [f.file_name for f in sequential.failed]


def test_progress_lines(tmp_path, capsys):
    fetch = FakeFetch(fail_urls={"https://cdn.test/bad.svg"})
    assets = [
        classified("hero", png(1.5, "https://cdn.test/hero.png")),
        classified("ic_bad", svg("https://cdn.test/bad.svg"), AssetFormat.SVG, icon=True),
    ]
    download_all_assets(assets, tmp_path, fetch=fetch, reencode=FakeReencode())

    out = capsys.readouterr().out
    assert "  ✓ hero.webp (@1.5x)" in out
    assert "  ✗ ic_bad: Download failed" in out
