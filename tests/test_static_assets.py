"""Tests for the static asset resolver."""

from blog.services.static_assets import DEFAULT_CONTENT_TYPE, StaticAsset, StaticAssetResolver


def test_resolves_existing_file(static_root) -> None:
    resolver = StaticAssetResolver(str(static_root))

    asset = resolver.resolve("/css/site.css")

    assert asset == StaticAsset(data=b"body { color: black; }\n", content_type="text/css; charset=utf-8")


def test_bytes_are_returned_unchanged(static_root) -> None:
    resolver = StaticAssetResolver(str(static_root))

    asset = resolver.resolve("img/pixel.bin")

    assert asset is not None
    assert asset.data == bytes(range(256))


def test_unknown_extension_falls_back_to_octet_stream(static_root) -> None:
    (static_root / "blob.unknownext").write_bytes(b"\x00\x01")
    resolver = StaticAssetResolver(str(static_root))

    asset = resolver.resolve("blob.unknownext")

    assert asset is not None
    assert asset.content_type == DEFAULT_CONTENT_TYPE


def test_missing_file_is_absent(static_root) -> None:
    resolver = StaticAssetResolver(str(static_root))

    assert resolver.resolve("css/missing.css") is None


def test_directory_is_absent(static_root) -> None:
    resolver = StaticAssetResolver(str(static_root))

    assert resolver.resolve("css") is None
    assert resolver.resolve("/") is None


def test_paths_outside_root_are_absent(static_root, tmp_path) -> None:
    (tmp_path / "secret.txt").write_text("secret", encoding="utf-8")
    resolver = StaticAssetResolver(str(static_root))

    assert resolver.resolve("../secret.txt") is None
    assert resolver.resolve("css/../../secret.txt") is None


def test_non_normalized_paths_are_absent(static_root) -> None:
    resolver = StaticAssetResolver(str(static_root))

    assert resolver.resolve("a/") is None
    assert resolver.resolve("css//site.css") is None
    assert resolver.resolve("css/./site.css") is None
    assert resolver.resolve("a") is not None
