import pytest

from content_fetch.storage.hasher import ContentHasher


class TestContentHasher:
    def test_equal_content_gives_equal_digest(self) -> None:
        hasher = ContentHasher()
        assert hasher.hash("<html>same</html>") == hasher.hash("<html>same</html>")

    def test_different_content_gives_different_digest(self) -> None:
        hasher = ContentHasher()
        assert hasher.hash("<html>a</html>") != hasher.hash("<html>b</html>")

    def test_text_is_hashed_as_utf8(self) -> None:
        hasher = ContentHasher()
        assert hasher.hash("Grüße") == hasher.hash("Grüße".encode("utf-8"))

    def test_default_is_sha256(self) -> None:
        hasher = ContentHasher()
        assert hasher.algorithm == "sha256"
        assert hasher.hash("hello") == (
            "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
        )

    def test_md5_matches_legacy_keys(self) -> None:
        hasher = ContentHasher("MD5")
        assert hasher.hash("hello") == "5d41402abc4b2a76b9719d911017c592"

    def test_independent_instances_agree(self) -> None:
        assert ContentHasher().hash("x") == ContentHasher().hash("x")

    def test_raises_for_unknown_algorithm(self) -> None:
        with pytest.raises(ValueError, match="Unknown hash algorithm"):
            ContentHasher("crc32")

    @pytest.mark.parametrize("algorithm", ["shake_128", "shake_256"])
    def test_raises_for_variable_length_algorithm(self, algorithm: str) -> None:
        with pytest.raises(ValueError, match="Unknown hash algorithm"):
            ContentHasher(algorithm)
