"""Tests for is_allowed_path: traversal prevention."""

from pagelocator.security import is_allowed_path


class TestIsAllowedPath:
    """Unit tests for is_allowed_path()."""

    # -- Allowed paths --

    def test_root(self) -> None:
        assert is_allowed_path("") is True

    def test_page(self) -> None:
        assert is_allowed_path("three/four") is True

    def test_dotted_name(self) -> None:
        assert is_allowed_path("three/four.tri") is True

    def test_double_dot_inside_name(self) -> None:
        assert is_allowed_path("notes..tri") is True

    # -- Rejected paths --

    def test_parent_segment(self) -> None:
        assert is_allowed_path("../etc/passwd") is False

    def test_inner_parent_segment(self) -> None:
        assert is_allowed_path("three/../../secret") is False

    def test_trailing_parent_segment(self) -> None:
        assert is_allowed_path("three/..") is False

    def test_nul_byte(self) -> None:
        assert is_allowed_path("one\x00.tri") is False

    def test_backslash(self) -> None:
        assert is_allowed_path("..\\windows") is False

    def test_home_prefix(self) -> None:
        assert is_allowed_path("~root/.ssh") is False

    def test_drive_letter(self) -> None:
        assert is_allowed_path("C:/Windows") is False

    def test_non_string(self) -> None:
        assert is_allowed_path(None) is False  # type: ignore[arg-type]
