"""
Tests for ImageScanner - walking a tree and totalling image files.
"""

import os
import pytest
from unittest import mock

from imagescan.scanner import ImageScanner
from conftest import make_file


def scan(root, **kwargs):
    lines = []
    scanner = ImageScanner(str(root), logger=mock.MagicMock(), echo=lines.append, **kwargs)
    return scanner.scan(), lines


class TestImageScanner:
    """Test the ImageScanner class."""

    def test_mixed_case_and_non_images(self, scan_root):
        make_file(scan_root / "a.JPG", 10)
        make_file(scan_root / "b.txt", 5)
        make_file(scan_root / "sub" / "c.png", 20)

        result, lines = scan(scan_root)

        assert result.total_size == 30
        assert result.files_matched == 2
        assert result.dir_counts == {
            str(scan_root): 1,
            str(scan_root / "sub"): 1,
        }
        assert lines == [
            f"File: {scan_root / 'a.JPG'} | Size: 10 bytes",
            f"File: {scan_root / 'sub' / 'c.png'} | Size: 20 bytes",
        ]

    def test_files_without_extension_never_match(self, scan_root):
        make_file(scan_root / "jpg", 10)
        make_file(scan_root / "README", 10)
        make_file(scan_root / ".png", 10)

        result, lines = scan(scan_root)

        assert result.total_size == 0
        assert result.dir_counts == {}
        assert lines == []

    @pytest.mark.parametrize("name", ["shot.HEIC", "raw.Cr2", "scan.TIFF", "logo.svg", "x.dng"])
    def test_recognized_extensions(self, scan_root, name):
        make_file(scan_root / name, 3)

        result, _ = scan(scan_root)

        assert result.total_size == 3
        assert result.dir_counts == {str(scan_root): 1}

    @pytest.mark.parametrize("name", ["clip.mp4", "photo.tif", "archive.jpg.zip", "doc.pdf"])
    def test_unrecognized_extensions(self, scan_root, name):
        make_file(scan_root / name, 3)

        result, _ = scan(scan_root)

        assert result.total_size == 0

    def test_counts_are_per_immediate_directory(self, scan_root):
        make_file(scan_root / "a" / "1.jpg", 1)
        make_file(scan_root / "a" / "2.jpg", 1)
        make_file(scan_root / "a" / "b" / "3.jpg", 1)
        make_file(scan_root / "a" / "b" / "c" / "4.jpg", 1)

        result, _ = scan(scan_root)

        assert result.dir_counts == {
            str(scan_root / "a"): 2,
            str(scan_root / "a" / "b"): 1,
            str(scan_root / "a" / "b" / "c"): 1,
        }
        assert str(scan_root) not in result.dir_counts

    def test_ignored_directories_are_pruned(self, photo_tree):
        result, lines = scan(photo_tree)

        assert result.total_size == 6 * 100 + 5 * 10
        assert str(photo_tree / "Program Files" / "app") not in result.dir_counts
        assert not any("Program Files" in line for line in lines)
        assert result.dirs_skipped == 1

    def test_ignore_is_substring_of_full_path(self, scan_root):
        make_file(scan_root / "MyUsers_backup" / "a.jpg", 7)
        make_file(scan_root / "photos" / "Windows95" / "b.jpg", 7)
        make_file(scan_root / "photos" / "c.jpg", 7)

        result, _ = scan(scan_root)

        assert result.dir_counts == {str(scan_root / "photos"): 1}
        assert result.total_size == 7

    def test_ignore_is_case_sensitive(self, scan_root):
        make_file(scan_root / "users" / "a.jpg", 4)

        result, _ = scan(scan_root)

        assert result.dir_counts == {str(scan_root / "users"): 1}

    def test_segment_matching_only_skips_whole_components(self, scan_root):
        make_file(scan_root / "MyUsers_backup" / "a.jpg", 7)
        make_file(scan_root / "Users" / "b.jpg", 7)

        result, _ = scan(scan_root, ignore_match="segment")

        assert result.dir_counts == {str(scan_root / "MyUsers_backup"): 1}

    def test_ignored_root_is_skipped_entirely(self, scan_root):
        root = scan_root / "data" / "Users" / "photos"
        make_file(root / "a.jpg", 10)
        make_file(root / "nested" / "b.jpg", 10)

        result, lines = scan(root)

        assert result.total_size == 0
        assert result.dir_counts == {}
        assert lines == []

    def test_custom_tables(self, scan_root):
        make_file(scan_root / "keep" / "a.bin", 2)
        make_file(scan_root / "skip" / "b.bin", 2)
        make_file(scan_root / "keep" / "c.jpg", 2)

        result, _ = scan(scan_root, ignore_dirs=["skip"], extensions=[".bin"])

        assert result.dir_counts == {str(scan_root / "keep"): 1}

    def test_rescan_is_idempotent(self, photo_tree):
        first, _ = scan(photo_tree)
        second, _ = scan(photo_tree)

        assert first == second

    def test_trailing_separator_on_root(self, scan_root):
        make_file(scan_root / "a.png", 1)

        result, _ = scan(str(scan_root) + os.sep)

        assert result.dir_counts == {str(scan_root): 1}

    def test_missing_root_raises(self, scan_root):
        with pytest.raises(FileNotFoundError):
            scan(scan_root / "does-not-exist")

    def test_image_file_as_root_is_reported(self, scan_root):
        path = make_file(scan_root / "a.jpg", 7)

        result, lines = scan(path)

        assert result.total_size == 7
        assert result.dir_counts == {str(scan_root): 1}
        assert lines == [f"File: {path} | Size: 7 bytes"]

    def test_other_file_as_root_is_empty(self, scan_root):
        path = make_file(scan_root / "notes.txt", 7)

        result, lines = scan(path)

        assert result.total_size == 0
        assert result.dir_counts == {}
        assert lines == []

    def test_file_root_is_not_subject_to_ignore_list(self, scan_root):
        path = make_file(scan_root / "Users" / "a.png", 3)

        result, _ = scan(path)

        assert result.dir_counts == {str(scan_root / "Users"): 1}

    def test_symlinks_measured_not_followed(self, scan_root, tmp_path):
        target = tmp_path / "elsewhere"
        for i in range(3):
            make_file(target / f"{i}.jpg", 50)
        make_file(scan_root / "real.png", 4)
        try:
            os.symlink(target, scan_root / "linked", target_is_directory=True)
            os.symlink(tmp_path / "gone.jpg", scan_root / "x.jpg")
        except (OSError, NotImplementedError):
            pytest.skip("symlinks are not supported here")

        result, lines = scan(scan_root)

        link_size = os.lstat(scan_root / "x.jpg").st_size
        assert result.dir_counts == {str(scan_root): 2}
        assert result.total_size == 4 + link_size
        assert f"File: {scan_root / 'x.jpg'} | Size: {link_size} bytes" in lines
        assert not any("linked" in line for line in lines)

    def test_stat_error_aborts_scan(self, scan_root):
        make_file(scan_root / "a.jpg", 1)
        make_file(scan_root / "b.jpg", 1)
        lines = []
        scanner = ImageScanner(str(scan_root), logger=mock.MagicMock(), echo=lines.append)

        with mock.patch.object(
            ImageScanner, "_file_size", side_effect=[1, PermissionError(13, "Permission denied")]
        ):
            with pytest.raises(PermissionError):
                scanner.scan()

        # Lines already emitted stay emitted
        assert lines == [f"File: {scan_root / 'a.jpg'} | Size: 1 bytes"]

    def test_stat_error_on_non_image_aborts_scan(self, scan_root):
        make_file(scan_root / "a.jpg", 1)
        make_file(scan_root / "b.txt", 1)
        make_file(scan_root / "c.jpg", 1)
        lines = []
        scanner = ImageScanner(str(scan_root), logger=mock.MagicMock(), echo=lines.append)

        with mock.patch.object(
            ImageScanner, "_file_size", side_effect=[1, PermissionError(13, "Permission denied"), 1]
        ):
            with pytest.raises(PermissionError):
                scanner.scan()

        assert lines == [f"File: {scan_root / 'a.jpg'} | Size: 1 bytes"]

    @pytest.mark.skipif(
        not hasattr(os, "geteuid") or os.geteuid() == 0,
        reason="permission bits are not enforced for root",
    )
    def test_unreadable_directory_aborts_scan(self, scan_root):
        locked = scan_root / "locked"
        make_file(locked / "a.jpg", 1)
        locked.chmod(0)
        try:
            with pytest.raises(PermissionError):
                scan(scan_root)
        finally:
            locked.chmod(0o755)

    def test_matches_are_audited(self, scan_root):
        make_file(scan_root / "a.jpg", 5)
        logger = mock.MagicMock()

        ImageScanner(str(scan_root), logger=logger, echo=lambda line: None).scan()

        logger.audit.assert_called_once()
        assert "a.jpg" in logger.audit.call_args[0][0]

    def test_unknown_ignore_match_rejected(self, scan_root):
        with pytest.raises(ValueError):
            ImageScanner(str(scan_root), ignore_match="regex")
