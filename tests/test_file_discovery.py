"""Tests for recursive file discovery."""

import os
import tempfile
from pathlib import Path

import pytest

from tfvarsub.discovery import find_files


class TestFindFiles:
    """Deterministic discovery by extension."""

    def test_lexical_depth_first_order(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / 'b').mkdir()
            (root / 'c.tfvars').touch()
            (root / 'b' / 'x.tfvars').touch()
            (root / 'a.tfvars').touch()
            (root / 'b.tfvars').touch()

            found = find_files(root, '.tfvars')

            assert [p.relative_to(root).as_posix() for p in found] == [
                'a.tfvars', 'b/x.tfvars', 'b.tfvars', 'c.tfvars'
            ]

    def test_extension_must_match_exactly(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / 'main.tf').touch()
            (root / 'vars.tfvars').touch()
            (root / 'main.tf.bak').touch()

            assert [p.name for p in find_files(root, '.tf')] == ['main.tf']
            assert [p.name for p in find_files(root, '.tfvars')] == ['vars.tfvars']

    def test_excluded_directories_skipped(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / '.terraform' / 'modules').mkdir(parents=True)
            (root / '.terraform' / 'modules' / 'dep.tf').touch()
            (root / 'main.tf').touch()

            found = find_files(root, '.tf', exclude=['.terraform'])

            assert [p.name for p in found] == ['main.tf']

    def test_root_file_returned_alone(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'only.tfvars'
            path.touch()

            assert find_files(path, '.tfvars') == [path]
            assert find_files(path, '.tf') == []

    def test_missing_root_raises(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(FileNotFoundError):
                find_files(Path(tmpdir) / 'missing', '.tf')

    @pytest.mark.skipif(not hasattr(os, 'symlink'), reason='symlinks unsupported')
    def test_symlinked_directories_not_followed(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir) / 'root'
            outside = Path(tmpdir) / 'outside'
            root.mkdir()
            outside.mkdir()
            (outside / 'leak.tf').touch()
            (root / 'link').symlink_to(outside, target_is_directory=True)

            assert find_files(root, '.tf') == []
