"""
Unit Tests for TransientFile

Deletion is always attempted; a failed deletion is logged, never raised.
"""

import logging

import pytest
from core.export import transient
from core.export.transient import TransientFile


class TestTransientFile:

    def test_file_removed_on_exit(self, temp_dir):
        with TransientFile(temp_dir / "a.docx") as path:
            path.write_bytes(b"data")
            assert path.exists()
        assert not path.exists()

    def test_file_removed_when_body_raises(self, temp_dir):
        scope = TransientFile(temp_dir / "b.docx")
        with pytest.raises(RuntimeError):
            with scope as path:
                path.write_bytes(b"data")
                raise RuntimeError("conversion failed")
        assert not path.exists()
        assert scope.cleaned_up is True

    def test_never_created_file_is_fine(self, temp_dir):
        scope = TransientFile(temp_dir / "never.docx")
        with scope:
            pass
        assert scope.cleaned_up is True

    def test_parent_directory_created(self, temp_dir):
        with TransientFile(temp_dir / "deep" / "c.docx") as path:
            assert path.parent.is_dir()

    def test_failed_deletion_logged_not_raised(self, temp_dir, monkeypatch, caplog):
        def refuse(path):
            raise PermissionError("locked")

        monkeypatch.setattr(transient.os, "remove", refuse)
        scope = TransientFile(temp_dir / "locked.docx")

        with caplog.at_level(logging.WARNING, logger=transient.logger.name):
            with scope as path:
                path.write_bytes(b"data")

        assert scope.cleaned_up is False
        assert "Could not delete temporary document" in caplog.text

    def test_failed_deletion_keeps_body_exception(self, temp_dir, monkeypatch):
        def busy(path):
            raise OSError("busy")

        monkeypatch.setattr(transient.os, "remove", busy)
        with pytest.raises(ValueError):
            with TransientFile(temp_dir / "d.docx") as path:
                path.write_bytes(b"data")
                raise ValueError("original")
