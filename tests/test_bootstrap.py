"""
Tests for application directory setup.
"""
import os

import pytest

from dupfinder.core import DirectoryBootstrapFailure, create_app_dir, default_app_dir


class TestCreateAppDir:

    def test_creates_missing_directory(self, app_dir):
        create_app_dir(str(app_dir))
        assert app_dir.is_dir()

    def test_creates_nested_directories(self, temp_dir):
        nested = temp_dir / "a" / "b" / "c"
        create_app_dir(str(nested))
        assert nested.is_dir()

    def test_existing_directory_is_accepted(self, app_dir):
        app_dir.mkdir()
        (app_dir / "state").write_text("keep me")

        create_app_dir(str(app_dir))

        assert (app_dir / "state").read_text() == "keep me"

    def test_existing_file_is_rejected(self, app_dir):
        app_dir.write_bytes(b"")

        with pytest.raises(DirectoryBootstrapFailure) as exc_info:
            create_app_dir(str(app_dir))

        assert exc_info.value.path == str(app_dir)
        assert exc_info.value.cause is None
        assert "expected a directory" in str(exc_info.value)
        assert app_dir.is_file()

    def test_default_app_dir_is_named_after_the_application(self):
        assert os.path.basename(default_app_dir().rstrip(os.sep)) == "dupfinder"
