import os
import stat

import pytest

from usercmd.errors import StorageError
from usercmd.storage import open_resource


class TestOpenResource:
    def test_creates_missing_file(self, users_file):
        with open_resource(users_file) as resource:
            assert resource.read_all() == b""
        assert users_file.exists()

    def test_created_with_permissions(self, users_file):
        old_umask = os.umask(0)
        try:
            with open_resource(users_file, 0o640):
                pass
        finally:
            os.umask(old_umask)
        assert stat.S_IMODE(users_file.stat().st_mode) == 0o640

    def test_existing_file_is_not_truncated(self, users_file):
        users_file.write_bytes(b"[]")
        with open_resource(users_file) as resource:
            assert resource.read_all() == b"[]"

    def test_missing_directory(self, temp_dir):
        with pytest.raises(StorageError) as exc_info:
            open_resource(temp_dir / "nope" / "users.json")
        assert "users.json" in exc_info.value.file_name

    def test_directory_is_not_a_resource(self, temp_dir):
        target = temp_dir / "dir.json"
        target.mkdir()
        with pytest.raises(StorageError):
            open_resource(target)


class TestResource:
    def test_overwrite_replaces_contents(self, users_file):
        users_file.write_bytes(b'[{"id":"1","email":"a@x.com","age":30}]')
        with open_resource(users_file) as resource:
            resource.overwrite(b"[]")
        assert users_file.read_bytes() == b"[]"

    def test_read_after_overwrite(self, users_file):
        with open_resource(users_file) as resource:
            resource.overwrite(b"[1]")
            assert resource.read_all() == b"[1]"

    def test_read_all_twice(self, users_file):
        users_file.write_bytes(b"abc")
        with open_resource(users_file) as resource:
            assert resource.read_all() == b"abc"
            assert resource.read_all() == b"abc"

    def test_closed_on_exit(self, users_file):
        with open_resource(users_file) as resource:
            assert not resource.closed
        assert resource.closed

    def test_closed_on_error(self, users_file):
        with pytest.raises(RuntimeError):
            with open_resource(users_file) as resource:
                raise RuntimeError("boom")
        assert resource.closed

    def test_close_twice(self, users_file):
        resource = open_resource(users_file)
        resource.close()
        resource.close()
        assert resource.closed
