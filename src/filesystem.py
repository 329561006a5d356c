""" Filesystem access used by the builtins. """
import os
import shutil


class Filesystem:
    """ Base class for filesystem backends. Every method raises OSError on failure. """
    def exists(self, path) -> bool:
        raise NotImplementedError

    def list_dir(self, path) -> list[str]:
        raise NotImplementedError

    def make_dir(self, path):
        raise NotImplementedError

    def remove_dir(self, path):
        raise NotImplementedError

    def rename(self, src, dest):
        raise NotImplementedError

    def copy(self, src, dest):
        raise NotImplementedError

    def read_text(self, path) -> str:
        raise NotImplementedError

    def write_text(self, path, text):
        raise NotImplementedError


class LocalFilesystem(Filesystem):
    def exists(self, path) -> bool:
        return os.path.exists(path)

    def list_dir(self, path) -> list[str]:
        return sorted(os.listdir(path))

    def make_dir(self, path):
        # Creates parents, and succeeds if the directory is already there
        os.makedirs(path, exist_ok=True)

    def remove_dir(self, path):
        os.rmdir(path)

    def rename(self, src, dest):
        # Replaces an existing destination on every platform
        os.replace(src, dest)

    def copy(self, src, dest):
        shutil.copyfile(src, dest)
        shutil.copymode(src, dest)

    def read_text(self, path) -> str:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def write_text(self, path, text):
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
