import os
import shutil


def list_files(directory: str, extension: str) -> list[str]:
    """Files directly under ``directory`` whose extension matches exactly, sorted by name."""
    ext = extension.lstrip(".")
    found = []
    with os.scandir(directory) as entries:
        for entry in entries:
            if not entry.is_file():
                continue
            _, file_ext = os.path.splitext(entry.name)
            if file_ext.lstrip(".") == ext:
                found.append(entry.path)
    return sorted(found)


def copy_tree_merge(src: str, dst: str) -> None:
    # overwrite same-named files, keep everything else in dst
    shutil.copytree(src, dst, dirs_exist_ok=True)
