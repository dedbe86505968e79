import errno
import logging
import os
import shutil
import uuid

logger = logging.getLogger(__name__)

def _check_path(name, path):
    if path is None:
        raise TypeError(f"'{name}' must not be None")
    return os.fspath(path)

def create_directory(path):
    """Creates path (and any missing parents). Returns False if it already
    exists or could not be created."""
    path = _check_path("path", path)
    if os.path.isdir(path):
        return False

    try:
        os.makedirs(path)
    except OSError as e:
        logger.warning(f"Could not create directory {path}: {e}")
        return False

    return True

def create_parent_directory(path):
    """Creates the directory that will contain path. Returns False if it
    already exists or could not be created."""
    path = _check_path("path", path)
    parent_dir = os.path.dirname(os.path.abspath(path))
    if os.path.isdir(parent_dir):
        return False

    try:
        os.makedirs(parent_dir)
    except OSError as e:
        logger.warning(f"Could not create directory {parent_dir}: {e}")
        return False

    return True

def delete_directory(path, recursive=True):
    path = _check_path("path", path)
    if not os.path.isdir(path):
        return False

    try:
        if recursive:
            shutil.rmtree(path)
        else:
            os.rmdir(path)
    except OSError as e:
        logger.warning(f"Could not delete directory {path}: {e}")
        return False

    return True

def delete_file(path):
    path = _check_path("path", path)
    if not os.path.isfile(path):
        return False

    try:
        os.remove(path)
    except OSError as e:
        logger.warning(f"Could not delete file {path}: {e}")
        return False

    return True

def move_file(src_path, dest_path, overwrite=False):
    """
    Moves src_path to dest_path. With overwrite=True an existing destination
    file is replaced; returns whether there was one to replace. Errors from the move
    itself (missing source, existing destination without overwrite, ...)
    propagate.
    """
    src_path = _check_path("src_path", src_path)
    dest_path = _check_path("dest_path", dest_path)

    if not overwrite:
        if os.path.exists(dest_path):
            raise FileExistsError(f"Destination already exists: {dest_path}")
        shutil.move(src_path, dest_path)
        return False

    # a failed move leaves an existing destination in place
    replaced_dest = os.path.isfile(dest_path)
    try:
        os.replace(src_path, dest_path)
    except OSError as e:
        if e.errno != errno.EXDEV:
            raise
        shutil.move(src_path, dest_path)

    return replaced_dest

def get_random_file_name():
    """A random file name without an extension (and without a directory)."""
    return uuid.uuid4().hex[:12]
