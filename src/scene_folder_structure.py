import os
from fnmatch import fnmatch
from typing import Iterator, Tuple
from loguru import logger

from scene import Scene

MARKER_FILE = "yuy_prev_z_i.files"
SCENE_TAGS = ("binFiles", "ac2")
IGNORED = [".DS_Store"]


class SceneFolderStructure:
    """
    Structure of a folder of recorded scenes:
    - root_folder
        - <any depth of grouping folders>
            - <scene>
                - binFiles
                    - ac2
                        - yuy_prev_z_i.files
                        - ...
                - ...

    Every marker file whose two parent folders are named after the scene tags marks
    the folder above them as a scene. Anything else is ignored.
    """

    def __init__(self, folder_path: str, marker: str = MARKER_FILE, scene_tags: Tuple[str, str] = SCENE_TAGS):
        self.folder_path = folder_path
        self.marker = marker
        self.bin_files_tag, self.ac2_tag = scene_tags

    def _check_folder_exists(self) -> bool:
        if not os.path.isdir(self.folder_path):
            logger.warning(f"Folder {self.folder_path} does not exist, no scenes to run")
            return False
        return True

    def get_marker_files(self) -> Iterator[str]:
        """Walk the whole tree and yield the path of every file matching the marker pattern."""
        if not self._check_folder_exists():
            return
        for dirpath, dirnames, filenames in os.walk(self.folder_path):
            dirnames.sort()
            for filename in sorted(filenames):
                if filename in IGNORED:
                    continue
                if fnmatch(filename, self.marker):
                    yield os.path.join(dirpath, filename)

    def _get_scene_dir(self, marker_path: str):
        """
        <scene_dir>/binFiles/ac2/<marker>
        Return the scene folder, or None when the tags don't match or the scene lies above the root
        """
        ac2_dir = os.path.dirname(os.path.abspath(marker_path))
        if os.path.basename(ac2_dir) != self.ac2_tag:
            return None
        bin_files_dir = os.path.dirname(ac2_dir)
        if os.path.basename(bin_files_dir) != self.bin_files_tag:
            return None
        scene_dir = os.path.dirname(bin_files_dir)
        root = os.path.abspath(self.folder_path)
        if scene_dir != root and not scene_dir.startswith(root.rstrip(os.sep) + os.sep):
            return None
        return scene_dir

    def _get_test_name(self, scene_dir: str) -> str:
        test_name = os.path.relpath(scene_dir, os.path.abspath(self.folder_path))
        if test_name == os.curdir:
            # the root itself is a scene
            return os.path.basename(os.path.abspath(self.folder_path))
        return test_name

    def get_scenes(self) -> Iterator[Scene]:
        for marker_path in self.get_marker_files():
            scene_dir = self._get_scene_dir(marker_path)
            if scene_dir is None:
                continue
            yield Scene(test_name=self._get_test_name(scene_dir), scene_dir=scene_dir + os.sep)
