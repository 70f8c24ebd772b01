"""Day 9: the dense disk map and compaction of whole files."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from advent2024.day09.file_system import FileSystem


@dataclass
class _Space:
    index: int
    length: int


@dataclass
class _File:
    id: int
    index: int
    length: int


@dataclass
class DiskMap:
    """Alternating file and free-space lengths laid out along a disk."""

    length: int = 0
    files: list[_File] = field(default_factory=list)
    spaces: list[_Space] = field(default_factory=list)

    @classmethod
    def parse(cls, string: str) -> DiskMap:
        sizes = [int(c) for c in string if c in "0123456789"]
        files: list[_File] = []
        spaces: list[_Space] = []
        pos = 0
        for file_id, start in enumerate(range(0, len(sizes), 2)):
            file_size = sizes[start]
            files.append(_File(file_id, pos, file_size))
            pos += file_size
            if start + 1 < len(sizes):
                space_size = sizes[start + 1]
                spaces.append(_Space(pos, space_size))
                pos += space_size
        return cls(pos, files, spaces)

    def build_file_system(self) -> FileSystem:
        fs = FileSystem.with_capacity(self.length)
        for file in self.files:
            fs.add_file(file.id, file.index, file.length)
        return fs

    def compact_fitting_into_spaces(self) -> DiskMap:
        """Move each file, last first, into the leftmost earlier space it fits."""
        spaces = [replace(space) for space in self.spaces]
        files = [replace(file) for file in self.files]
        for file in reversed(files):
            for space in spaces:
                if space.index < file.index and file.length <= space.length:
                    file.index = space.index
                    space.index += file.length
                    space.length = max(0, space.length - file.length)
                    break
        spaces = [space for space in spaces if space.length > 0]
        length = max((file.index + file.length for file in files), default=0)
        return DiskMap(length, files, spaces)