"""A block-by-block view of a disk, each block holding a file id or nothing."""

from __future__ import annotations

from dataclasses import dataclass, field

EMPTY = -1


@dataclass
class FileSystem:
    file_ids: list[int] = field(default_factory=list)

    @classmethod
    def with_capacity(cls, capacity: int) -> FileSystem:
        return cls([EMPTY] * capacity)

    def add_file(self, file_id: int, index: int, length: int) -> None:
        if index + length > len(self.file_ids):
            raise IndexError("file extends past the end of the file system")
        self.file_ids[index : index + length] = [file_id] * length

    def compact_splitting_files(self) -> FileSystem:
        """Fill free blocks from the left with file blocks taken from the right."""
        file_ids = list(self.file_ids)
        ids_from_end = (
            (index, file_id)
            for index, file_id in reversed(list(enumerate(self.file_ids)))
            if file_id != EMPTY
        )
        new_len = len(self.file_ids)
        for index, file_id in enumerate(file_ids):
            if file_id != EMPTY:
                continue
            found = next(ids_from_end, None)
            if found is None:
                raise ValueError("no file blocks to move into free space")
            new_id_index, new_id = found
            if new_id_index < index:
                new_len = min(new_len, index)
                break
            file_ids[index] = new_id
            new_len = new_id_index
        return FileSystem(file_ids[:new_len])

    def checksum(self) -> int:
        return sum(index * file_id for index, file_id in enumerate(self.file_ids) if file_id >= 0)

    def __str__(self) -> str:
        return "".join("." if file_id == EMPTY else str(file_id) for file_id in self.file_ids)