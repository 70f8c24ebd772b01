"""Day 9: disk maps and compacting file systems."""