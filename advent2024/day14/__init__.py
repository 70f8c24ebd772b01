"""Day 14: robots moving on a wrapping floor."""