"""Day 6 subpackage; it holds no modules."""