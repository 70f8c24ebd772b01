"""Day 15: a robot pushing boxes around a warehouse."""