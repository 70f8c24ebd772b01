"""Day 10: hiking trails on a topographic map."""