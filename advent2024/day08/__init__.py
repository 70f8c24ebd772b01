"""Day 8: antennas and their antinodes."""