"""Day 4: word search for XMAS and X-MAS."""