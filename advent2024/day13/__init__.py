"""Day 13: claw machines and the tokens needed to win."""