"""Day 11: decimal digit helpers for engraved stones."""