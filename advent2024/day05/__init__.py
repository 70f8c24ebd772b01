"""Day 5: page ordering rules and updates."""