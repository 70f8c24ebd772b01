"""Day 12: garden regions and the price of fencing them."""