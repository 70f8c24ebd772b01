"""Day 7: calibration equations and their operators."""