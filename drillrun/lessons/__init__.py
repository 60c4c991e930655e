"""Worked solutions to the course exercises, as plain Python."""