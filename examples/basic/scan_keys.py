"""Split a line of text into literal and key spans."""

from kbdplus import scan

for span in scan("Press ++Ctrl++ + ++Alt++ + ++Delete++ to restart"):
    print(span)
