"""
Frame loop example.

Drives a CueScheduler from a fixed-rate loop and prints subtitles as they
appear and disappear, looping once the last cue ends.
"""

import logging
import time

from cuekit import CueHandler, CueScheduler

SUBTITLES = """WEBVTT

00:00.000 --> 00:01.500
Hello there.

00:01.500 --> 00:03.000
These lines show up once each.

00:02.500 --> 00:04.000
Overlapping cues are fine too.
"""


class PrintHandler(CueHandler):
    def on_cue_begin(self, cue):
        print(f"Show subtitle '{cue.text}'")

    def on_cue_end(self, cue):
        print(f"Hide subtitle '{cue.text}'")


def main():
    logging.basicConfig(level=logging.INFO)

    scheduler = CueScheduler(PrintHandler())
    if not scheduler.load(SUBTITLES):
        return

    fps = 30
    last = time.monotonic()
    for _ in range(fps * 6):
        time.sleep(1 / fps)
        now = time.monotonic()
        scheduler.update(now - last)
        last = now


if __name__ == "__main__":
    main()
