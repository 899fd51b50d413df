# io/recorder.py
import json
import logging
import sys
from dataclasses import asdict

from ride_share.app.protocols import Sink

log = logging.getLogger("ride_share.recorder")


class JsonlSink:
    def __init__(self, fp=sys.stdout):
        self.fp = fp

    def write(self, ev) -> None:
        self.fp.write(json.dumps(asdict(ev)) + "\n")


class MemorySink:
    def __init__(self):
        self.events: list = []

    def write(self, ev) -> None:
        self.events.append(ev)


class Recorder:
    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (JsonlSink(),)

    def emit(self, ev):
        for s in self.sinks:
            try:
                s.write(ev)
            except Exception:
                # one broken sink must not starve the others
                log.exception("sink %s failed on %s", type(s).__name__, type(ev).__name__)
