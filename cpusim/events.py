# events.py
from collections import namedtuple


class SimulationListener:
    """
    Base class for consumers of simulation events
    Override any of the hooks; the defaults do nothing.
    """

    def on_step(self, step):
        pass

    def on_finish(self, result):
        pass

    def on_complete(self, results):
        pass


class CallbackListener(SimulationListener):
    """Adapts plain callables (any of them may be None) to the listener interface"""

    def __init__(self, on_step=None, on_finish=None, on_complete=None):
        self._on_step = on_step
        self._on_finish = on_finish
        self._on_complete = on_complete

    def on_step(self, step):
        if self._on_step:
            self._on_step(step)

    def on_finish(self, result):
        if self._on_finish:
            self._on_finish(result)

    def on_complete(self, results):
        if self._on_complete:
            self._on_complete(results)


class Recorder(SimulationListener):
    """Collects the execution history and the final results"""

    def __init__(self):
        self.history = []
        self.finished = []
        self.results = None
        self.completions = 0

    def on_step(self, step):
        self.history.append(step)

    def on_finish(self, result):
        self.finished.append(result)

    def on_complete(self, results):
        self.results = list(results)
        self.completions += 1


# Everything one tick produced. step and finish may be None, complete is
# None unless this tick finished the simulation.
TickEvents = namedtuple("TickEvents", ["step", "finish", "complete"])


class EventChannel:
    """
    Ordered delivery of tick events to every subscribed listener
    Events of one tick are always delivered Step -> Finish -> Complete.
    """

    def __init__(self):
        self._listeners = []

    def subscribe(self, listener):
        """Register a listener, returns it so it can be kept for unsubscribe"""
        if listener not in self._listeners:
            self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def deliver(self, events):
        """Dispatch one TickEvents bundle"""
        listeners = list(self._listeners)
        if events.step is not None:
            for listener in listeners:
                listener.on_step(events.step)
        if events.finish is not None:
            for listener in listeners:
                listener.on_finish(events.finish)
        if events.complete is not None:
            for listener in listeners:
                listener.on_complete(list(events.complete))

    def __len__(self):
        return len(self._listeners)
