"""Simulated external payment processing"""

import random
import threading
import time
from typing import Optional
from paysim.constants import DEFAULT_PROCESSING_DELAY_SECONDS, DEFAULT_FAILURE_RATE
from paysim.utils.errors import ConfigurationError, ProcessingUnavailableError
from paysim.utils.metrics import processing_latency


class ProcessingSimulator:
    """
    Stand-in for a bank/network round trip: a fixed delay followed by a
    random outage that does not depend on the payment.
    """

    def __init__(
        self,
        delay_seconds: float = DEFAULT_PROCESSING_DELAY_SECONDS,
        failure_rate: float = DEFAULT_FAILURE_RATE,
        rng: Optional[random.Random] = None
    ):
        if delay_seconds < 0:
            raise ConfigurationError(f"delay_seconds must be >= 0, got {delay_seconds}")
        if not 0 <= failure_rate <= 1:
            raise ConfigurationError(f"failure_rate must be between 0 and 1, got {failure_rate}")

        self.delay_seconds = delay_seconds
        self.failure_rate = failure_rate
        self.rng = rng or random.Random()
        self._interrupted = threading.Event()
        self._rng_lock = threading.Lock()

    def run(self) -> None:
        """
        Wait out the processing delay, then roll for an outage

        Raises:
            ProcessingUnavailableError: With probability `failure_rate`
        """
        self._interrupted.clear()
        start = time.time()
        if self.delay_seconds > 0:
            self._interrupted.wait(self.delay_seconds)
        processing_latency.observe(time.time() - start)

        with self._rng_lock:
            roll = self.rng.random()

        if roll < self.failure_rate:
            raise ProcessingUnavailableError()

    def interrupt(self) -> None:
        """End the delays of runs already in progress; later runs wait in full"""
        self._interrupted.set()
