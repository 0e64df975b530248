"""
Per-thread RNG Tests

Each thread must get its own generator, and reseeding one thread must not
touch another.
"""

import random
import threading

from packages.calculation import rng
from packages.calculation.tools import floating_number_by_range


class TestCurrent:

    def test_returns_random_instance(self):
        assert isinstance(rng.current(), random.Random)

    def test_same_generator_within_thread(self):
        assert rng.current() is rng.current()

    def test_each_thread_gets_its_own_generator(self):
        generators = []
        lock = threading.Lock()

        def worker():
            gen = rng.current()
            with lock:
                generators.append(gen)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        generators.append(rng.current())
        assert len({id(g) for g in generators}) == len(generators)


class TestSeed:

    def test_reseed_reproduces_sequence(self):
        rng.seed(42)
        first = [floating_number_by_range(100, 50) for _ in range(10)]
        rng.seed(42)
        second = [floating_number_by_range(100, 50) for _ in range(10)]
        assert first == second

    def test_reseed_is_thread_local(self):
        rng.seed(7)
        expected = random.Random(7).random()

        def worker():
            rng.seed(99)
            rng.current().random()

        t = threading.Thread(target=worker)
        t.start()
        t.join()

        assert rng.current().random() == expected
