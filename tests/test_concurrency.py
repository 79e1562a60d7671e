"""
Test suite for concurrent evaluation - a shared specification tree is safe to evaluate from many threads.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed

from speclogic import all_of, any_of, specification

from .conftest import User


class TestConcurrentEvaluation:
    """Evaluation needs no locking."""

    def test_shared_tree_matches_sequential_results(self, users: list[User]):
        is_adult = specification(lambda user: user.age >= 18)
        is_active = specification(lambda user: user.active)
        is_alice = specification(lambda user: user.name == "Alice")

        tree = any_of(all_of(is_adult, is_active), is_alice).and_not(is_adult.not_().and_(is_active.not_()))
        expected = [tree(user) for user in users]

        num_threads = 32
        barrier = threading.Barrier(num_threads)

        def evaluate_all() -> list[bool]:
            barrier.wait()
            return [tree(user) for user in users]

        with ThreadPoolExecutor(max_workers=num_threads) as executor:
            futures = [executor.submit(evaluate_all) for _ in range(num_threads)]
            results = [f.result() for f in as_completed(futures)]

        assert all(result == expected for result in results)

    def test_concurrent_composition_does_not_affect_operands(self, users: list[User]):
        base = specification(lambda user: user.age >= 18)
        expected = [base(user) for user in users]

        num_threads = 16
        barrier = threading.Barrier(num_threads)

        def compose_and_evaluate(i: int) -> list[bool]:
            barrier.wait()
            composed = base.not_() if i % 2 else base.or_not(base)
            _ = [composed(user) for user in users]
            return [base(user) for user in users]

        with ThreadPoolExecutor(max_workers=num_threads) as executor:
            futures = [executor.submit(compose_and_evaluate, i) for i in range(num_threads)]
            results = [f.result() for f in as_completed(futures)]

        assert all(result == expected for result in results)
